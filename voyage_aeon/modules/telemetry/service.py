from __future__ import annotations

from collections import Counter
from statistics import mean
from threading import Lock


class _RuntimeTelemetryStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._success_latencies_ms: list[float] = []
        self.sessions_created: int = 0
        self.total_transition_requests: int = 0
        self.successful_transitions: int = 0
        self.refused_transitions: int = 0
        self.integrity_warnings: int = 0
        self.refusal_distribution: Counter[str] = Counter()
        self.ending_distribution: Counter[str] = Counter()

    def reset(self) -> None:
        with self._lock:
            self._success_latencies_ms = []
            self.sessions_created = 0
            self.total_transition_requests = 0
            self.successful_transitions = 0
            self.refused_transitions = 0
            self.integrity_warnings = 0
            self.refusal_distribution = Counter()
            self.ending_distribution = Counter()

    def record_session_created(self) -> None:
        with self._lock:
            self.sessions_created += 1

    def record_success(self, *, latency_ms: float, ending: str | None = None, warning_count: int = 0) -> None:
        with self._lock:
            self.total_transition_requests += 1
            self.successful_transitions += 1
            self.integrity_warnings += max(0, int(warning_count))
            self._success_latencies_ms.append(float(latency_ms))
            if len(self._success_latencies_ms) > 1000:
                self._success_latencies_ms = self._success_latencies_ms[-1000:]
            if ending:
                self.ending_distribution[str(ending)] += 1

    def record_refusal(self, *, error_code: str) -> None:
        with self._lock:
            self.total_transition_requests += 1
            self.refused_transitions += 1
            self.refusal_distribution[str(error_code)] += 1

    def summary(self) -> dict:
        with self._lock:
            latencies = list(self._success_latencies_ms)
            total = int(self.total_transition_requests)
            refusal_rate = 0.0 if total <= 0 else float(self.refused_transitions) / float(total)

            avg_latency = float(mean(latencies)) if latencies else 0.0
            p95_latency = 0.0
            if latencies:
                ordered = sorted(latencies)
                idx = max(0, min(len(ordered) - 1, round(0.95 * (len(ordered) - 1))))
                p95_latency = float(ordered[idx])

            return {
                "sessions_created": int(self.sessions_created),
                "total_transition_requests": total,
                "successful_transitions": int(self.successful_transitions),
                "refused_transitions": int(self.refused_transitions),
                "refusal_rate": round(refusal_rate, 4),
                "avg_transition_latency_ms": round(avg_latency, 3),
                "p95_transition_latency_ms": round(p95_latency, 3),
                "integrity_warnings": int(self.integrity_warnings),
                "refusal_distribution": dict(self.refusal_distribution),
                "ending_distribution": dict(self.ending_distribution),
            }


_runtime_telemetry = _RuntimeTelemetryStore()


def reset_runtime_telemetry() -> None:
    _runtime_telemetry.reset()


def record_session_created() -> None:
    _runtime_telemetry.record_session_created()


def record_transition_success(*, latency_ms: float, ending: str | None = None, warning_count: int = 0) -> None:
    _runtime_telemetry.record_success(latency_ms=latency_ms, ending=ending, warning_count=warning_count)


def record_transition_refusal(*, error_code: str) -> None:
    _runtime_telemetry.record_refusal(error_code=error_code)


def get_runtime_telemetry_summary() -> dict:
    return _runtime_telemetry.summary()
