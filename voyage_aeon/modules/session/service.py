from __future__ import annotations

import logging
import time
import uuid
from collections import OrderedDict
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from threading import Lock

from fastapi import HTTPException

from voyage_aeon.config import settings
from voyage_aeon.modules.narrative.display import iter_scene_events
from voyage_aeon.modules.report.engine import build_mission_report
from voyage_aeon.modules.session.schemas import SessionStateOut
from voyage_aeon.modules.session.state import SessionStatus, StorySession, TransitionResult
from voyage_aeon.modules.story.service_api import get_story_graph
from voyage_aeon.modules.story.validation import ValidationKind
from voyage_aeon.modules.telemetry.service import (
    record_session_created,
    record_transition_refusal,
    record_transition_success,
)

logger = logging.getLogger(__name__)

_CONFLICT_KINDS = frozenset(
    {
        ValidationKind.SESSION_NOT_ACTIVE,
        ValidationKind.AT_START,
        ValidationKind.AT_END,
        ValidationKind.NO_CHOICES_AVAILABLE,
        ValidationKind.SELF_TRANSITION,
    }
)


class _SessionRegistry:
    def __init__(self) -> None:
        self.lock = Lock()
        self._sessions: OrderedDict[uuid.UUID, StorySession] = OrderedDict()

    def reset(self) -> None:
        with self.lock:
            self._sessions = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def add(self, session_id: uuid.UUID, story_session: StorySession, *, max_size: int) -> None:
        while len(self._sessions) >= max_size:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("session registry full (max=%s); evicted session %s", max_size, evicted_id)
        self._sessions[session_id] = story_session

    def require(self, session_id: uuid.UUID) -> StorySession:
        story_session = self._sessions.get(session_id)
        if story_session is None:
            raise HTTPException(
                status_code=404,
                detail={"code": "SESSION_NOT_FOUND", "message": f"session '{session_id}' not found"},
            )
        return story_session


_registry = _SessionRegistry()


def reset_session_registry() -> None:
    _registry.reset()


def session_count() -> int:
    with _registry.lock:
        return len(_registry)


@contextmanager
def _session_scope(session_id: uuid.UUID) -> Iterator[StorySession]:
    with _registry.lock:
        yield _registry.require(session_id)


def _status_for(kind: ValidationKind) -> int:
    if kind in _CONFLICT_KINDS:
        return 409
    if kind == ValidationKind.SESSION_NOT_LOADED:
        return 503
    return 422


def _refusal_error(result: TransitionResult) -> HTTPException:
    return HTTPException(
        status_code=_status_for(result.kind),
        detail={"code": result.kind.value, "message": result.message},
    )


def _serialize_state(
    session_id: uuid.UUID,
    story_session: StorySession,
    result: TransitionResult | None = None,
) -> SessionStateOut:
    return SessionStateOut(
        id=session_id,
        story_id=story_session.graph.story_id,
        status=story_session.status.value,
        current_scene=story_session.current_scene(),
        progress=story_session.progress(),
        navigation=story_session.navigation_affordances(),
        history=story_session.history.snapshot(),
        final_ending=story_session.final_ending,
        choices=list(story_session.choices),
        timing=story_session.session_timing(),
        warnings=[warning.as_dict() for warning in (result.warnings if result is not None else [])],
    )


def _run_transition(
    session_id: uuid.UUID,
    action: str,
    operation: Callable[[StorySession], TransitionResult],
) -> SessionStateOut:
    started = time.perf_counter()
    with _session_scope(session_id) as story_session:
        was_in_progress = story_session.status == SessionStatus.IN_PROGRESS
        result = operation(story_session)
        if not result.ok:
            record_transition_refusal(error_code=result.kind.value)
            logger.info("session %s %s refused: %s (%s)", session_id, action, result.kind.value, result.message)
            raise _refusal_error(result)

        for warning in result.warnings:
            logger.warning(
                "session %s %s data integrity warning: %s key=%s fallback=%s",
                session_id,
                action,
                warning.kind.value,
                warning.key,
                warning.fallback,
            )
        just_ended = was_in_progress and story_session.status == SessionStatus.ENDED
        if just_ended:
            logger.info("session %s ended: %s", session_id, story_session.final_ending)
        record_transition_success(
            latency_ms=(time.perf_counter() - started) * 1000.0,
            ending=story_session.final_ending if just_ended else None,
            warning_count=len(result.warnings),
        )
        return _serialize_state(session_id, story_session, result)


def create_session() -> SessionStateOut:
    story_session = StorySession(get_story_graph(), max_progress=settings.max_progress)
    session_id = uuid.uuid4()
    result = story_session.start_story()
    if not result.ok:
        record_transition_refusal(error_code=result.kind.value)
        logger.info("session start refused: %s (%s)", result.kind.value, result.message)
        raise _refusal_error(result)

    with _registry.lock:
        _registry.add(session_id, story_session, max_size=settings.session_registry_max)
    record_session_created()
    logger.info("session %s created for story %s", session_id, story_session.graph.story_id)
    return _serialize_state(session_id, story_session, result)


def get_session_state(session_id: uuid.UUID) -> SessionStateOut:
    with _session_scope(session_id) as story_session:
        return _serialize_state(session_id, story_session)


def start_session(session_id: uuid.UUID) -> SessionStateOut:
    return _run_transition(session_id, "start", lambda s: s.start_story())


def make_choice(session_id: uuid.UUID, next_scene: str) -> SessionStateOut:
    return _run_transition(session_id, "choice", lambda s: s.make_choice(next_scene))


def go_back(session_id: uuid.UUID) -> SessionStateOut:
    return _run_transition(session_id, "back", lambda s: s.go_back())


def go_forward(session_id: uuid.UUID) -> SessionStateOut:
    return _run_transition(session_id, "forward", lambda s: s.go_forward())


def stop_session(session_id: uuid.UUID) -> SessionStateOut:
    return _run_transition(session_id, "stop", lambda s: s.stop_story())


def restart_session(session_id: uuid.UUID) -> SessionStateOut:
    return _run_transition(session_id, "restart", lambda s: s.restart())


def get_statistics(session_id: uuid.UUID) -> dict:
    with _session_scope(session_id) as story_session:
        return story_session.statistics_snapshot()


def get_choice_log(session_id: uuid.UUID) -> dict:
    with _session_scope(session_id) as story_session:
        return {"session_id": session_id, "choices": story_session.choice_log()}


def get_report(session_id: uuid.UUID) -> dict:
    with _session_scope(session_id) as story_session:
        report = build_mission_report(story_session)
    report["session_id"] = str(session_id)
    return report


def scene_stream(session_id: uuid.UUID) -> Iterator[tuple[str, dict]]:
    """Resolve the scene under the registry lock, then pace its display events outside it."""

    with _session_scope(session_id) as story_session:
        key = story_session.current_scene_key
        scene = story_session.graph.get_scene(key) if key else None
        if key is None or scene is None:
            raise HTTPException(
                status_code=409,
                detail={"code": ValidationKind.SESSION_NOT_ACTIVE.value, "message": "session has no current scene"},
            )
        if story_session.status == SessionStatus.ENDED and story_session.is_terminal():
            ending_name = story_session.final_ending
        else:
            ending_name = story_session.graph.ending_name(key)[0] if scene.is_terminal else None

    delay_s = float(settings.scene_stream_paragraph_delay_s)

    def _events() -> Iterator[tuple[str, dict]]:
        for event_name, payload in iter_scene_events(key, scene, ending_name=ending_name):
            yield event_name, payload
            if event_name == "paragraph" and delay_s > 0:
                time.sleep(delay_s)

    return _events()
