from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from voyage_aeon.config import DEFAULT_MAX_PROGRESS
from voyage_aeon.modules.narrative.statistics import statistics_snapshot
from voyage_aeon.modules.session.history import NavigationHistory
from voyage_aeon.modules.story.graph import StoryGraph
from voyage_aeon.modules.story.validation import (
    ValidationKind,
    ValidationResult,
    refused,
    validate_choice,
    validate_scene,
)
from voyage_aeon.modules.story_domain.default_endings import TERMINATED_ENDING_NAME
from voyage_aeon.utils.time import isoformat_or_none, utc_now_aware


class SessionStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    ENDED = "ENDED"


class IntegrityWarningKind(str, Enum):
    UNMAPPED_ENDING = "UNMAPPED_ENDING"
    MISSING_CHOICE_DESCRIPTION = "MISSING_CHOICE_DESCRIPTION"


@dataclass(frozen=True, slots=True)
class DataIntegrityWarning:
    kind: IntegrityWarningKind
    key: str
    fallback: str

    def as_dict(self) -> dict:
        return {"kind": self.kind.value, "key": self.key, "fallback": self.fallback}


@dataclass(frozen=True, slots=True)
class ChoiceDetail:
    scene_key: str
    scene_name: str
    choice_label: str
    description: str
    next_scene: str

    def as_dict(self) -> dict:
        return {
            "scene_key": self.scene_key,
            "scene_name": self.scene_name,
            "choice_label": self.choice_label,
            "description": self.description,
            "next_scene": self.next_scene,
        }


@dataclass(slots=True)
class TransitionResult:
    ok: bool
    kind: ValidationKind
    message: str
    scene_key: str | None = None
    ended: bool = False
    warnings: list[DataIntegrityWarning] = field(default_factory=list)

    @classmethod
    def from_validation(cls, result: ValidationResult, *, scene_key: str | None = None) -> "TransitionResult":
        return cls(ok=result.ok, kind=result.kind, message=result.message, scene_key=scene_key)


def _accepted(scene_key: str, *, ended: bool, warnings: list[DataIntegrityWarning]) -> TransitionResult:
    return TransitionResult(
        ok=True,
        kind=ValidationKind.OK,
        message="ok",
        scene_key=scene_key,
        ended=ended,
        warnings=warnings,
    )


class StorySession:
    """One playthrough over an immutable story graph.

    Every mutating call either applies completely or returns a refused result
    and leaves the session untouched. Nothing here logs; callers decide how to
    surface refusals and integrity warnings.
    """

    def __init__(
        self,
        graph: StoryGraph,
        *,
        max_progress: int = DEFAULT_MAX_PROGRESS,
        clock: Callable[[], datetime] = utc_now_aware,
    ) -> None:
        self.graph = graph
        self.max_progress = max(1, int(max_progress))
        self._clock = clock
        self.history = NavigationHistory()
        self._reset()

    def _reset(self) -> None:
        self.status = SessionStatus.NOT_STARTED
        self.current_scene_key: str | None = None
        self.choices: list[str] = []
        self.choice_details: list[ChoiceDetail] = []
        self.story_progress = 0
        self.final_ending: str | None = None
        self.started_at: datetime | None = None
        self.ended_at: datetime | None = None
        self.history.clear()

    def start_story(self) -> TransitionResult:
        if self.status != SessionStatus.NOT_STARTED:
            return TransitionResult.from_validation(
                refused(
                    ValidationKind.SESSION_NOT_ACTIVE,
                    f"session is {self.status.value.lower()}; restart it first",
                ),
            )
        start_key = self.graph.start_key
        check = validate_scene(self.graph, start_key)
        if not check.ok:
            return TransitionResult.from_validation(check, scene_key=start_key)

        self._reset()
        self.status = SessionStatus.IN_PROGRESS
        self.story_progress = 1
        self.started_at = self._clock()
        return self.display_scene(start_key)

    def make_choice(self, next_key: str) -> TransitionResult:
        if self.status != SessionStatus.IN_PROGRESS:
            return TransitionResult.from_validation(
                refused(ValidationKind.SESSION_NOT_ACTIVE, f"session is {self.status.value.lower()}"),
            )
        check = validate_choice(self.graph, next_key, self.current_scene_key)
        if not check.ok:
            return TransitionResult.from_validation(check, scene_key=self.current_scene_key)
        destination = validate_scene(self.graph, next_key)
        if not destination.ok:
            return TransitionResult.from_validation(destination, scene_key=self.current_scene_key)

        source_key = str(self.current_scene_key)
        source = self.graph.get_scene(source_key)
        chosen = source.choice_for(next_key) if source is not None else None
        description, described = self.graph.choice_description(next_key)
        warnings: list[DataIntegrityWarning] = []
        if not described:
            warnings.append(
                DataIntegrityWarning(
                    kind=IntegrityWarningKind.MISSING_CHOICE_DESCRIPTION,
                    key=next_key,
                    fallback=description,
                )
            )

        self.choices.append(next_key)
        self.choice_details.append(
            ChoiceDetail(
                scene_key=source_key,
                scene_name=self.graph.scene_name(source_key),
                choice_label=chosen.label if chosen is not None else "Unknown choice",
                description=description,
                next_scene=next_key,
            )
        )
        self.story_progress += 1

        shown = self.display_scene(next_key)
        shown.warnings[:0] = warnings
        return shown

    def display_scene(self, key: str, add_to_history: bool = True) -> TransitionResult:
        check = validate_scene(self.graph, key)
        if not check.ok:
            return TransitionResult.from_validation(check, scene_key=self.current_scene_key)

        self.current_scene_key = key
        if add_to_history:
            self.history.append(key)

        warnings: list[DataIntegrityWarning] = []
        if self.graph.is_terminal(key) and self.status == SessionStatus.IN_PROGRESS:
            ending, mapped = self.graph.ending_name(key)
            if not mapped:
                warnings.append(
                    DataIntegrityWarning(kind=IntegrityWarningKind.UNMAPPED_ENDING, key=key, fallback=ending)
                )
            self._finish(ending)
        return _accepted(key, ended=self.status == SessionStatus.ENDED, warnings=warnings)

    def stop_story(self) -> TransitionResult:
        if self.status != SessionStatus.IN_PROGRESS:
            return TransitionResult.from_validation(
                refused(ValidationKind.SESSION_NOT_ACTIVE, f"session is {self.status.value.lower()}"),
            )
        self._finish(TERMINATED_ENDING_NAME)
        return _accepted(str(self.current_scene_key), ended=True, warnings=[])

    def restart(self) -> TransitionResult:
        self._reset()
        return _accepted(self.graph.start_key, ended=False, warnings=[])

    def go_back(self) -> TransitionResult:
        return self._navigate(self.history.go_back)

    def go_forward(self) -> TransitionResult:
        return self._navigate(self.history.go_forward)

    def _navigate(self, move: Callable[[], Any]) -> TransitionResult:
        previous_cursor = self.history.cursor
        step = move()
        if not step.ok:
            return TransitionResult(ok=False, kind=step.kind, message=step.message, scene_key=self.current_scene_key)
        shown = self.display_scene(step.scene_key, add_to_history=False)
        if not shown.ok:
            self.history.cursor = previous_cursor
        return shown

    def _finish(self, ending: str) -> None:
        self.final_ending = ending
        self.ended_at = self._clock()
        self.status = SessionStatus.ENDED

    def current_scene(self) -> dict | None:
        key = self.current_scene_key
        scene = self.graph.get_scene(key) if key else None
        if scene is None:
            return None
        return {
            "key": key,
            "name": self.graph.scene_name(key),
            "text": scene.text,
            "choice_labels": [choice.label for choice in scene.choices],
            "choices": [{"label": choice.label, "next": choice.next} for choice in scene.choices],
            "is_terminal": scene.is_terminal,
        }

    def is_terminal(self) -> bool:
        return bool(self.current_scene_key) and self.graph.is_terminal(str(self.current_scene_key))

    def progress(self) -> dict:
        return {"current": min(self.story_progress, self.max_progress), "max": self.max_progress}

    def navigation_affordances(self) -> dict:
        current = self.history.current
        can_go_forward = (
            self.history.has_forward_entries()
            and current is not None
            and not self.graph.is_terminal(current)
        )
        return {"can_go_back": self.history.can_go_back(), "can_go_forward": can_go_forward}

    def choice_log(self) -> list[dict]:
        return [detail.as_dict() for detail in self.choice_details]

    def session_timing(self) -> dict:
        return {"started_at": isoformat_or_none(self.started_at), "ended_at": isoformat_or_none(self.ended_at)}

    def ended_on_story_ending(self) -> bool:
        return self.status == SessionStatus.ENDED and self.final_ending not in (None, TERMINATED_ENDING_NAME)

    def statistics_snapshot(self) -> dict:
        return statistics_snapshot(
            self.choices,
            final_ending=self.final_ending,
            completed=self.ended_on_story_ending(),
            decision_count=len(self.choice_details),
        )
