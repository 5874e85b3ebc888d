from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from voyage_aeon.modules.story.graph import StoryGraph
from voyage_aeon.modules.story.schemas import StoryScene


class ValidationKind(str, Enum):
    OK = "OK"
    EMPTY_KEY = "EMPTY_KEY"
    SESSION_NOT_LOADED = "SESSION_NOT_LOADED"
    UNKNOWN_SCENE = "UNKNOWN_SCENE"
    UNKNOWN_CURRENT_SCENE = "UNKNOWN_CURRENT_SCENE"
    NO_CHOICES_AVAILABLE = "NO_CHOICES_AVAILABLE"
    CHOICE_NOT_OFFERED = "CHOICE_NOT_OFFERED"
    DANGLING_TARGET = "DANGLING_TARGET"
    SELF_TRANSITION = "SELF_TRANSITION"
    MALFORMED_SCENE = "MALFORMED_SCENE"
    SESSION_NOT_ACTIVE = "SESSION_NOT_ACTIVE"
    AT_START = "AT_START"
    AT_END = "AT_END"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    ok: bool
    kind: ValidationKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True}
        return {"ok": False, "kind": self.kind.value, "message": self.message}


VALID = ValidationResult(ok=True, kind=ValidationKind.OK, message="ok")


def refused(kind: ValidationKind, message: str, **details: Any) -> ValidationResult:
    return ValidationResult(ok=False, kind=kind, message=message, details=details)


def _is_blank_key(key: Any) -> bool:
    return not isinstance(key, str) or not key.strip()


def scene_structure_problems(raw_scene: Any) -> list[str]:
    """Return the reasons a raw scene mapping does not satisfy the scene record shape."""

    if isinstance(raw_scene, StoryScene):
        return []
    if not isinstance(raw_scene, Mapping):
        return ["scene_not_mapping"]

    problems: list[str] = []
    text = raw_scene.get("text")
    if not isinstance(text, str) or not text.strip():
        problems.append("text_missing")

    choices = raw_scene.get("choices")
    if not isinstance(choices, (list, tuple)):
        problems.append("choices_not_list")
        return problems

    for idx, choice in enumerate(choices):
        if not isinstance(choice, Mapping):
            problems.append(f"choice_{idx}_not_mapping")
            continue
        label = choice.get("label")
        if not isinstance(label, str) or not label.strip():
            problems.append(f"choice_{idx}_label_missing")
        target = choice.get("next")
        if not isinstance(target, str) or not target.strip():
            problems.append(f"choice_{idx}_target_missing")
    return problems


def validate_scene(graph: StoryGraph | None, key: Any) -> ValidationResult:
    if _is_blank_key(key):
        return refused(ValidationKind.EMPTY_KEY, "scene key must be a non-empty string")
    if graph is None:
        return refused(ValidationKind.SESSION_NOT_LOADED, "story graph is not loaded")
    if key not in graph:
        return refused(ValidationKind.UNKNOWN_SCENE, f"scene '{key}' does not exist", scene=key)

    problems = scene_structure_problems(graph.raw_scene(key))
    if problems or graph.get_scene(key) is None:
        return refused(
            ValidationKind.MALFORMED_SCENE,
            f"scene '{key}' is malformed: {', '.join(problems) or 'schema_mismatch'}",
            scene=key,
            problems=problems,
        )
    return VALID


def validate_choice(graph: StoryGraph | None, next_key: Any, current_key: Any) -> ValidationResult:
    if _is_blank_key(next_key):
        return refused(ValidationKind.EMPTY_KEY, "choice key must be a non-empty string")
    if graph is None:
        return refused(ValidationKind.SESSION_NOT_LOADED, "story graph is not loaded")

    current = graph.get_scene(current_key) if isinstance(current_key, str) else None
    if current is None:
        return refused(
            ValidationKind.UNKNOWN_CURRENT_SCENE,
            f"current scene '{current_key}' does not exist",
            scene=current_key,
        )
    # Self transitions are refused ahead of the terminal and offered-set checks.
    if next_key == current_key:
        return refused(
            ValidationKind.SELF_TRANSITION,
            f"scene '{current_key}' cannot transition to itself",
            scene=current_key,
        )
    if current.is_terminal:
        return refused(
            ValidationKind.NO_CHOICES_AVAILABLE,
            f"scene '{current_key}' is an ending and offers no choices",
            scene=current_key,
        )

    offered = current.choice_targets
    if next_key not in offered:
        return refused(
            ValidationKind.CHOICE_NOT_OFFERED,
            f"'{next_key}' is not offered from '{current_key}'; valid choices: {', '.join(offered)}",
            scene=current_key,
            valid_choices=offered,
        )
    if next_key not in graph:
        return refused(
            ValidationKind.DANGLING_TARGET,
            f"'{next_key}' is offered from '{current_key}' but is not a scene",
            scene=current_key,
            target=next_key,
        )
    return VALID


LOOKUP_TABLES = ("scene_names", "ending_names", "choice_descriptions")


def validate_story_structural(pack: Mapping[str, Any]) -> list[str]:
    """Authoring errors for a raw story pack, as sorted error codes."""

    errors: list[str] = []
    scenes = pack.get("scenes") if isinstance(pack, Mapping) else None
    if not isinstance(scenes, Mapping) or not scenes:
        return ["MISSING_SCENES"]

    start_scene = str(pack.get("start_scene") or "")
    if start_scene not in scenes:
        errors.append(f"MISSING_START_SCENE:{start_scene}")

    for table in LOOKUP_TABLES:
        value = pack.get(table)
        if value is not None and not isinstance(value, Mapping):
            errors.append(f"MALFORMED_LOOKUP_TABLE:{table}")
    ending_names = pack.get("ending_names") if isinstance(pack.get("ending_names"), Mapping) else {}

    for key, raw_scene in scenes.items():
        problems = scene_structure_problems(raw_scene)
        for problem in problems:
            if problem == "text_missing":
                errors.append(f"EMPTY_SCENE_TEXT:{key}")
            elif problem.endswith("_label_missing"):
                errors.append(f"MISSING_CHOICE_LABEL:{key}:{problem.split('_')[1]}")
            elif problem.endswith("_target_missing"):
                errors.append(f"MISSING_CHOICE_TARGET:{key}:{problem.split('_')[1]}")
            else:
                errors.append(f"MALFORMED_SCENE:{key}:{problem}")

        choices = raw_scene.get("choices") if isinstance(raw_scene, Mapping) else None
        if not isinstance(choices, (list, tuple)):
            continue
        if len(choices) == 0 and key not in ending_names:
            errors.append(f"UNMAPPED_ENDING_NAME:{key}")

        seen_targets: set[str] = set()
        for choice in choices:
            if not isinstance(choice, Mapping):
                continue
            target = choice.get("next")
            if not isinstance(target, str) or not target.strip():
                continue
            if target == key:
                errors.append(f"SELF_LOOP_CHOICE:{key}")
            if target not in scenes:
                errors.append(f"DANGLING_NEXT_SCENE:{key}->{target}")
            if target in seen_targets:
                errors.append(f"DUPLICATE_CHOICE_TARGET:{key}->{target}")
            seen_targets.add(target)

    return sorted(set(errors))


def story_structural_warnings(pack: Mapping[str, Any]) -> list[str]:
    """Non-blocking authoring findings: scenes no playthrough from the start scene can visit."""

    scenes = pack.get("scenes") if isinstance(pack, Mapping) else None
    if not isinstance(scenes, Mapping) or str(pack.get("start_scene") or "") not in scenes:
        return []
    graph = StoryGraph.from_unchecked(pack)
    return sorted(f"UNREACHABLE_SCENE:{key}" for key in graph.unreachable_scenes())
