from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import HTTPException

from voyage_aeon.config import settings
from voyage_aeon.modules.story.graph import StoryGraph
from voyage_aeon.modules.story.schemas import ChoiceOut, SceneOut, StoryDiagnosticsOut, StorySummaryOut
from voyage_aeon.modules.story.validation import story_structural_warnings, validate_story_structural
from voyage_aeon.modules.story_domain.default_story import build_default_story_pack


def _default_pack() -> dict:
    pack = build_default_story_pack()
    pack["story_id"] = settings.story_id
    if settings.story_start_scene:
        pack["start_scene"] = settings.story_start_scene
    return pack


@lru_cache(maxsize=1)
def get_story_graph() -> StoryGraph:
    return StoryGraph.from_pack(_default_pack())


def reset_story_graph_cache() -> None:
    get_story_graph.cache_clear()


def scene_out(graph: StoryGraph, key: str) -> SceneOut:
    scene = graph.get_scene(key)
    if scene is None:
        raise HTTPException(status_code=404, detail={"code": "UNKNOWN_SCENE", "message": f"scene '{key}' not found"})
    return SceneOut(
        key=key,
        name=graph.scene_name(key),
        text=scene.text,
        is_terminal=scene.is_terminal,
        choices=[ChoiceOut(label=c.label, next=c.next) for c in scene.choices],
    )


def story_summary(graph: StoryGraph) -> StorySummaryOut:
    return StorySummaryOut(
        story_id=graph.story_id,
        title=graph.title,
        start_scene=graph.start_key,
        scene_count=len(graph),
        terminal_scene_count=len(graph.terminal_keys()),
        unreachable_scenes=graph.unreachable_scenes(),
    )


def story_diagnostics(pack: dict[str, Any] | None = None) -> StoryDiagnosticsOut:
    raw = pack if pack is not None else _default_pack()
    errors = validate_story_structural(raw)
    return StoryDiagnosticsOut(
        story_id=str(raw.get("story_id") or ""),
        ok=len(errors) == 0,
        errors=errors,
        warnings=story_structural_warnings(raw),
    )
