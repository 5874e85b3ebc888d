from __future__ import annotations

from fastapi import APIRouter

from voyage_aeon.modules.story.schemas import SceneOut, StoryDiagnosticsOut, StorySummaryOut
from voyage_aeon.modules.story.service_api import get_story_graph, scene_out, story_diagnostics, story_summary

router = APIRouter(prefix="", tags=["story"])


@router.get("/story", response_model=StorySummaryOut)
def get_story():
    return story_summary(get_story_graph())


@router.get("/story/scenes/{scene_key}", response_model=SceneOut)
def get_scene(scene_key: str):
    return scene_out(get_story_graph(), scene_key)


@router.get("/story/diagnostics", response_model=StoryDiagnosticsOut)
def get_story_diagnostics():
    return story_diagnostics()


@router.post("/story/validate", response_model=StoryDiagnosticsOut)
def validate_story_pack(pack: dict):
    return story_diagnostics(pack)
