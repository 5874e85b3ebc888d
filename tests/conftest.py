from __future__ import annotations

import pytest

from voyage_aeon.config import DEFAULT_MAX_PROGRESS, DEFAULT_STORY_ID, settings
from voyage_aeon.modules.session.service import reset_session_registry
from voyage_aeon.modules.story.service_api import reset_story_graph_cache
from voyage_aeon.modules.telemetry.service import reset_runtime_telemetry


@pytest.fixture(autouse=True)
def _reset_runtime_state() -> None:
    settings.story_id = DEFAULT_STORY_ID
    settings.story_start_scene = "start"
    settings.max_progress = DEFAULT_MAX_PROGRESS
    settings.session_registry_max = 256
    settings.scene_stream_paragraph_delay_s = 0.0
    reset_story_graph_cache()
    reset_session_registry()
    reset_runtime_telemetry()
    yield
    reset_session_registry()
    reset_runtime_telemetry()
    reset_story_graph_cache()
