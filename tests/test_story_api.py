from __future__ import annotations

from fastapi.testclient import TestClient

from voyage_aeon.main import app
from tests.support.story_fixtures import tiny_pack

client = TestClient(app)


def test_story_summary() -> None:
    body = client.get("/story").json()
    assert body["story_id"] == "voyage_aeon_v1"
    assert body["title"] == "Voyage Aeon"
    assert body["start_scene"] == "start"
    assert body["scene_count"] == 33
    assert body["terminal_scene_count"] == 18
    assert body["unreachable_scenes"] == ["consciousnessEnding", "stationNetwork"]


def test_get_scene() -> None:
    body = client.get("/story/scenes/crystalTechEnding").json()
    assert body["name"] == "Living Crystal Study"
    assert body["is_terminal"] is True
    assert body["choices"] == []


def test_get_unknown_scene_returns_404() -> None:
    resp = client.get("/story/scenes/ghost")
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "UNKNOWN_SCENE"


def test_story_diagnostics_for_built_in_story() -> None:
    body = client.get("/story/diagnostics").json()
    assert body["ok"] is True
    assert body["errors"] == []
    assert body["warnings"] == ["UNREACHABLE_SCENE:consciousnessEnding", "UNREACHABLE_SCENE:stationNetwork"]


def test_validate_submitted_pack() -> None:
    pack = tiny_pack()
    pack["scenes"]["a"]["choices"].append({"label": "Ghost", "next": "ghost"})
    body = client.post("/story/validate", json=pack).json()
    assert body["story_id"] == "tiny"
    assert "DANGLING_NEXT_SCENE:a->ghost" in body["errors"]


def test_validate_pack_with_non_mapping_lookup_tables() -> None:
    pack = tiny_pack()
    pack["scene_names"] = ["a"]
    pack["choice_descriptions"] = "oops"

    resp = client.post("/story/validate", json=pack)

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is False
    assert "MALFORMED_LOOKUP_TABLE:scene_names" in body["errors"]
    assert "MALFORMED_LOOKUP_TABLE:choice_descriptions" in body["errors"]
    assert "MALFORMED_LOOKUP_TABLE:ending_names" not in body["errors"]


def test_validate_pack_reports_unreachable_scenes_as_warnings() -> None:
    pack = tiny_pack()
    pack["ending_names"]["e"] = "Echo Ending"
    pack["scenes"]["orphan"] = {"text": "Alone.", "choices": []}
    pack["ending_names"]["orphan"] = "Orphan Ending"

    body = client.post("/story/validate", json=pack).json()

    assert body["ok"] is True
    assert body["errors"] == []
    assert body["warnings"] == ["UNREACHABLE_SCENE:orphan"]
