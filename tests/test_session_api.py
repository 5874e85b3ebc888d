from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from voyage_aeon.config import settings
from voyage_aeon.main import app
from voyage_aeon.modules.session import service as session_service

client = TestClient(app)


def _create() -> dict:
    resp = client.post("/sessions")
    assert resp.status_code == 200, resp.text
    return resp.json()


def _choose(session_id: str, next_scene: str):
    return client.post(f"/sessions/{session_id}/choice", json={"next_scene": next_scene})


def test_create_session_starts_story() -> None:
    body = _create()
    assert body["status"] == "IN_PROGRESS"
    assert body["story_id"] == "voyage_aeon_v1"
    assert body["current_scene"]["key"] == "start"
    assert [c["next"] for c in body["current_scene"]["choices"]] == ["investigate", "scan"]
    assert body["progress"] == {"current": 1, "max": 15}
    assert body["navigation"] == {"can_go_back": False, "can_go_forward": False}
    assert body["history"] == {"entries": ["start"], "cursor": 0}
    assert body["timing"]["started_at"] is not None
    assert body["warnings"] == []


def test_get_unknown_session_returns_404() -> None:
    resp = client.get(f"/sessions/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "SESSION_NOT_FOUND"


def test_full_playthrough_and_report() -> None:
    sid = _create()["id"]
    for key in ("investigate", "board", "crystalStudy"):
        resp = _choose(sid, key)
        assert resp.status_code == 200, resp.text

    resp = _choose(sid, "crystalTechEnding")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ENDED"
    assert body["final_ending"] == "Bio-Tech Symbiosis Pioneer"
    assert body["current_scene"]["is_terminal"] is True

    stats = client.get(f"/sessions/{sid}/statistics").json()
    assert stats["path_archetype"] == "Bold Explorer"
    assert stats["risk_level"] == "High Risk"

    log = client.get(f"/sessions/{sid}/choices").json()
    assert [c["next_scene"] for c in log["choices"]] == ["investigate", "board", "crystalStudy", "crystalTechEnding"]

    report = client.get(f"/sessions/{sid}/report").json()
    assert report["session_id"] == sid
    assert report["final_ending"] == "Bio-Tech Symbiosis Pioneer"
    assert len(report["decision_points"]) == 4


def test_choice_refusals_map_to_http_errors() -> None:
    sid = _create()["id"]

    not_offered = _choose(sid, "board")
    assert not_offered.status_code == 422
    assert not_offered.json()["detail"]["code"] == "CHOICE_NOT_OFFERED"
    assert "investigate" in not_offered.json()["detail"]["message"]

    empty = _choose(sid, "")
    assert empty.status_code == 422
    assert empty.json()["detail"]["code"] == "EMPTY_KEY"

    self_loop = _choose(sid, "start")
    assert self_loop.status_code == 409
    assert self_loop.json()["detail"]["code"] == "SELF_TRANSITION"

    state = client.get(f"/sessions/{sid}").json()
    assert state["choices"] == []
    assert state["progress"]["current"] == 1


def test_choice_payload_rejects_unknown_fields() -> None:
    sid = _create()["id"]
    resp = client.post(f"/sessions/{sid}/choice", json={"next_scene": "scan", "extra": 1})
    assert resp.status_code == 422


def test_choice_after_ending_is_conflict() -> None:
    sid = _create()["id"]
    for key in ("investigate", "communicate", "knowledgeEnding"):
        assert _choose(sid, key).status_code == 200
    resp = _choose(sid, "start")
    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "SESSION_NOT_ACTIVE"


def test_back_and_forward_endpoints() -> None:
    sid = _create()["id"]
    at_start = client.post(f"/sessions/{sid}/back")
    assert at_start.status_code == 409
    assert at_start.json()["detail"]["code"] == "AT_START"

    _choose(sid, "investigate")
    back = client.post(f"/sessions/{sid}/back").json()
    assert back["current_scene"]["key"] == "start"
    assert back["navigation"] == {"can_go_back": False, "can_go_forward": True}

    forward = client.post(f"/sessions/{sid}/forward").json()
    assert forward["current_scene"]["key"] == "investigate"

    at_end = client.post(f"/sessions/{sid}/forward")
    assert at_end.status_code == 409
    assert at_end.json()["detail"]["code"] == "AT_END"


def test_stop_restart_and_start_again() -> None:
    sid = _create()["id"]
    _choose(sid, "scan")

    stopped = client.post(f"/sessions/{sid}/stop").json()
    assert stopped["status"] == "ENDED"
    assert stopped["final_ending"] == "Mission Terminated by User"
    assert client.post(f"/sessions/{sid}/stop").status_code == 409

    restarted = client.post(f"/sessions/{sid}/restart").json()
    assert restarted["status"] == "NOT_STARTED"
    assert restarted["current_scene"] is None
    assert restarted["choices"] == []
    assert restarted["progress"]["current"] == 0
    assert restarted["history"] == {"entries": [], "cursor": -1}

    started = client.post(f"/sessions/{sid}/start").json()
    assert started["status"] == "IN_PROGRESS"
    assert started["current_scene"]["key"] == "start"


def test_scene_stream_emits_paragraphs_then_choices() -> None:
    sid = _create()["id"]
    _choose(sid, "investigate")
    _choose(sid, "board")

    resp = client.get(f"/sessions/{sid}/scene/stream")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    text = resp.text
    assert text.count("event: paragraph") == 2
    assert "event: choices" in text
    assert text.index("event: paragraph") < text.index("event: choices")


def test_scene_stream_for_ending_and_not_started() -> None:
    sid = _create()["id"]
    for key in ("investigate", "communicate", "civilizationEnding"):
        _choose(sid, key)
    resp = client.get(f"/sessions/{sid}/scene/stream")
    assert "event: ending" in resp.text
    assert "Civilization Historian" in resp.text

    client.post(f"/sessions/{sid}/restart")
    not_started = client.get(f"/sessions/{sid}/scene/stream")
    assert not_started.status_code == 409


def test_registry_evicts_oldest_session() -> None:
    settings.session_registry_max = 2
    first = _create()["id"]
    second = _create()["id"]
    third = _create()["id"]

    assert session_service.session_count() == 2
    assert client.get(f"/sessions/{first}").status_code == 404
    assert client.get(f"/sessions/{second}").status_code == 200
    assert client.get(f"/sessions/{third}").status_code == 200


def test_runtime_telemetry_counts_transitions_and_refusals() -> None:
    sid = _create()["id"]
    _choose(sid, "board")
    for key in ("investigate", "communicate", "knowledgeEnding"):
        _choose(sid, key)

    summary = client.get("/telemetry/runtime").json()
    assert summary["sessions_created"] == 1
    assert summary["successful_transitions"] == 3
    assert summary["refused_transitions"] == 1
    assert summary["refusal_distribution"] == {"CHOICE_NOT_OFFERED": 1}
    assert summary["ending_distribution"] == {"Galactic Knowledge Keeper": 1}


def test_start_on_active_session_is_conflict() -> None:
    sid = _create()["id"]
    assert _choose(sid, "scan").status_code == 200

    resp = client.post(f"/sessions/{sid}/start")

    assert resp.status_code == 409
    assert resp.json()["detail"]["code"] == "SESSION_NOT_ACTIVE"
    state = client.get(f"/sessions/{sid}").json()
    assert state["current_scene"]["key"] == "scan"
    assert state["choices"] == ["scan"]
