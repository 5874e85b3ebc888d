from pathlib import Path

from voyage_cli import forget_session, load_state, save_state


def test_load_state_missing_file_returns_empty(tmp_path: Path) -> None:
    p = tmp_path / ".state.json"
    assert load_state(p) == {}


def test_save_and_load_state(tmp_path: Path) -> None:
    p = tmp_path / ".state.json"
    payload = {"session_id": "s1"}
    save_state(payload, p)
    assert load_state(p) == payload


def test_load_state_invalid_json_returns_empty(tmp_path: Path) -> None:
    p = tmp_path / ".state.json"
    p.write_text("not-json")
    assert load_state(p) == {}


def test_forget_session_drops_only_session_id(tmp_path: Path) -> None:
    p = tmp_path / ".state.json"
    save_state({"session_id": "s1", "other": 1}, p)
    forget_session(p)
    assert load_state(p) == {"other": 1}
