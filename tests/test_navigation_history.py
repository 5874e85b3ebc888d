from __future__ import annotations

from voyage_aeon.modules.session.history import NavigationHistory
from voyage_aeon.modules.story.validation import ValidationKind


def _history(*keys: str) -> NavigationHistory:
    history = NavigationHistory()
    for key in keys:
        history.append(key)
    return history


def test_empty_history_has_negative_cursor() -> None:
    history = NavigationHistory()
    assert history.cursor == -1
    assert history.current is None
    assert history.go_back().kind == ValidationKind.AT_START
    assert history.go_forward().kind == ValidationKind.AT_END


def test_append_advances_cursor_to_last_entry() -> None:
    history = _history("A", "B", "C")
    assert history.entries == ["A", "B", "C"]
    assert history.cursor == 2
    assert history.current == "C"


def test_go_back_stops_at_first_entry() -> None:
    history = _history("A", "B")
    assert history.go_back().scene_key == "A"
    refused = history.go_back()
    assert refused.ok is False
    assert refused.kind == ValidationKind.AT_START
    assert history.cursor == 0


def test_go_forward_stops_at_last_entry() -> None:
    history = _history("A", "B")
    refused = history.go_forward()
    assert refused.kind == ValidationKind.AT_END
    assert refused.message == "already at the latest visited scene"
    assert history.cursor == 1


def test_back_then_forward_returns_to_same_scene() -> None:
    history = _history("A", "B", "C")
    before = history.current
    history.go_back()
    moved = history.go_forward()
    assert moved.ok is True
    assert history.current == before


def test_new_branch_discards_forward_entries() -> None:
    history = _history("A", "B", "C")
    history.go_back()
    history.go_back()
    assert history.cursor == 0
    assert history.current == "A"

    history.append("D")

    assert history.entries == ["A", "D"]
    assert history.cursor == 1
    assert history.has_forward_entries() is False


def test_affordance_helpers() -> None:
    history = _history("A")
    assert history.can_go_back() is False
    history.append("B")
    assert history.can_go_back() is True
    history.go_back()
    assert history.has_forward_entries() is True


def test_clear_resets_everything() -> None:
    history = _history("A", "B")
    history.clear()
    assert history.snapshot() == {"entries": [], "cursor": -1}
