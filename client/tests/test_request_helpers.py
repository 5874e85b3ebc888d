import httpx
import pytest
import typer

from voyage_cli import (
    DEFAULT_BACKEND_URL,
    backend_url,
    is_session_not_found_response,
    resolve_choice_target,
    response_detail_code,
)


def test_backend_url_default(monkeypatch) -> None:
    monkeypatch.delenv("BACKEND_URL", raising=False)
    assert backend_url() == DEFAULT_BACKEND_URL


def test_backend_url_env(monkeypatch) -> None:
    monkeypatch.setenv("BACKEND_URL", "http://localhost:9999/")
    assert backend_url() == "http://localhost:9999"


def test_response_detail_code_reads_coded_detail() -> None:
    request = httpx.Request("POST", "http://test/sessions/x/choice")
    response = httpx.Response(409, request=request, json={"detail": {"code": "SESSION_NOT_ACTIVE", "message": "x"}})
    assert response_detail_code(response) == "SESSION_NOT_ACTIVE"


def test_response_detail_code_none_for_plain_body() -> None:
    request = httpx.Request("GET", "http://test/health")
    response = httpx.Response(500, request=request, text="boom")
    assert response_detail_code(response) is None


def test_is_session_not_found_response_true() -> None:
    request = httpx.Request("GET", "http://test/sessions/x")
    response = httpx.Response(404, request=request, json={"detail": {"code": "SESSION_NOT_FOUND"}})
    assert is_session_not_found_response(response) is True


def test_is_session_not_found_response_false_for_other_codes() -> None:
    request = httpx.Request("GET", "http://test/story/scenes/x")
    response = httpx.Response(404, request=request, json={"detail": {"code": "UNKNOWN_SCENE"}})
    assert is_session_not_found_response(response) is False


def test_resolve_choice_target_by_number() -> None:
    choices = [{"label": "Investigate", "next": "investigate"}, {"label": "Scan", "next": "scan"}]
    assert resolve_choice_target("2", choices) == "scan"


def test_resolve_choice_target_passes_keys_through() -> None:
    assert resolve_choice_target(" board ", []) == "board"


def test_resolve_choice_target_rejects_out_of_range_number() -> None:
    with pytest.raises(typer.BadParameter):
        resolve_choice_target("3", [{"label": "Only", "next": "scan"}])
