from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import httpx
import typer

app = typer.Typer(help="Voyage Aeon terminal client")

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"
STATE_PATH = Path(__file__).resolve().parent / ".state.json"


def load_state(path: Path = STATE_PATH) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return {}


def save_state(data: dict[str, Any], path: Path = STATE_PATH) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2))


def forget_session(path: Path = STATE_PATH) -> None:
    state = load_state(path)
    if state.pop("session_id", None) is not None:
        save_state(state, path)


def backend_url() -> str:
    return os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")


def request(
    method: str,
    endpoint: str,
    *,
    json_body: dict[str, Any] | None = None,
) -> httpx.Response:
    url = f"{backend_url()}{endpoint}"
    with httpx.Client(timeout=20.0) as client:
        return client.request(method, url, json=json_body)


def response_detail_code(resp: httpx.Response) -> str | None:
    try:
        payload = resp.json()
    except ValueError:
        return None
    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, dict):
        code = detail.get("code")
        if isinstance(code, str) and code.strip():
            return code.strip()
    return None


def is_session_not_found_response(resp: httpx.Response) -> bool:
    return int(resp.status_code) == 404 and response_detail_code(resp) == "SESSION_NOT_FOUND"


def resolve_choice_target(selection: str, choices: list[dict[str, Any]]) -> str:
    """Map a 1-based menu number onto its scene key; anything else is taken as a key."""

    text = str(selection or "").strip()
    if text.isdigit():
        index = int(text) - 1
        if 0 <= index < len(choices):
            return str(choices[index].get("next") or "")
        raise typer.BadParameter(f"choice number must be between 1 and {len(choices)}")
    return text


def _resolve_session_id(session_id: str | None) -> str:
    if session_id:
        return session_id
    sid = load_state().get("session_id")
    if not sid:
        raise typer.BadParameter("No session_id provided and no saved session in client/.state.json")
    return str(sid)


def _handle_response(resp: httpx.Response, action: str) -> dict[str, Any] | None:
    if is_session_not_found_response(resp):
        forget_session()
        typer.echo(f"{action}: session not found; run `start` to begin a new one.")
        raise typer.Exit(code=1)
    if resp.status_code >= 400:
        code = response_detail_code(resp)
        typer.echo(f"{action} refused ({resp.status_code} {code or 'ERROR'}): {resp.text}")
        raise typer.Exit(code=1)
    try:
        return resp.json()
    except ValueError:
        typer.echo(resp.text)
        return None


def _print_state(body: dict[str, Any]) -> None:
    scene = body.get("current_scene") or {}
    progress = body.get("progress") or {}
    typer.echo(f"[{body.get('status')}] {scene.get('name') or '-'} ({progress.get('current')}/{progress.get('max')})")
    if scene.get("text"):
        typer.echo("")
        typer.echo(scene["text"])
        typer.echo("")

    choices = scene.get("choices") or []
    for idx, choice in enumerate(choices, start=1):
        typer.echo(f"  {idx}. {choice.get('label')}  [{choice.get('next')}]")
    if body.get("final_ending"):
        typer.echo(f"ending: {body['final_ending']}")

    nav = body.get("navigation") or {}
    typer.echo(f"back: {'yes' if nav.get('can_go_back') else 'no'}  forward: {'yes' if nav.get('can_go_forward') else 'no'}")
    for warning in body.get("warnings") or []:
        typer.echo(f"warning: {warning.get('kind')} {warning.get('key')} -> {warning.get('fallback')}")


@app.command()
def ping() -> None:
    resp = request("GET", "/health")
    body = _handle_response(resp, "ping")
    if body is not None:
        typer.echo(f"ok: {body}")


@app.command()
def start() -> None:
    resp = request("POST", "/sessions")
    body = _handle_response(resp, "start")
    if body is None:
        return
    state = load_state()
    state["session_id"] = body.get("id")
    save_state(state)
    typer.echo(f"session_id: {body.get('id')}")
    _print_state(body)


@app.command()
def show(session_id: str | None = typer.Option(default=None, help="Override session id")) -> None:
    sid = _resolve_session_id(session_id)
    body = _handle_response(request("GET", f"/sessions/{sid}"), "show")
    if body is not None:
        _print_state(body)


@app.command()
def choose(
    selection: str = typer.Argument(..., help="Choice number from `show`, or a scene key"),
    session_id: str | None = typer.Option(default=None, help="Override session id"),
) -> None:
    sid = _resolve_session_id(session_id)
    target = selection
    if selection.strip().isdigit():
        current = _handle_response(request("GET", f"/sessions/{sid}"), "choose")
        choices = ((current or {}).get("current_scene") or {}).get("choices") or []
        target = resolve_choice_target(selection, choices)
    body = _handle_response(request("POST", f"/sessions/{sid}/choice", json_body={"next_scene": target}), "choose")
    if body is not None:
        _print_state(body)


@app.command()
def back(session_id: str | None = typer.Option(default=None, help="Override session id")) -> None:
    sid = _resolve_session_id(session_id)
    body = _handle_response(request("POST", f"/sessions/{sid}/back"), "back")
    if body is not None:
        _print_state(body)


@app.command()
def forward(session_id: str | None = typer.Option(default=None, help="Override session id")) -> None:
    sid = _resolve_session_id(session_id)
    body = _handle_response(request("POST", f"/sessions/{sid}/forward"), "forward")
    if body is not None:
        _print_state(body)


@app.command()
def stop(session_id: str | None = typer.Option(default=None, help="Override session id")) -> None:
    sid = _resolve_session_id(session_id)
    body = _handle_response(request("POST", f"/sessions/{sid}/stop"), "stop")
    if body is not None:
        _print_state(body)


@app.command()
def restart(session_id: str | None = typer.Option(default=None, help="Override session id")) -> None:
    sid = _resolve_session_id(session_id)
    if _handle_response(request("POST", f"/sessions/{sid}/restart"), "restart") is None:
        return
    body = _handle_response(request("POST", f"/sessions/{sid}/start"), "restart")
    if body is not None:
        _print_state(body)


@app.command()
def report(session_id: str | None = typer.Option(default=None, help="Override session id")) -> None:
    sid = _resolve_session_id(session_id)
    body = _handle_response(request("GET", f"/sessions/{sid}/report"), "report")
    if body is None:
        return

    typer.echo(f"outcome: {body.get('final_ending') or '-'}")
    typer.echo(f"summary: {body.get('story_summary')}")
    for point in body.get("decision_points", []):
        typer.echo(f"  {point.get('index')}. {point.get('scene_name')}: {point.get('choice_label')} -> {point.get('led_to')}")
    stats = body.get("statistics", {})
    typer.echo(f"approach: {stats.get('path_archetype')}  style: {stats.get('exploration_style')}")
    typer.echo(f"risk: {stats.get('risk_level')} ({stats.get('risk_descriptor')})")
    for achievement in body.get("achievements", []):
        typer.echo(f"  * {achievement.get('title')} - {achievement.get('description')}")
    typer.echo(f"assessment: {body.get('final_assessment')}")


if __name__ == "__main__":
    app()
