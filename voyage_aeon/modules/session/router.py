import json
import uuid

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from voyage_aeon.modules.session import service
from voyage_aeon.modules.session.schemas import ChoiceLogOut, ChoiceRequest, SessionStateOut, StatisticsOut

router = APIRouter(prefix="", tags=["sessions"])


def _sse_encode(event_name: str, payload: dict) -> str:
    return f"event: {event_name}\ndata: {json.dumps(payload, ensure_ascii=False)}\n\n"


@router.post("/sessions", response_model=SessionStateOut)
def create_session():
    return service.create_session()


@router.get("/sessions/{session_id}", response_model=SessionStateOut)
def get_session(session_id: uuid.UUID):
    return service.get_session_state(session_id)


@router.post("/sessions/{session_id}/start", response_model=SessionStateOut)
def start_session(session_id: uuid.UUID):
    return service.start_session(session_id)


@router.post("/sessions/{session_id}/choice", response_model=SessionStateOut)
def make_choice(session_id: uuid.UUID, payload: ChoiceRequest):
    return service.make_choice(session_id, payload.next_scene)


@router.post("/sessions/{session_id}/back", response_model=SessionStateOut)
def go_back(session_id: uuid.UUID):
    return service.go_back(session_id)


@router.post("/sessions/{session_id}/forward", response_model=SessionStateOut)
def go_forward(session_id: uuid.UUID):
    return service.go_forward(session_id)


@router.post("/sessions/{session_id}/stop", response_model=SessionStateOut)
def stop_session(session_id: uuid.UUID):
    return service.stop_session(session_id)


@router.post("/sessions/{session_id}/restart", response_model=SessionStateOut)
def restart_session(session_id: uuid.UUID):
    return service.restart_session(session_id)


@router.get("/sessions/{session_id}/statistics", response_model=StatisticsOut)
def get_statistics(session_id: uuid.UUID):
    return service.get_statistics(session_id)


@router.get("/sessions/{session_id}/choices", response_model=ChoiceLogOut)
def get_choice_log(session_id: uuid.UUID):
    return service.get_choice_log(session_id)


@router.get("/sessions/{session_id}/report")
def get_report(session_id: uuid.UUID) -> dict:
    return service.get_report(session_id)


@router.get("/sessions/{session_id}/scene/stream")
def stream_scene(session_id: uuid.UUID):
    events = service.scene_stream(session_id)

    def _event_stream():
        for event_name, data in events:
            yield _sse_encode(event_name, data if isinstance(data, dict) else {})

    return StreamingResponse(_event_stream(), media_type="text/event-stream")
