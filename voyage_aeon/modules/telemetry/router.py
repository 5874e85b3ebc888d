from __future__ import annotations

from fastapi import APIRouter

from voyage_aeon.modules.telemetry.service import get_runtime_telemetry_summary

router = APIRouter(prefix="/telemetry", tags=["telemetry"])


@router.get("/runtime")
def runtime_telemetry() -> dict:
    return get_runtime_telemetry_summary()
