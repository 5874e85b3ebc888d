import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from voyage_aeon.config import settings
from voyage_aeon.logging_setup import configure_logging
from voyage_aeon.modules.session.router import router as session_router
from voyage_aeon.modules.story.router import router as story_router
from voyage_aeon.modules.story.service_api import get_story_graph
from voyage_aeon.modules.telemetry.router import router as telemetry_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    configure_logging(settings.log_level)
    graph = get_story_graph()
    logger.info("loaded story %s with %s scenes (env=%s)", graph.story_id, len(graph), settings.env)
    yield


app = FastAPI(title="Voyage Aeon Story Engine", lifespan=_lifespan)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(session_router)
app.include_router(story_router)
app.include_router(telemetry_router)
