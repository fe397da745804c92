from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.routing import APIRouter
from loguru import logger

from wayfinder.detection.discovery import create_discoverer
from wayfinder.detection.log import setup_logging
from wayfinder.detection.settings import get_settings


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # -- Startup ---------------------------------------------------------------
    settings = get_settings()
    setup_logging(settings.log_level)

    _app.state.discoverer = create_discoverer(
        settings.discovery_backend,
        case_insensitive=settings.resolve_case_insensitive(),
        timeout=settings.discovery_timeout,
    )
    logger.info(
        "Wayfinder starting (host={}, port={}, backend={}, containment={})",
        settings.host,
        settings.port,
        settings.discovery_backend,
        settings.containment,
    )

    yield

    # -- Shutdown --------------------------------------------------------------
    _app.state.discoverer = None
    logger.info("Wayfinder shutting down")


app = FastAPI(title="Wayfinder", lifespan=lifespan)

# ---------------------------------------------------------------------------
# API router -- all endpoints live under /api
# ---------------------------------------------------------------------------
api = APIRouter(prefix="/api")


@api.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


from wayfinder.detection.routers.workspaces import router as workspaces_router  # noqa: E402

api.include_router(workspaces_router)

app.include_router(api)
