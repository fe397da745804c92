"""Workspace detection endpoints (RPC-style)."""

from __future__ import annotations

from functools import partial

from anyio import to_thread
from fastapi import APIRouter, HTTPException, status
from loguru import logger

from wayfinder.detection.deps import Discoverer, Settings
from wayfinder.detection.discovery.base import DiscoveryError
from wayfinder.detection.inference.hierarchy import UnassignedProjectRootError
from wayfinder.detection.managers.detection import run_detection
from wayfinder.detection.models.api import DetectRequest
from wayfinder.detection.models.workspace import Workspace

router = APIRouter(prefix="/workspaces", tags=["workspaces"])


@router.post("/detect", response_model=list[Workspace])
async def detect(body: DetectRequest, settings: Settings, discoverer: Discoverer) -> list[Workspace]:
    """Scan the given search paths and return the inferred workspaces.

    The scan runs in a worker thread as one unit; it is not cancelled midway.
    """
    try:
        return await to_thread.run_sync(partial(run_detection, body, settings, discoverer))
    except DiscoveryError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from None
    except UnassignedProjectRootError as exc:
        logger.error("Detection produced an unowned project root: {}", exc)
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from None
