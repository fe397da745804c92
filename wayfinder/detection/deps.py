"""FastAPI dependency injection for settings and the discovery backend.

Usage in route handlers::

    @router.post("/things")
    async def do_thing(settings: Settings, discoverer: Discoverer) -> ...:
        ...

``get_discoverer`` raises HTTP 503 if the app lifespan has not created a
backend on ``app.state``.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from wayfinder.detection.discovery.base import PathDiscoverer
from wayfinder.detection.settings import WayfinderSettings, get_settings


def get_discoverer(request: Request) -> PathDiscoverer:
    """Return the discovery backend created during lifespan."""
    discoverer: PathDiscoverer | None = getattr(request.app.state, "discoverer", None)
    if discoverer is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Discovery backend not initialised.",
        )
    return discoverer


# -- Annotated type aliases for concise route signatures ---------------------

Settings = Annotated[WayfinderSettings, Depends(get_settings)]
"""Annotated dependency: cached service settings."""

Discoverer = Annotated[PathDiscoverer, Depends(get_discoverer)]
"""Annotated dependency: shared discovery backend."""
