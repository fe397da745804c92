"""Fixtures for the HTTP layer.

``ASGITransport`` does not run the app lifespan, so ``app.state.discoverer``
is pre-set here the way the lifespan would.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from wayfinder.detection.app import app
from wayfinder.detection.discovery.walk import WalkPathDiscoverer


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client wired to the app with a walk-based discoverer."""
    app.state.discoverer = WalkPathDiscoverer()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.state.discoverer = None
