"""Shared test fixtures.

Detection tests feed canned path lists through ``FakeDiscoverer`` so the
inference core can be exercised without touching the filesystem.  Tests
that need real trees build them under ``tmp_path`` with ``make_tree``.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger

from wayfinder.detection.settings import _get_settings_cached


class FakeDiscoverer:
    """PathDiscoverer returning canned paths per search root and recording calls."""

    def __init__(self, paths_by_root: dict[str, list[str]] | None = None) -> None:
        self.paths_by_root = paths_by_root or {}
        self.calls: list[tuple[str, list[str]]] = []

    def discover(self, search_path: str, extensions: list[str]) -> list[str]:
        self.calls.append((search_path, list(extensions)))
        return list(self.paths_by_root.get(search_path, []))


@pytest.fixture
def fake_discoverer() -> type[FakeDiscoverer]:
    """The canned discoverer class; instantiate with ``{search_root: [paths]}``."""
    return FakeDiscoverer


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Each test reads WAYFINDER_* env vars afresh."""
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Drop sinks bound to streams a test may have swapped out (CliRunner, lifespan)."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create empty files at the given relative paths and return the tree root."""

    def _make(*relative_paths: str) -> Path:
        for relative in relative_paths:
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        return tmp_path

    return _make
