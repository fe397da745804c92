"""Pure-Python discovery backend built on ``os.walk``."""

from __future__ import annotations

import os

from loguru import logger


class WalkPathDiscoverer:
    """Enumerates files with ``os.walk``; works the same on every platform.

    Unreadable directories are skipped and a missing search root simply
    yields nothing.  Symlinked directories are not followed.
    """

    def __init__(self, *, case_insensitive: bool = False) -> None:
        self.case_insensitive = case_insensitive

    def _suffixes(self, extensions: list[str]) -> tuple[str, ...]:
        suffixes = (f".{ext.lstrip('.')}" for ext in extensions if ext.strip(". "))
        if self.case_insensitive:
            return tuple(s.lower() for s in suffixes)
        return tuple(suffixes)

    def discover(self, search_path: str, extensions: list[str]) -> list[str]:
        suffixes = self._suffixes(extensions)
        if not suffixes:
            return []
        if not os.path.isdir(search_path):
            logger.warning("Search path {} is not a directory, skipping", search_path)
            return []

        found: list[str] = []
        for dirpath, _dirnames, filenames in os.walk(search_path):
            for filename in filenames:
                key = filename.lower() if self.case_insensitive else filename
                if key.endswith(suffixes):
                    found.append(os.path.join(dirpath, filename))
        return found
