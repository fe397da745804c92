"""Path discovery interface.

A discoverer enumerates candidate files for one search root.  It only
filters by extension; the source-folder topology is checked afterwards by
``PathQualifier``, so a discoverer may safely over-report.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class DiscoveryError(RuntimeError):
    """Raised when a backend fails to enumerate a search root."""

    def __init__(self, search_path: str, reason: str) -> None:
        self.search_path = search_path
        self.reason = reason
        super().__init__(f"Cannot scan '{search_path}': {reason}")


@runtime_checkable
class PathDiscoverer(Protocol):
    """Protocol for enumerating candidate files under a search root."""

    def discover(self, search_path: str, extensions: list[str]) -> list[str]:
        """Return paths of regular files under ``search_path`` with one of ``extensions``.

        ``extensions`` carry no leading dot.  Order is unspecified.
        """
        ...


def extension_patterns(extensions: list[str]) -> list[str]:
    """``["as", ".mxml"]`` -> ``["*.as", "*.mxml"]``."""
    return [f"*.{ext.lstrip('.')}" for ext in extensions if ext.strip(". ")]
