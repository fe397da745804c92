"""Service configuration loaded from WAYFINDER_* environment variables."""

from __future__ import annotations

import os
import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wayfinder.detection.inference.paths import ComparisonRules
from wayfinder.detection.models.enums import AssignmentOrder, ContainmentMode, DiscoveryBackend


class WayfinderSettings(BaseSettings):
    """Wayfinder settings.

    All fields are read from environment variables with the ``WAYFINDER_``
    prefix.  For example, ``WAYFINDER_LOG_LEVEL=DEBUG`` maps to ``log_level``.
    List fields take JSON, e.g. ``WAYFINDER_BLACK_LIST='["/opt", "/usr"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WAYFINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Detection defaults ----------------------------------------------------
    source_folder_name: str = "src"
    search_file_extensions: list[str] = Field(default_factory=lambda: ["as", "mxml"])
    black_list: list[str] = Field(default_factory=list)

    case_insensitive: bool | None = None
    """Compare paths uppercased.  ``None`` resolves from the platform (Windows only)."""

    containment: ContainmentMode = ContainmentMode.SUBSTRING
    assignment_order: AssignmentOrder = AssignmentOrder.LONGEST_FIRST
    discovery_backend: DiscoveryBackend = DiscoveryBackend.WALK
    discovery_timeout: float | None = None
    """Seconds before a ``find`` / ``where`` scan is abandoned.  ``None`` waits indefinitely."""

    # -- Server ----------------------------------------------------------------
    host: str = "127.0.0.1"
    port: int = 8000

    # -- Helpers ---------------------------------------------------------------

    def resolve_case_insensitive(self) -> bool:
        """Return the configured flag, or derive it from the running platform."""
        if self.case_insensitive is not None:
            return self.case_insensitive
        return sys.platform == "win32"

    def comparison_rules(
        self,
        *,
        case_insensitive: bool | None = None,
        containment: ContainmentMode | None = None,
        assignment_order: AssignmentOrder | None = None,
    ) -> ComparisonRules:
        """Build the comparison rules for the core, with optional per-call overrides."""
        return ComparisonRules(
            case_insensitive=self.resolve_case_insensitive() if case_insensitive is None else case_insensitive,
            separator=os.sep,
            containment=containment or self.containment,
            assignment_order=assignment_order or self.assignment_order,
        )


def get_settings() -> WayfinderSettings:
    """Return a cached settings instance.

    Reads from environment variables and ``.env`` on first call, then returns
    the same object.  Call ``_get_settings_cached.cache_clear()`` in tests to
    force a re-read after overriding env vars.
    """
    return _get_settings_cached()


def _get_settings_cached() -> WayfinderSettings:
    """Inner function wrapped by lru_cache (allows type-safe cache_clear)."""
    return WayfinderSettings()


# Apply lru_cache at runtime so the function is only called once.
from functools import lru_cache  # noqa: E402

_get_settings_cached = lru_cache(maxsize=1)(_get_settings_cached)
