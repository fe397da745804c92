"""API request schemas for the detection endpoint.

Detection fields left at ``None`` fall back to the service settings
(``WAYFINDER_*``).  An explicit empty list is kept as is.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from wayfinder.detection.models.enums import AssignmentOrder, ContainmentMode


class DetectRequest(BaseModel):
    """Input for a detection run.  Accepts snake_case or camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    search_paths: list[str] = Field(
        default_factory=list,
        description="Directories to scan; relative entries resolve against the working directory.",
    )
    search_file_extensions: list[str] | None = Field(
        default=None,
        description="Extensions without the leading dot; defaults to WAYFINDER_SEARCH_FILE_EXTENSIONS.",
    )
    source_folder_name: str | None = None
    black_list: list[str] | None = None
    case_insensitive: bool | None = None
    containment: ContainmentMode | None = None
    assignment_order: AssignmentOrder | None = None
    touch: bool = False
    """Populate ``lastTouched`` from filesystem modification times."""

    @field_validator("search_paths")
    @classmethod
    def _absolute_search_paths(cls, value: list[str]) -> list[str]:
        # Workspace roots are derived from discovered paths and must be absolute.
        return [os.path.abspath(path.strip()) for path in value if path.strip()]
