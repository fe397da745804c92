"""Workspace data model.

A workspace is an inferred umbrella directory grouping one or more project
roots.  Serialized with camelCase keys (``rootPath``, ``lastTouched``,
``projectPaths``); attributes are snake_case and both spellings validate.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LastTouched(BaseModel):
    """Most recent modification seen under a workspace.

    The zero value (``millis=0``, empty ``timestamp``) means "not populated".
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    millis: int = 0
    timestamp: str = ""

    @property
    def is_populated(self) -> bool:
        return self.millis > 0


class Workspace(BaseModel):
    """Detected workspace (root directory + the project roots it owns)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    root_path: str
    last_touched: LastTouched = Field(default_factory=LastTouched)
    project_paths: list[str] = Field(default_factory=list, description="Project roots in assignment order")
