"""Shared enumerations used across workspace detection."""

from __future__ import annotations

from enum import StrEnum

# -- Inference ---------------------------------------------------------------


class ContainmentMode(StrEnum):
    """How one path is judged to lie inside another during merge and assignment.

    ``SUBSTRING`` compares raw strings (``in`` / ``startswith``), so
    ``/data/app`` is considered to contain ``/data/app2``.  ``SEGMENT``
    compares path segments and only accepts true ancestors.
    """

    SUBSTRING = "substring"
    SEGMENT = "segment"


class AssignmentOrder(StrEnum):
    """Order in which workspaces are tried when assigning project roots."""

    LONGEST_FIRST = "longest_first"
    ASCENDING = "ascending"


# -- Discovery ---------------------------------------------------------------


class DiscoveryBackend(StrEnum):
    WALK = "walk"
    FIND = "find"
