"""Path comparison primitives shared by the qualifier and the hierarchy builder.

Everything here is pure string manipulation: nothing touches the filesystem.
The platform-dependent parts (separator, case folding) come in through
``ComparisonRules`` so the same code runs POSIX and Windows inputs on any host.
"""

from __future__ import annotations

import ntpath
import posixpath
from types import ModuleType

from pydantic import BaseModel, ConfigDict

from wayfinder.detection.models.enums import AssignmentOrder, ContainmentMode


class ComparisonRules(BaseModel):
    """How paths are normalized and compared during one detection run."""

    model_config = ConfigDict(frozen=True)

    case_insensitive: bool = False
    separator: str = "/"
    containment: ContainmentMode = ContainmentMode.SUBSTRING
    assignment_order: AssignmentOrder = AssignmentOrder.LONGEST_FIRST

    @property
    def flavour(self) -> ModuleType:
        """``ntpath`` for backslash-separated paths, ``posixpath`` otherwise."""
        return ntpath if self.separator == "\\" else posixpath


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalize(path: str, rules: ComparisonRules) -> str:
    """Canonical separators, no redundant segments, no trailing separator.

    A filesystem root keeps its separator (``/`` or ``C:\\``).
    """
    return rules.flavour.normpath(path.strip())


def fold(path: str, rules: ComparisonRules) -> str:
    """Case-fold for comparison when the rules ask for it."""
    return path.upper() if rules.case_insensitive else path


def parent(path: str, rules: ComparisonRules) -> str:
    return rules.flavour.dirname(path)


def name(path: str, rules: ComparisonRules) -> str:
    return rules.flavour.basename(path)


def segments(path: str, separator: str) -> list[str]:
    """Split into path segments; ``/`` -> ``['']``, ``/ws`` -> ``['', 'ws']``."""
    parts = path.split(separator)
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def is_segment_prefix(ancestor: str, path: str, separator: str) -> bool:
    """True when ``ancestor`` equals ``path`` or is one of its parent directories."""
    outer = segments(ancestor, separator)
    inner = segments(path, separator)
    return inner[: len(outer)] == outer


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------


def covers(general: str, specific: str, rules: ComparisonRules) -> bool:
    """Whether ``general`` subsumes ``specific`` for the workspace merge rule.

    In substring mode this is plain string containment, so ``/app`` covers
    ``/data/app``.  Segment mode requires a real ancestor-or-self relation.
    """
    if rules.containment == ContainmentMode.SEGMENT:
        return is_segment_prefix(general, specific, rules.separator)
    return general in specific


def owns(root: str, project_root: str, rules: ComparisonRules) -> bool:
    """Whether a workspace rooted at ``root`` may own ``project_root``."""
    if rules.containment == ContainmentMode.SEGMENT:
        return is_segment_prefix(root, project_root, rules.separator)
    return project_root.startswith(root)
