"""Workspace inference core.

Pure functions over path strings, no filesystem access:

- **paths**: normalization and containment primitives (``ComparisonRules``)
- **qualifier**: blacklist + source-folder filtering (``PathQualifier``)
- **hierarchy**: project roots -> workspaces merge and assignment (``WorkspaceHierarchyBuilder``)
- **detector**: fold over search roots (``detect_workspaces``)
"""

from wayfinder.detection.inference.detector import detect_workspaces, fold_search_root
from wayfinder.detection.inference.hierarchy import UnassignedProjectRootError, WorkspaceHierarchyBuilder
from wayfinder.detection.inference.paths import ComparisonRules
from wayfinder.detection.inference.qualifier import PathQualifier, qualify

__all__ = [
    "ComparisonRules",
    "PathQualifier",
    "UnassignedProjectRootError",
    "WorkspaceHierarchyBuilder",
    "detect_workspaces",
    "fold_search_root",
    "qualify",
]
