"""Workspace hierarchy inference.

Turns the qualified paths of one search root into project roots and folds
them into the accumulated workspace list.  Workspace roots are not known up
front; they converge as sibling projects are observed:

1. **Generalize** -- an existing workspace root contains the new candidate
   root (and is not equal to it): shorten the existing root to the candidate.
2. **Covered** -- an existing workspace root is contained in the candidate:
   nothing to do.
3. **Register** -- otherwise the candidate becomes a new workspace.

The candidate ("likely workspace root") of a project is its parent directory;
a project root is the parent of the source folder.  Once all paths of a
search root are merged, each of its project roots is assigned to the first
workspace that owns it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from wayfinder.detection.inference.paths import ComparisonRules, covers, owns, parent
from wayfinder.detection.models.enums import AssignmentOrder
from wayfinder.detection.models.workspace import Workspace


class UnassignedProjectRootError(RuntimeError):
    """A project root matched no workspace during assignment.

    Indicates an internal inconsistency of the merge pass, never bad input.
    """

    def __init__(self, project_root: str, workspace_roots: Sequence[str]) -> None:
        self.project_root = project_root
        self.workspace_roots = list(workspace_roots)
        super().__init__(f"Project root '{project_root}' is not owned by any workspace ({self.workspace_roots})")


class WorkspaceHierarchyBuilder:
    """Merges project roots into a workspace list, one search root at a time.

    The builder never mutates the list it is given: ``build`` works on deep
    copies and returns the updated list.
    """

    def __init__(self, rules: ComparisonRules) -> None:
        self.rules = rules

    # -- Step A ----------------------------------------------------------------

    def project_root(self, qualified_path: str) -> str:
        """Grandparent of a qualified file (parent of its source folder)."""
        return parent(parent(qualified_path, self.rules), self.rules)

    def project_roots(self, qualified_paths: Iterable[str]) -> list[str]:
        """Distinct project roots in first-seen order."""
        return list(dict.fromkeys(self.project_root(path) for path in qualified_paths))

    # -- Step B ----------------------------------------------------------------

    def merge(self, workspaces: list[Workspace], project_root: str) -> None:
        """Apply the generalize / covered / register rule for one project root (in place)."""
        likely_root = parent(project_root, self.rules)

        for workspace in workspaces:
            if covers(likely_root, workspace.root_path, self.rules) and workspace.root_path != likely_root:
                logger.debug("Hierarchy: generalize workspace {} -> {}", workspace.root_path, likely_root)
                workspace.root_path = likely_root
                return

        if any(covers(workspace.root_path, likely_root, self.rules) for workspace in workspaces):
            return

        logger.debug("Hierarchy: register workspace {} (from project {})", likely_root, project_root)
        workspaces.append(Workspace(root_path=likely_root))

    # -- Step C ----------------------------------------------------------------

    def assignment_view(self, workspaces: Sequence[Workspace]) -> list[Workspace]:
        """Workspaces in the order they are tried during assignment."""
        if self.rules.assignment_order == AssignmentOrder.ASCENDING:
            return sorted(workspaces, key=lambda ws: ws.root_path)
        return sorted(workspaces, key=lambda ws: (-len(ws.root_path), ws.root_path))

    def assign(self, workspaces: Sequence[Workspace], project_roots: Iterable[str]) -> None:
        """Append each project root to its owning workspace (in place).

        Raises ``UnassignedProjectRootError`` if a project root has no owner.
        """
        candidates = self.assignment_view(workspaces)
        for project_root in project_roots:
            owner = next((ws for ws in candidates if owns(ws.root_path, project_root, self.rules)), None)
            if owner is None:
                raise UnassignedProjectRootError(project_root, [ws.root_path for ws in candidates])
            owner.project_paths.append(project_root)

    # -- Whole step ------------------------------------------------------------

    def build(self, workspaces: Sequence[Workspace], qualified_paths: Sequence[str]) -> list[Workspace]:
        """Fold one search root's qualified paths into ``workspaces``.

        ``qualified_paths`` must already be sorted (see ``PathQualifier``).
        Returns a new list; the input list and its workspaces are untouched.
        """
        result = [ws.model_copy(deep=True) for ws in workspaces]
        if not qualified_paths:
            return result

        roots = self.project_roots(qualified_paths)
        # Revisiting a project root once per file is harmless: the rule is idempotent.
        for path in qualified_paths:
            self.merge(result, self.project_root(path))

        self.assign(result, roots)
        logger.debug(
            "Hierarchy: {} files -> {} project roots, {} workspaces total",
            len(qualified_paths),
            len(roots),
            len(result),
        )
        return result
