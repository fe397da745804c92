"""Detection entry point: fold every search root into one workspace list.

Search roots are processed strictly in order.  Later roots may generalize
workspaces registered by earlier ones, so the accumulator is threaded
through ``functools.reduce`` rather than shared between workers.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce

from loguru import logger

from wayfinder.detection.discovery.base import PathDiscoverer
from wayfinder.detection.inference.hierarchy import WorkspaceHierarchyBuilder
from wayfinder.detection.inference.paths import ComparisonRules
from wayfinder.detection.inference.qualifier import PathQualifier
from wayfinder.detection.models.workspace import Workspace


def fold_search_root(
    workspaces: Sequence[Workspace],
    raw_paths: Iterable[str] | None,
    *,
    qualifier: PathQualifier,
    builder: WorkspaceHierarchyBuilder,
) -> list[Workspace]:
    """One reduction step: ``(workspaces, raw paths of a search root) -> workspaces``."""
    qualified = qualifier.qualify(raw_paths)
    return builder.build(workspaces, qualified)


def detect_workspaces(
    search_paths: Sequence[str] | None,
    search_file_extensions: Sequence[str] | None,
    source_folder_name: str | None,
    black_list: Sequence[str] | None = None,
    *,
    discoverer: PathDiscoverer,
    rules: ComparisonRules | None = None,
) -> list[Workspace]:
    """Detect workspaces under ``search_paths``.

    Parameters
    ----------
    search_paths:
        Directories to scan, in processing order.
    search_file_extensions:
        Extensions (no leading dot) handed to the discoverer.
    source_folder_name:
        Name of the directory that must directly contain the discovered files.
    black_list:
        Path prefixes to drop.
    discoverer:
        Backend that enumerates candidate files for one search root.
    rules:
        Normalization and comparison rules; defaults to case-sensitive,
        ``/``-separated, substring containment, longest-first assignment.

    Returns
    -------
    Workspaces in creation order.  Empty when any mandatory argument is
    missing or empty.

    Raises ``UnassignedProjectRootError`` if the merge pass leaves a project
    root without an owner, and whatever ``DiscoveryError`` the discoverer
    raises.
    """
    if not search_paths or not search_file_extensions or not source_folder_name:
        logger.debug(
            "Detection skipped: search_paths={}, extensions={}, source_folder_name={!r}",
            list(search_paths or []),
            list(search_file_extensions or []),
            source_folder_name,
        )
        return []

    rules = rules or ComparisonRules()
    qualifier = PathQualifier(source_folder_name, black_list, rules=rules)
    builder = WorkspaceHierarchyBuilder(rules)
    extensions = list(search_file_extensions)

    def step(workspaces: list[Workspace], search_path: str) -> list[Workspace]:
        raw_paths = discoverer.discover(search_path, extensions)
        logger.debug("Discovered {} candidate files under {}", len(raw_paths), search_path)
        return fold_search_root(workspaces, raw_paths, qualifier=qualifier, builder=builder)

    workspaces = reduce(step, search_paths, [])
    logger.info(
        "Detected {} workspaces ({} projects) across {} search paths",
        len(workspaces),
        sum(len(ws.project_paths) for ws in workspaces),
        len(search_paths),
    )
    return workspaces
