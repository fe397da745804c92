"""Run a detection from a ``DetectRequest`` and the service settings."""

from __future__ import annotations

from wayfinder.detection.discovery.base import PathDiscoverer
from wayfinder.detection.inference.detector import detect_workspaces
from wayfinder.detection.models.api import DetectRequest
from wayfinder.detection.models.workspace import Workspace
from wayfinder.detection.settings import WayfinderSettings
from wayfinder.detection.touch import touch_workspaces


def run_detection(
    body: DetectRequest,
    settings: WayfinderSettings,
    discoverer: PathDiscoverer,
) -> list[Workspace]:
    """Detect workspaces for ``body``; unset fields fall back to ``settings``.

    An explicitly empty list in the request (e.g. ``black_list=[]``) wins over
    the configured default.
    """
    extensions = settings.search_file_extensions if body.search_file_extensions is None else body.search_file_extensions
    source_folder = settings.source_folder_name if body.source_folder_name is None else body.source_folder_name
    black_list = settings.black_list if body.black_list is None else body.black_list

    rules = settings.comparison_rules(
        case_insensitive=body.case_insensitive,
        containment=body.containment,
        assignment_order=body.assignment_order,
    )
    workspaces = detect_workspaces(
        body.search_paths,
        extensions,
        source_folder,
        black_list,
        discoverer=discoverer,
        rules=rules,
    )
    if body.touch:
        workspaces = touch_workspaces(workspaces)
    return workspaces
