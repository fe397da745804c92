"""Data models for workspace detection."""

from wayfinder.detection.models.api import DetectRequest
from wayfinder.detection.models.enums import AssignmentOrder, ContainmentMode, DiscoveryBackend
from wayfinder.detection.models.workspace import LastTouched, Workspace

__all__ = [
    # Enums
    "AssignmentOrder",
    "ContainmentMode",
    # API schemas
    "DetectRequest",
    "DiscoveryBackend",
    # Workspace
    "LastTouched",
    "Workspace",
]
