"""Path discovery backends feeding the inference core."""

from wayfinder.detection.discovery.base import DiscoveryError, PathDiscoverer
from wayfinder.detection.discovery.find import FindPathDiscoverer
from wayfinder.detection.discovery.walk import WalkPathDiscoverer
from wayfinder.detection.models.enums import DiscoveryBackend


def create_discoverer(
    backend: DiscoveryBackend,
    *,
    case_insensitive: bool = False,
    timeout: float | None = None,
) -> PathDiscoverer:
    """Create the discovery backend selected by configuration.

    ``timeout`` only applies to the subprocess backend.
    """
    if backend == DiscoveryBackend.FIND:
        return FindPathDiscoverer(timeout=timeout)
    return WalkPathDiscoverer(case_insensitive=case_insensitive)


__all__ = [
    "DiscoveryError",
    "FindPathDiscoverer",
    "PathDiscoverer",
    "WalkPathDiscoverer",
    "create_discoverer",
]
