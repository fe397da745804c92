"""Populate ``Workspace.last_touched`` from filesystem modification times.

The inference core leaves ``last_touched`` at its zero value; this module
fills it in after detection by walking each workspace's project roots and
keeping the newest ``st_mtime`` it finds (files and directories alike).
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from datetime import datetime

from loguru import logger

from wayfinder.detection.models.workspace import LastTouched, Workspace

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def newest_mtime(paths: Iterable[str]) -> float | None:
    """Newest modification time under ``paths``, or ``None`` if none exist."""
    newest: float | None = None
    for root in paths:
        for dirpath, _dirnames, filenames in os.walk(root):
            for entry in (dirpath, *(os.path.join(dirpath, f) for f in filenames)):
                try:
                    mtime = os.stat(entry).st_mtime
                except OSError:
                    # Vanished or unreadable since the walk listed it.
                    continue
                if newest is None or mtime > newest:
                    newest = mtime
    return newest


def last_touched_from(mtime: float) -> LastTouched:
    return LastTouched(
        millis=int(mtime * 1000),
        timestamp=datetime.fromtimestamp(mtime).strftime(TIMESTAMP_FORMAT),
    )


def touch_workspaces(workspaces: Sequence[Workspace]) -> list[Workspace]:
    """Return copies of ``workspaces`` with ``last_touched`` populated.

    Workspaces whose project roots no longer exist keep the zero value.
    """
    touched: list[Workspace] = []
    for workspace in workspaces:
        mtime = newest_mtime(workspace.project_paths)
        if mtime is None:
            logger.debug("Touch: nothing found under {}", workspace.root_path)
            touched.append(workspace.model_copy(deep=True))
            continue
        touched.append(workspace.model_copy(update={"last_touched": last_touched_from(mtime)}, deep=True))

    populated = sum(1 for workspace in touched if workspace.last_touched.is_populated)
    logger.debug("Touch: {}/{} workspaces populated", populated, len(touched))
    return touched
