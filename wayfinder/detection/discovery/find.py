"""Discovery backend that delegates the walk to the platform's native tools.

- POSIX: ``find <root> -type f ( -name "*.ext" -o ... )``
- Windows: ``where /R <root> *.ext ...`` run from inside the search root

Native tools are usually faster than ``os.walk`` on large trees.  Their
stdout is split into one path per line; blank lines are dropped.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import PureWindowsPath

from loguru import logger

from wayfinder.detection.discovery.base import DiscoveryError, extension_patterns

# `where` exits with 1 when nothing matched; that is an empty result, not a failure.
_WHERE_NO_MATCH = 1


def split_output(stdout: str) -> list[str]:
    """Split command output into stripped, non-empty lines."""
    return [line.strip() for line in stdout.splitlines() if line.strip()]


class FindPathDiscoverer:
    """Runs ``find`` (or ``where`` on Windows) in a subprocess per search root."""

    def __init__(self, *, windows: bool | None = None, timeout: float | None = None) -> None:
        self.windows = sys.platform == "win32" if windows is None else windows
        self.timeout = timeout

    # -- Command construction --------------------------------------------------

    def find_command(self, search_path: str, extensions: list[str]) -> list[str]:
        command = ["find", search_path, "-type", "f", "("]
        for index, pattern in enumerate(extension_patterns(extensions)):
            if index:
                command.append("-o")
            command.extend(["-name", pattern])
        command.append(")")
        return command

    def where_command(self, search_path: str, extensions: list[str]) -> list[str]:
        return ["where", "/R", search_path, *extension_patterns(extensions)]

    def working_directory(self, search_path: str) -> str:
        """Directory ``where`` runs from: the drive root itself when searching from it."""
        anchor = PureWindowsPath(search_path).anchor
        if anchor and search_path.upper().rstrip("\\/") == anchor.upper().rstrip("\\/"):
            return anchor if anchor.endswith("\\") else f"{anchor}\\"
        return search_path

    # -- Discovery -------------------------------------------------------------

    def discover(self, search_path: str, extensions: list[str]) -> list[str]:
        if not extension_patterns(extensions):
            return []

        if self.windows:
            command = self.where_command(search_path, extensions)
            cwd: str | None = self.working_directory(search_path)
            accepted = {0, _WHERE_NO_MATCH}
        else:
            command = self.find_command(search_path, extensions)
            cwd = None
            accepted = {0}

        logger.debug("Running {}", " ".join(command))
        try:
            completed = subprocess.run(  # noqa: S603
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (FileNotFoundError, NotADirectoryError) as exc:
            # Either the binary or the working directory is missing.
            raise DiscoveryError(search_path, str(exc)) from exc
        except subprocess.TimeoutExpired as exc:
            msg = f"{command[0]} timed out after {self.timeout}s"
            raise DiscoveryError(search_path, msg) from exc

        paths = split_output(completed.stdout)
        if completed.returncode not in accepted:
            reason = completed.stderr.strip() or f"{command[0]} exited with status {completed.returncode}"
            if not paths:
                raise DiscoveryError(search_path, reason)
            # find reports unreadable subdirectories but still prints what it saw.
            logger.warning("Partial scan of {}: {}", search_path, reason)
        return paths
