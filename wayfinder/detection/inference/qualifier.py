"""Path qualification: the leaf filter in front of the hierarchy builder.

A raw discovered path *qualifies* when it is not blacklisted and its
immediate parent directory is named exactly like the source folder::

    /ws/app1/src/Main.as        qualifies   (parent is ``src``)
    /ws/app1/src/ui/Button.as   rejected    (parent is ``ui``)
    /ws/app1/Main.as            rejected    (parent is ``app1``)

The surviving paths are sorted ascending; the merge rule downstream is order
sensitive and relies on this.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from wayfinder.detection.inference.paths import ComparisonRules, fold, name, normalize, parent


class PathQualifier:
    """Normalizes and filters raw paths for one detection run.

    The blacklist is normalized (and case-folded, if the rules say so) once at
    construction time and reused for every search root.
    """

    def __init__(
        self,
        source_folder_name: str,
        black_list: Iterable[str] | None = None,
        *,
        rules: ComparisonRules,
    ) -> None:
        self.source_folder_name = source_folder_name
        self.rules = rules
        self._folder_key = fold(source_folder_name, rules)
        self._black_list = [fold(normalize(entry, rules), rules) for entry in black_list or () if entry.strip()]

    def is_blacklisted(self, path: str) -> bool:
        key = fold(path, self.rules)
        return any(key.startswith(entry) for entry in self._black_list)

    def in_source_folder(self, path: str) -> bool:
        """Whether ``path`` sits directly inside the source folder."""
        folder = name(parent(path, self.rules), self.rules)
        return fold(folder, self.rules) == self._folder_key

    def qualify(self, raw_paths: Iterable[str] | None) -> list[str]:
        """Return the sorted, normalized paths that pass both checks."""
        if not raw_paths:
            return []

        qualified: list[str] = []
        rejected = 0
        for raw in raw_paths:
            if not raw or not raw.strip():
                continue
            path = normalize(raw, self.rules)
            if self.is_blacklisted(path) or not self.in_source_folder(path):
                rejected += 1
                continue
            qualified.append(path)

        qualified.sort()
        logger.debug(
            "Qualifier: {} qualified, {} rejected (folder={!r})",
            len(qualified),
            rejected,
            self.source_folder_name,
        )
        return qualified


def qualify(
    raw_paths: Iterable[str] | None,
    source_folder_name: str,
    black_list: Iterable[str] | None = None,
    *,
    rules: ComparisonRules | None = None,
) -> list[str]:
    """One-shot form of ``PathQualifier(...).qualify(raw_paths)``."""
    qualifier = PathQualifier(source_folder_name, black_list, rules=rules or ComparisonRules())
    return qualifier.qualify(raw_paths)
