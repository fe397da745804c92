"""Detection scenarios driven through a canned discoverer."""

from __future__ import annotations

import pytest

from wayfinder.detection.inference.detector import detect_workspaces, fold_search_root
from wayfinder.detection.inference.hierarchy import WorkspaceHierarchyBuilder
from wayfinder.detection.inference.paths import ComparisonRules
from wayfinder.detection.inference.qualifier import PathQualifier
from wayfinder.detection.models.enums import ContainmentMode
from wayfinder.detection.models.workspace import Workspace

EXTENSIONS = ["as", "mxml"]


def _detect(
    fake_discoverer, paths: list[str], black_list: list[str] | None = None, **kwargs: object
) -> list[Workspace]:
    discoverer = fake_discoverer({"/": paths})
    return detect_workspaces(["/"], EXTENSIONS, "src", black_list, discoverer=discoverer, **kwargs)


def _summary(workspaces: list[Workspace]) -> list[tuple[str, list[str]]]:
    return [(ws.root_path, ws.project_paths) for ws in workspaces]


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_single_project(fake_discoverer) -> None:
    workspaces = _detect(fake_discoverer, ["/ws/app1/src/a.as"])

    assert _summary(workspaces) == [("/ws", ["/ws/app1"])]
    assert workspaces[0].last_touched.millis == 0
    assert workspaces[0].last_touched.timestamp == ""


def test_sibling_projects_share_a_workspace(fake_discoverer) -> None:
    workspaces = _detect(fake_discoverer, ["/ws/app2/src/b.mxml", "/ws/app1/src/a.as"])

    assert _summary(workspaces) == [("/ws", ["/ws/app1", "/ws/app2"])]


def test_disjoint_trees_make_separate_workspaces(fake_discoverer) -> None:
    workspaces = _detect(fake_discoverer, ["/ws/group/app1/src/a.as", "/other/app2/src/b.as"])

    assert _summary(workspaces) == [("/other", ["/other/app2"]), ("/ws/group", ["/ws/group/app1"])]


def test_blacklisted_project_is_skipped(fake_discoverer) -> None:
    workspaces = _detect(fake_discoverer, ["/ws/app1/src/a.as", "/ws/app2/src/b.mxml"], black_list=["/ws/app2"])

    assert _summary(workspaces) == [("/ws", ["/ws/app1"])]


def test_file_outside_source_folder_contributes_nothing(fake_discoverer) -> None:
    assert _detect(fake_discoverer, ["/ws/app1/lib/a.as"]) == []


# ---------------------------------------------------------------------------
# Degenerate input
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("search_paths", "extensions", "source_folder_name"),
    [
        ([], EXTENSIONS, "src"),
        (None, EXTENSIONS, "src"),
        (["/"], [], "src"),
        (["/"], None, "src"),
        (["/"], EXTENSIONS, ""),
        (["/"], EXTENSIONS, None),
    ],
)
def test_missing_mandatory_input_yields_nothing(fake_discoverer, search_paths, extensions, source_folder_name) -> None:
    discoverer = fake_discoverer({"/": ["/ws/app1/src/a.as"]})

    result = detect_workspaces(search_paths, extensions, source_folder_name, discoverer=discoverer)

    assert result == []
    assert discoverer.calls == []


def test_search_root_without_matches_contributes_nothing(fake_discoverer) -> None:
    discoverer = fake_discoverer({"/a": ["/a/ws/app/src/a.as"], "/b": ["/b/readme.as"]})

    result = detect_workspaces(["/a", "/b", "/c"], EXTENSIONS, "src", discoverer=discoverer)

    assert _summary(result) == [("/a/ws", ["/a/ws/app"])]
    assert [root for root, _ in discoverer.calls] == ["/a", "/b", "/c"]
    assert all(exts == EXTENSIONS for _, exts in discoverer.calls)


# ---------------------------------------------------------------------------
# Accumulation across search roots
# ---------------------------------------------------------------------------


def test_later_search_root_generalizes_earlier_workspace(fake_discoverer) -> None:
    discoverer = fake_discoverer(
        {
            "/first": ["/ws/group/app1/src/a.as"],
            "/second": ["/ws/app2/src/b.as"],
        }
    )

    result = detect_workspaces(["/first", "/second"], EXTENSIONS, "src", discoverer=discoverer)

    assert _summary(result) == [("/ws", ["/ws/group/app1", "/ws/app2"])]


def test_result_keeps_creation_order(fake_discoverer) -> None:
    discoverer = fake_discoverer({"/1": ["/zz/app/src/a.as"], "/2": ["/aa/app/src/b.as"]})

    result = detect_workspaces(["/1", "/2"], EXTENSIONS, "src", discoverer=discoverer)

    assert [ws.root_path for ws in result] == ["/zz", "/aa"]


def test_fold_step_leaves_accumulator_untouched() -> None:
    rules = ComparisonRules()
    qualifier = PathQualifier("src", rules=rules)
    builder = WorkspaceHierarchyBuilder(rules)
    accumulator = [Workspace(root_path="/ws/group", project_paths=["/ws/group/app1"])]

    result = fold_search_root(accumulator, ["/ws/app2/src/a.as"], qualifier=qualifier, builder=builder)

    assert accumulator[0].root_path == "/ws/group"
    assert result[0].root_path == "/ws"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

TREE = [
    "/home/dev/flash/game/src/Main.as",
    "/home/dev/flash/game/src/Level.as",
    "/home/dev/flash/game/src/ui/Button.as",
    "/home/dev/flash/editor/src/Editor.mxml",
    "/home/dev/flash/tools/packer/src/Packer.as",
    "/home/dev/air/viewer/src/Viewer.mxml",
    "/opt/vendor/sdk/src/Sdk.as",
    "/srv/legacy/site/lib/Old.as",
]


def test_every_project_root_is_owned_exactly_once(fake_discoverer) -> None:
    workspaces = _detect(fake_discoverer, TREE, black_list=["/opt"])

    owned = [project for ws in workspaces for project in ws.project_paths]
    assert sorted(owned) == [
        "/home/dev/air/viewer",
        "/home/dev/flash/editor",
        "/home/dev/flash/game",
        "/home/dev/flash/tools/packer",
    ]
    assert len(owned) == len(set(owned))


def test_workspace_root_prefixes_its_projects(fake_discoverer) -> None:
    for ws in _detect(fake_discoverer, TREE):
        assert all(project.startswith(ws.root_path) for project in ws.project_paths)


def test_detection_is_idempotent(fake_discoverer) -> None:
    first = _detect(fake_discoverer, TREE)
    second = _detect(fake_discoverer, list(reversed(TREE)))

    assert _summary(first) == _summary(second)


def test_segment_containment_mode(fake_discoverer) -> None:
    rules = ComparisonRules(containment=ContainmentMode.SEGMENT)

    workspaces = _detect(fake_discoverer, ["/data/app/q/src/a.as", "/data/app2/p/src/b.as"], rules=rules)

    assert _summary(workspaces) == [("/data/app", ["/data/app/q"]), ("/data/app2", ["/data/app2/p"])]


def test_windows_style_paths(fake_discoverer) -> None:
    rules = ComparisonRules(case_insensitive=True, separator="\\")
    discoverer = fake_discoverer(
        {
            "C:\\": [
                "C:\\Work\\App1\\Src\\Main.as",
                "C:\\Work\\App2\\SRC\\App.mxml",
                "C:\\Work\\Temp\\src\\x.as",
            ]
        }
    )

    result = detect_workspaces(["C:\\"], EXTENSIONS, "src", ["c:\\work\\temp"], discoverer=discoverer, rules=rules)

    assert _summary(result) == [("C:\\Work", ["C:\\Work\\App1", "C:\\Work\\App2"])]
