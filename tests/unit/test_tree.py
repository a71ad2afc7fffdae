#
# tests/unit/test_tree.py
#
"""
Tests for computing suite transitions between consecutive tests.
"""

from elmtestfeed.paths import EMPTY_PATH, LabelPath
from elmtestfeed.tree import suites_to_close, suites_to_open


def _path(*labels: str) -> LabelPath:
    return LabelPath.from_labels(labels)


def _canonical(paths: list[LabelPath]) -> list[str]:
    return [p.canonical for p in paths]


class TestSuitesToClose:
    def test_same_suite_closes_nothing(self) -> None:
        assert suites_to_close(_path("Module", "suite", "test"), _path("Module", "suite", "test2")) == []

    def test_same_test_closes_nothing(self) -> None:
        path = _path("Module", "suite", "test")
        assert suites_to_close(path, path) == []

    def test_one_suite(self) -> None:
        closed = suites_to_close(_path("Module", "suite", "test"), _path("Module", "suite2", "test2"))
        assert _canonical(closed) == ["Module/suite"]

    def test_two_suites_deepest_first(self) -> None:
        closed = suites_to_close(
            _path("Module", "suite", "deep", "test"), _path("Module", "suite2", "test2")
        )
        assert _canonical(closed) == ["Module/suite/deep", "Module/suite"]

    def test_initial_transition_closes_nothing(self) -> None:
        assert suites_to_close(EMPTY_PATH, _path("Module", "suite", "test")) == []

    def test_disjoint_roots_close_everything(self) -> None:
        closed = suites_to_close(_path("A", "s", "t"), _path("B", "t2"))
        assert _canonical(closed) == ["A/s", "A"]


class TestSuitesToOpen:
    def test_same_suite_opens_nothing(self) -> None:
        assert suites_to_open(_path("Module", "suite", "test"), _path("Module", "suite", "test2")) == []

    def test_one_suite(self) -> None:
        opened = suites_to_open(_path("Module", "suite", "test"), _path("Module", "suite2", "test2"))
        assert _canonical(opened) == ["Module/suite2"]

    def test_two_suites_shallowest_first(self) -> None:
        opened = suites_to_open(
            _path("Module", "suite", "test"), _path("Module", "suite2", "deep2", "test2")
        )
        assert _canonical(opened) == ["Module/suite2", "Module/suite2/deep2"]

    def test_initial_transition_opens_every_ancestor(self) -> None:
        opened = suites_to_open(EMPTY_PATH, _path("A", "B", "test"))
        assert opened == [_path("A"), _path("A", "B")]

    def test_from_open_suite_path(self) -> None:
        opened = suites_to_open(_path("Module"), _path("Module", "suite / stuff", "test"))
        assert _canonical(opened) == ["Module/suite+%2F+stuff"]

    def test_top_level_test_opens_nothing(self) -> None:
        assert suites_to_open(EMPTY_PATH, _path("lonely")) == []
