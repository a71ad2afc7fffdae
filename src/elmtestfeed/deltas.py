#
# src/elmtestfeed/deltas.py
#
"""
Tree deltas: the notifications that drive a live test-results tree.

Started deltas carry a location id; Finished/Failed deltas are matched to the
most recently started node with the same name.
"""
from typing import Any, ClassVar, TypeAlias

import attrs
from attrs import define


@define(frozen=True, slots=True)
class _Delta:
    kind: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready mapping, tagged with the delta kind."""
        return {"kind": self.kind, **attrs.asdict(self)}


@define(frozen=True, slots=True)
class SuiteStarted(_Delta):
    kind: ClassVar[str] = "suiteStarted"

    name: str
    location: str


@define(frozen=True, slots=True)
class SuiteFinished(_Delta):
    kind: ClassVar[str] = "suiteFinished"

    name: str


@define(frozen=True, slots=True)
class TestStarted(_Delta):
    __test__ = False
    kind: ClassVar[str] = "testStarted"

    name: str
    location: str


@define(frozen=True, slots=True)
class TestFinished(_Delta):
    """A passing test, or a skipped one when ``skipped`` is set (todo tests)."""
    __test__ = False
    kind: ClassVar[str] = "testFinished"

    name: str
    duration: int | None = None
    skipped: bool = False
    comment: str | None = None


@define(frozen=True, slots=True)
class TestFailed(_Delta):
    __test__ = False
    kind: ClassVar[str] = "testFailed"

    name: str
    message: str
    expected: str | None = None
    actual: str | None = None
    duration: int | None = None


TreeDelta: TypeAlias = SuiteStarted | SuiteFinished | TestStarted | TestFinished | TestFailed

# 🔼⚙️
