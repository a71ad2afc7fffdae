#
# src/elmtestfeed/events.py
#
"""
Decodes single lines of an elm-test JSON report into typed run events.

Only the ``event`` discriminator and, for completed tests, ``status`` and
``labels`` are required. Every other field is read permissively and unknown
fields are ignored so newer runner versions keep working.
"""
import json
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeAlias

import structlog
from attrs import define, field

from elmtestfeed.exceptions import EventDecodeError
from elmtestfeed.paths import LabelPath
from elmtestfeed.telemetry import StructLogger

log: StructLogger = structlog.get_logger("events")


class TestStatus(Enum):
    """Outcome of a single completed test."""
    __test__ = False

    PASS = "pass"
    FAIL = "fail"
    TODO = "todo"


@define(frozen=True, slots=True)
class RunStart:
    """Metadata announced before any test runs."""
    test_count: str | None = None
    fuzz_runs: str | None = None
    seed: str | None = None
    paths: tuple[str, ...] = field(factory=tuple, converter=tuple)


@define(frozen=True, slots=True)
class RunComplete:
    """Summary announced after the last test."""
    passed: str | None = None
    failed: str | None = None
    duration: str | None = None
    auto_fail: str | None = None


@define(frozen=True, slots=True)
class TestCompleted:
    """One finished test and its full label path."""
    __test__ = False

    status: TestStatus
    labels: tuple[str, ...] = field(converter=tuple)
    failures: Any = None
    duration: str | None = None

    @property
    def path(self) -> LabelPath:
        return LabelPath.from_labels(self.labels)

    @property
    def duration_ms(self) -> int | None:
        """The duration as an integer, when the runner sent a number."""
        if self.duration is None:
            return None
        try:
            return int(self.duration)
        except ValueError:
            return None


RunEvent: TypeAlias = RunStart | RunComplete | TestCompleted


def _as_text(value: Any) -> str | None:
    """Counts and durations arrive as strings, but accept bare numbers too."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _decode_run_start(obj: Mapping[str, Any]) -> RunStart:
    paths = obj.get("paths") or []
    if not isinstance(paths, list):
        paths = []
    return RunStart(
        test_count=_as_text(obj.get("testCount")),
        fuzz_runs=_as_text(obj.get("fuzzRuns")),
        seed=_as_text(obj.get("initialSeed", obj.get("seed"))),
        paths=(p for p in paths if isinstance(p, str)),
    )


def _decode_run_complete(obj: Mapping[str, Any]) -> RunComplete:
    return RunComplete(
        passed=_as_text(obj.get("passed")),
        failed=_as_text(obj.get("failed")),
        duration=_as_text(obj.get("duration")),
        auto_fail=_as_text(obj.get("autoFail")),
    )


def _decode_test_completed(obj: Mapping[str, Any]) -> TestCompleted:
    raw_status = obj.get("status")
    try:
        status = TestStatus(raw_status)
    except ValueError:
        raise EventDecodeError(f"Unrecognized test status: {raw_status!r}") from None

    labels = obj.get("labels")
    if not isinstance(labels, list) or not labels:
        raise EventDecodeError("Completed test has no labels")
    if not all(isinstance(label, str) for label in labels):
        raise EventDecodeError("Test labels must all be strings")

    return TestCompleted(
        status=status,
        labels=labels,
        failures=obj.get("failures"),
        duration=_as_text(obj.get("duration")),
    )


_DECODERS: dict[str, Callable[[Mapping[str, Any]], RunEvent]] = {
    "runStart": _decode_run_start,
    "runComplete": _decode_run_complete,
    "testCompleted": _decode_test_completed,
}


def parse_event(line: str) -> RunEvent:
    """
    Parses one report line into a run event.

    Raises:
        EventDecodeError: The line is not a JSON object, has no recognized
            ``event`` field, or describes a test without a usable label path.
    """
    try:
        obj = json.loads(line)
    except json.JSONDecodeError as e:
        raise EventDecodeError(f"Not valid JSON: {e.msg}", line=line) from e

    if not isinstance(obj, dict):
        raise EventDecodeError("Top-level JSON value is not an object", line=line)

    kind = obj.get("event")
    decoder = _DECODERS.get(kind) if isinstance(kind, str) else None
    if decoder is None:
        raise EventDecodeError(f"Unrecognized event kind: {kind!r}", line=line)

    try:
        return decoder(obj)
    except EventDecodeError as e:
        raise EventDecodeError(e.reason, line=line) from None


def decode(line: str) -> RunEvent | None:
    """Like :func:`parse_event`, but returns None for lines that are not events."""
    try:
        return parse_event(line)
    except EventDecodeError as e:
        log.debug("Line is not a run event", reason=e.reason)
        return None

# 🔼⚙️
