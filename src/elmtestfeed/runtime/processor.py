# src/elmtestfeed/runtime/processor.py
"""
Consumes report lines one at a time and turns them into tree deltas.
"""
import structlog

from elmtestfeed.deltas import (
    SuiteFinished,
    SuiteStarted,
    TestFailed,
    TestFinished,
    TestStarted,
    TreeDelta,
)
from elmtestfeed.events import RunComplete, RunEvent, RunStart, TestCompleted, TestStatus, decode
from elmtestfeed.failures import extract, failure_message
from elmtestfeed.locations import suite_location, test_location
from elmtestfeed.paths import EMPTY_PATH, LabelPath
from elmtestfeed.telemetry import StructLogger
from elmtestfeed.tree import suites_to_close, suites_to_open

log: StructLogger = structlog.get_logger("runtime.processor")


def suite_deltas(from_path: LabelPath, to_path: LabelPath) -> list[TreeDelta]:
    """Suite close/open deltas for moving from one test path to the next."""
    deltas: list[TreeDelta] = [
        SuiteFinished(name=path.name) for path in suites_to_close(from_path, to_path)
    ]
    deltas.extend(
        SuiteStarted(name=path.name, location=suite_location(path))
        for path in suites_to_open(from_path, to_path)
    )
    return deltas


def test_deltas(event: TestCompleted) -> list[TreeDelta]:
    """The started delta and the outcome delta for one completed test."""
    path = event.path
    name = path.name
    started = TestStarted(name=name, location=test_location(path))
    duration = event.duration_ms

    if event.status is TestStatus.PASS:
        return [started, TestFinished(name=name, duration=duration)]

    diagnostic = extract(event.failures, event.status)
    if event.status is TestStatus.TODO:
        return [
            started,
            TestFinished(name=name, duration=duration, skipped=True, comment=diagnostic.comment),
        ]

    if diagnostic.message is None:
        log.info("Unrecognized failure payload, reporting it verbatim", test=path.canonical)
    return [
        started,
        TestFailed(
            name=name,
            message=failure_message(event.failures, diagnostic),
            expected=diagnostic.expected,
            actual=diagnostic.actual,
            duration=duration,
        ),
    ]


class TestEventProcessor:
    """
    Turns a line-oriented elm-test report into an ordered stream of tree deltas.

    The only state is the path of the last completed test. Lines must be fed in
    the order the runner produced them; use one processor per run.
    """
    __test__ = False

    def __init__(self) -> None:
        self.current_path: LabelPath = EMPTY_PATH
        log.debug("TestEventProcessor initialized.")

    def reset(self) -> None:
        """Forgets the last test so the next line starts a fresh tree."""
        self.current_path = EMPTY_PATH

    def accept(self, line: str) -> list[TreeDelta] | None:
        """
        Processes one report line.

        Returns:
            The deltas to apply, possibly empty, or None when the line is not
            a run event at all. State is left untouched for such lines.
        """
        event = decode(line)
        if event is None:
            return None
        return self.process(event)

    def process(self, event: RunEvent) -> list[TreeDelta]:
        """Processes an already decoded event."""
        if isinstance(event, (RunStart, RunComplete)):
            log.debug("Run event carries no tree changes", event_type=type(event).__name__)
            return []

        to_path = event.path
        deltas = suite_deltas(self.current_path, to_path)
        deltas.extend(test_deltas(event))
        self.current_path = to_path
        log.debug(
            "Processed completed test",
            test=to_path.canonical,
            status=event.status.value,
            delta_count=len(deltas),
        )
        return deltas

# 🔼⚙️
