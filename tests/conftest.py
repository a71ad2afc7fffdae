import json

import pytest

from elmtestfeed.runtime import TestEventProcessor


def completed(status: str, labels: list[str], failures=None, duration: str = "1") -> str:
    """Builds a testCompleted report line."""
    return json.dumps(
        {
            "event": "testCompleted",
            "status": status,
            "labels": labels,
            "failures": failures if failures is not None else [],
            "duration": duration,
        }
    )


RUN_START = '{"event":"runStart","testCount":"9","fuzzRuns":"100","paths":[],"initialSeed":"1448022641"}'
RUN_COMPLETE = '{"event":"runComplete","passed":"8","failed":"1","duration":"353","autoFail":null}'

BOOM_FAILURE = [{"given": None, "message": "boom", "reason": {"type": "custom", "data": "boom"}}]


@pytest.fixture
def processor() -> TestEventProcessor:
    return TestEventProcessor()


@pytest.fixture
def sample_report() -> list[str]:
    """A small but complete elm-test report, including a compiler chatter line."""
    return [
        "Compiling tests...",
        RUN_START,
        completed("pass", ["Module", "suite", "test"]),
        completed("fail", ["Module", "suite2", "deep", "fail"], BOOM_FAILURE),
        completed("todo", ["Other", "later"], ["TODO comment"]),
        RUN_COMPLETE,
    ]


@pytest.fixture
def completed_line():
    """Factory fixture for testCompleted report lines."""
    return completed


@pytest.fixture
def boom_failure() -> list[dict]:
    return [dict(entry) for entry in BOOM_FAILURE]
