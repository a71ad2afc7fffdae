#
# tests/unit/test_events.py
#
"""
Tests for decoding report lines into run events.
"""

import pytest

from elmtestfeed import events
from elmtestfeed.events import RunComplete, RunStart, decode, parse_event
from elmtestfeed.exceptions import EventDecodeError
from elmtestfeed.paths import LabelPath


class TestDecode:
    """Well-formed events decode into their typed variants."""

    def test_run_start(self) -> None:
        event = decode(
            '{"event":"runStart","testCount":"9","fuzzRuns":"100","paths":["tests/A.elm"],"initialSeed":"1448022641"}'
        )
        assert event == RunStart(
            test_count="9", fuzz_runs="100", seed="1448022641", paths=("tests/A.elm",)
        )

    def test_run_complete_with_null_auto_fail(self) -> None:
        event = decode('{"event":"runComplete","passed":"8","failed":"1","duration":"353","autoFail":null}')
        assert event == RunComplete(passed="8", failed="1", duration="353", auto_fail=None)

    def test_numbers_are_accepted_where_strings_are_expected(self) -> None:
        event = decode('{"event":"runComplete","passed":8,"failed":0,"duration":12.5}')
        assert isinstance(event, RunComplete)
        assert event.passed == "8"
        assert event.duration == "12.5"

    def test_test_completed(self) -> None:
        event = decode(
            '{"event":"testCompleted","status":"pass","labels":["Module","test / stuff"],"failures":[],"duration":"1"}'
        )
        assert isinstance(event, events.TestCompleted)
        assert event.status is events.TestStatus.PASS
        assert event.labels == ("Module", "test / stuff")
        assert event.path == LabelPath.from_labels(["Module", "test / stuff"])
        assert event.failures == []
        assert event.duration_ms == 1

    def test_unknown_fields_are_ignored(self) -> None:
        event = decode(
            '{"event":"testCompleted","status":"todo","labels":["A"],"failures":["x"],"duration":"2","future":{"a":1}}'
        )
        assert isinstance(event, events.TestCompleted)
        assert event.status is events.TestStatus.TODO

    def test_non_numeric_duration(self) -> None:
        event = decode('{"event":"testCompleted","status":"pass","labels":["A"],"duration":"soon"}')
        assert event.duration_ms is None


class TestDecodeFailures:
    """Lines that are not events yield None rather than raising."""

    @pytest.mark.parametrize(
        "line",
        [
            "junk",
            "",
            "[1, 2, 3]",
            '"just a string"',
            '{"no":"event"}',
            '{"event":"somethingElse"}',
            '{"event":42}',
            '{"event":"testCompleted","status":"pass","labels":[]}',
            '{"event":"testCompleted","status":"pass"}',
            '{"event":"testCompleted","status":"pass","labels":["A", 3]}',
            '{"event":"testCompleted","status":"skipped","labels":["A"]}',
        ],
    )
    def test_returns_none(self, line: str) -> None:
        assert decode(line) is None

    def test_parse_event_reports_reason(self) -> None:
        with pytest.raises(EventDecodeError) as exc_info:
            parse_event('{"event":"testCompleted","status":"pass","labels":[]}')
        assert "no labels" in exc_info.value.reason
        assert exc_info.value.line is not None

    def test_parse_event_on_invalid_json(self) -> None:
        with pytest.raises(EventDecodeError, match="Not valid JSON"):
            parse_event("junk")
