#
# src/elmtestfeed/failures.py
#
"""
Normalizes elm-test failure payloads into a uniform diagnostic.

Recognized shapes for the first entry of a failing test's ``failures`` list:

* ``{"message": ..., "reason": {"data": "<text>"}}``
* ``{"message": ..., "reason": {"data": {"expected": "<text>", "actual": "<text>", ...}}}``
* ``{"message": ..., "reason": {"data": {"expected": [<text>...], "actual": [<text>...]}}}``

Anything else yields an empty diagnostic, and callers fall back to the
pretty-printed payload.
"""
import json
from typing import Any

from attrs import define

from elmtestfeed.events import TestStatus


@define(frozen=True, slots=True)
class Diagnostic:
    """Human-readable detail extracted from a failure payload."""
    comment: str | None = None
    message: str | None = None
    expected: str | None = None
    actual: str | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.comment is None
            and self.message is None
            and self.expected is None
            and self.actual is None
        )


EMPTY_DIAGNOSTIC = Diagnostic()


def pretty_print(value: Any) -> str:
    """Renders a JSON value with two-space indentation, keeping key order."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def _first(failures: Any) -> Any:
    if isinstance(failures, list) and failures:
        return failures[0]
    return None


def _is_text_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _comparison(data: Any) -> tuple[str | None, str | None]:
    if not isinstance(data, dict):
        return None, None
    expected, actual = data.get("expected"), data.get("actual")
    if isinstance(expected, str) and isinstance(actual, str):
        return expected, actual
    if _is_text_list(expected) and _is_text_list(actual):
        return pretty_print(expected), pretty_print(actual)
    return None, None


def _extract_todo(failures: Any) -> Diagnostic:
    comment = _first(failures)
    if isinstance(comment, str):
        return Diagnostic(comment=comment)
    return EMPTY_DIAGNOSTIC


def _extract_fail(failures: Any) -> Diagnostic:
    failure = _first(failures)
    if not isinstance(failure, dict) or "reason" not in failure:
        return EMPTY_DIAGNOSTIC
    message = failure.get("message")
    if not isinstance(message, str):
        return EMPTY_DIAGNOSTIC

    reason = failure["reason"]
    data = reason.get("data") if isinstance(reason, dict) else None
    expected, actual = _comparison(data)
    return Diagnostic(message=message, expected=expected, actual=actual)


def extract(failures: Any, status: TestStatus) -> Diagnostic:
    """Derives a diagnostic from a completed test's ``failures`` payload."""
    if status is TestStatus.TODO:
        return _extract_todo(failures)
    if status is TestStatus.FAIL:
        return _extract_fail(failures)
    return EMPTY_DIAGNOSTIC


def failure_message(failures: Any, diagnostic: Diagnostic) -> str:
    """The message shown for a failed test: the extracted one or the raw payload."""
    if diagnostic.message is not None:
        return diagnostic.message
    return pretty_print(failures)

# 🔼⚙️
