#
# src/elmtestfeed/rendering.py
#
"""
Turns tree deltas into console output: an indented tree or JSON lines.
"""
import json
from collections.abc import Iterator
from typing import Protocol

import click
from attrs import define, field

from elmtestfeed.deltas import (
    SuiteFinished,
    SuiteStarted,
    TestFailed,
    TestFinished,
    TreeDelta,
)

INDENT = "  "


class DeltaRenderer(Protocol):
    def render(self, delta: TreeDelta) -> Iterator[str]:
        """Yields zero or more output lines for one delta."""
        ...


class JsonLinesRenderer:
    """One JSON object per delta."""

    def render(self, delta: TreeDelta) -> Iterator[str]:
        yield json.dumps(delta.to_dict(), ensure_ascii=False)


@define(slots=True)
class RunTally:
    """Counts of test outcomes seen so far."""
    passed: int = 0
    failed: int = 0
    todo: int = 0

    def record(self, delta: TreeDelta) -> None:
        if isinstance(delta, TestFailed):
            self.failed += 1
        elif isinstance(delta, TestFinished):
            if delta.skipped:
                self.todo += 1
            else:
                self.passed += 1

    def summary(self) -> str:
        return f"{self.passed} passed, {self.failed} failed, {self.todo} todo"


@define(slots=True)
class TextTreeRenderer:
    """
    Renders deltas as an indented tree.

    Suites open and close a nesting level; test outcomes print one line, and
    failures add their message and any expected/actual blocks beneath it.
    """
    color: bool = True
    _depth: int = field(default=0, init=False)

    def _style(self, text: str, **styles) -> str:
        return click.style(text, **styles) if self.color else text

    def _block(self, text: str, depth: int) -> Iterator[str]:
        for line in text.splitlines() or [""]:
            yield f"{INDENT * depth}{line}"

    def render(self, delta: TreeDelta) -> Iterator[str]:
        indent = INDENT * self._depth
        if isinstance(delta, SuiteStarted):
            yield indent + self._style(delta.name, bold=True)
            self._depth += 1
        elif isinstance(delta, SuiteFinished):
            self._depth = max(self._depth - 1, 0)
        elif isinstance(delta, TestFinished):
            if delta.skipped:
                line = f"{indent}{self._style('…', fg='yellow')} {delta.name}"
                if delta.comment:
                    line += self._style(f" (todo: {delta.comment})", dim=True)
                yield line
            else:
                yield f"{indent}{self._style('✓', fg='green')} {delta.name}"
        elif isinstance(delta, TestFailed):
            yield f"{indent}{self._style('✗', fg='red')} {delta.name}"
            yield from self._block(delta.message, self._depth + 2)
            if delta.expected is not None:
                yield f"{INDENT * (self._depth + 2)}expected:"
                yield from self._block(delta.expected, self._depth + 3)
            if delta.actual is not None:
                yield f"{INDENT * (self._depth + 2)}actual:"
                yield from self._block(delta.actual, self._depth + 3)


def get_renderer(output_format: str, color: bool = True) -> DeltaRenderer:
    if output_format == "json":
        return JsonLinesRenderer()
    return TextTreeRenderer(color=color)

# 🔼⚙️
