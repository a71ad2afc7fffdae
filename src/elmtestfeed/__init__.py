#
# src/elmtestfeed/__init__.py
#
"""
elmtestfeed: turns an elm-test JSON report stream into test-tree deltas.
"""
from elmtestfeed.deltas import (
    SuiteFinished,
    SuiteStarted,
    TestFailed,
    TestFinished,
    TestStarted,
    TreeDelta,
)
from elmtestfeed.events import RunComplete, RunEvent, RunStart, TestCompleted, TestStatus, decode
from elmtestfeed.failures import Diagnostic, extract
from elmtestfeed.paths import EMPTY_PATH, LabelPath
from elmtestfeed.runtime import TestEventProcessor

__all__ = [
    "EMPTY_PATH",
    "Diagnostic",
    "LabelPath",
    "RunComplete",
    "RunEvent",
    "RunStart",
    "SuiteFinished",
    "SuiteStarted",
    "TestCompleted",
    "TestEventProcessor",
    "TestFailed",
    "TestFinished",
    "TestStarted",
    "TestStatus",
    "TreeDelta",
    "decode",
    "extract",
]

# 🔼⚙️
