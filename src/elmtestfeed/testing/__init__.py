#
# src/elmtestfeed/testing/__init__.py
#
"""
Launching the external test runner and streaming its report.
"""
from .factory import get_report_runner
from .protocols import ReportRunner, RunnerResult
from .subprocess_runner import SubprocessReportRunner

__all__ = [
    "ReportRunner",
    "RunnerResult",
    "SubprocessReportRunner",
    "get_report_runner",
]

# 🔼⚙️
