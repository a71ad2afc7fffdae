#
# src/elmtestfeed/runtime/__init__.py
#
"""
Stateful consumption of a report stream.
"""
from .processor import TestEventProcessor, suite_deltas, test_deltas

__all__ = ["TestEventProcessor", "suite_deltas", "test_deltas"]

# 🔼⚙️
