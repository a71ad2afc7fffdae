#
# src/elmtestfeed/tree.py
#
"""
Computes which suites to close and open when moving from one test to the next.

``from_path`` is the previously completed test (or the empty path before the
first test, or an already-open suite path); ``to_path`` is the newly completed
test, whose last label is the test name.
"""
from elmtestfeed.paths import LabelPath


def suites_to_close(from_path: LabelPath, to_path: LabelPath) -> list[LabelPath]:
    """Suites being exited, deepest first."""
    from_suite = from_path.drop_last()
    shared = from_suite.common_prefix_length(to_path)
    return [from_suite.prefix(length) for length in range(len(from_suite), shared, -1)]


def suites_to_open(from_path: LabelPath, to_path: LabelPath) -> list[LabelPath]:
    """Suites being entered, shallowest first."""
    to_suite = to_path.drop_last()
    shared = from_path.common_prefix_length(to_suite)
    return [to_suite.prefix(length) for length in range(shared + 1, len(to_suite) + 1)]

# 🔼⚙️
