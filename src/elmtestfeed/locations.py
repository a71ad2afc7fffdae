#
# src/elmtestfeed/locations.py
#
"""
Stable location identifiers the host tree uses to navigate back to source.
"""
from enum import Enum

from attrs import define

from elmtestfeed.paths import LabelPath

SUITE_PROTOCOL = "elmTestDescribe"
TEST_PROTOCOL = "elmTestTest"
_PROTOCOL_SEPARATOR = "://"


class LocationKind(Enum):
    SUITE = SUITE_PROTOCOL
    TEST = TEST_PROTOCOL


@define(frozen=True, slots=True)
class Location:
    """A parsed location identifier."""
    kind: LocationKind
    path: LabelPath

    @property
    def url(self) -> str:
        return f"{self.kind.value}{_PROTOCOL_SEPARATOR}{self.path.canonical}"


def suite_location(path: LabelPath) -> str:
    """Location id for a suite (``describe``) node."""
    return Location(LocationKind.SUITE, path).url


def test_location(path: LabelPath) -> str:
    """Location id for a test node; ``path`` includes the test's own label."""
    return Location(LocationKind.TEST, path).url


def parse_location(url: str) -> Location | None:
    """
    Parses a location id back into its kind and path.

    Returns None for ids that use neither of the known protocols.
    """
    protocol, separator, rest = url.partition(_PROTOCOL_SEPARATOR)
    if not separator:
        return None
    try:
        kind = LocationKind(protocol)
    except ValueError:
        return None
    return Location(kind, LabelPath.from_canonical(rest))

# 🔼⚙️
