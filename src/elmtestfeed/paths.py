#
# src/elmtestfeed/paths.py
#
"""
Label paths: the ordered suite/test names that locate a node in the test tree.

Each label is stored in its encoded form so the canonical ``/``-joined string
never has ambiguous segment boundaries. Labels containing the separator are
form-encoded as a whole (``"test / stuff"`` becomes ``"test+%2F+stuff"``), and so
are labels containing ``%``. Every other label is stored unchanged, so a
segment holds a ``%`` exactly when it was encoded.
"""
from collections.abc import Iterable
from urllib.parse import quote_plus, unquote_plus

from attrs import define, field

SEPARATOR = "/"
ESCAPE = "%"


def encode_segment(label: str) -> str:
    """Encodes a raw label so it can be embedded in a joined path."""
    if SEPARATOR not in label and ESCAPE not in label:
        return label
    return quote_plus(label, safe="")


def decode_segment(segment: str) -> str:
    """Reverses :func:`encode_segment`."""
    if ESCAPE not in segment:
        return segment
    return unquote_plus(segment)


@define(frozen=True, slots=True)
class LabelPath:
    """
    An immutable sequence of encoded path segments.

    Comparison is structural, segment by segment. The empty path stands for
    "no test processed yet".
    """
    segments: tuple[str, ...] = field(factory=tuple, converter=tuple)

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> "LabelPath":
        """Builds a path from raw labels, encoding each one."""
        return cls(encode_segment(label) for label in labels)

    @classmethod
    def from_canonical(cls, text: str) -> "LabelPath":
        """Parses a canonical string produced by :attr:`canonical`."""
        if not text:
            return cls()
        return cls(text.split(SEPARATOR))

    @property
    def canonical(self) -> str:
        return SEPARATOR.join(self.segments)

    @property
    def labels(self) -> tuple[str, ...]:
        """The raw, decoded labels."""
        return tuple(decode_segment(segment) for segment in self.segments)

    @property
    def name(self) -> str:
        """The decoded last label, or an empty string for the empty path."""
        if not self.segments:
            return ""
        return decode_segment(self.segments[-1])

    def prefix(self, length: int) -> "LabelPath":
        """Returns the first ``length`` segments."""
        return LabelPath(self.segments[:length])

    def drop_last(self) -> "LabelPath":
        """Returns every segment but the last; the empty path stays empty."""
        return LabelPath(self.segments[:-1])

    def child(self, label: str) -> "LabelPath":
        return LabelPath(self.segments + (encode_segment(label),))

    def common_prefix_length(self, other: "LabelPath") -> int:
        """Number of leading segments shared with ``other``."""
        count = 0
        for mine, theirs in zip(self.segments, other.segments):
            if mine != theirs:
                break
            count += 1
        return count

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.canonical


EMPTY_PATH = LabelPath()

# 🔼⚙️
