#
# tests/unit/test_paths.py
#
"""
Tests for label paths and segment escaping.
"""

import pytest

from elmtestfeed.paths import (
    EMPTY_PATH,
    LabelPath,
    decode_segment,
    encode_segment,
)


class TestSegmentEncoding:
    """Escaping of labels that contain the separator."""

    def test_plain_label_is_unchanged(self) -> None:
        assert encode_segment("Nested.Module") == "Nested.Module"

    def test_label_with_separator_is_form_encoded(self) -> None:
        assert encode_segment("test / stuff") == "test+%2F+stuff"

    @pytest.mark.parametrize(
        "label",
        [
            "a/b",
            "test / stuff",
            "100% / done",
            "/leading",
            "x+y/z",
            "a%2Fb",
            "a+b%2F",
            "100%",
            "a+b",
            "%25",
            "plain label",
        ],
    )
    def test_encoded_label_is_recoverable(self, label: str) -> None:
        encoded = encode_segment(label)
        assert "/" not in encoded
        assert decode_segment(encoded) == label
        assert LabelPath.from_labels(["Module", label]).labels == ("Module", label)

    def test_plus_without_escape_is_unchanged(self) -> None:
        assert encode_segment("a+b") == "a+b"
        assert decode_segment("a+b") == "a+b"

    def test_percent_labels_never_collide_with_separator_labels(self) -> None:
        assert encode_segment("a%2Fb") != encode_segment("a/b")
        assert LabelPath.from_labels(["a%2Fb"]) != LabelPath.from_labels(["a/b"])
        assert LabelPath.from_labels(["a%2Fb"]).name == "a%2Fb"


class TestLabelPath:
    """Structural operations on paths."""

    def test_from_labels_encodes_each_segment(self) -> None:
        path = LabelPath.from_labels(["Module", "test / stuff"])
        assert path.segments == ("Module", "test+%2F+stuff")
        assert len(path) == 2

    def test_canonical_round_trip_recovers_labels(self) -> None:
        path = LabelPath.from_labels(["Module", "suite / with slash", "test"])
        parsed = LabelPath.from_canonical(path.canonical)
        assert parsed == path
        assert parsed.labels == ("Module", "suite / with slash", "test")

    def test_name_is_decoded_last_label(self) -> None:
        assert LabelPath.from_labels(["Module", "test / stuff"]).name == "test / stuff"
        assert EMPTY_PATH.name == ""

    def test_prefix_and_drop_last(self) -> None:
        path = LabelPath.from_labels(["A", "B", "C"])
        assert path.prefix(2) == LabelPath.from_labels(["A", "B"])
        assert path.prefix(0) == EMPTY_PATH
        assert path.drop_last() == LabelPath.from_labels(["A", "B"])

    def test_drop_last_of_empty_path_is_empty(self) -> None:
        assert EMPTY_PATH.drop_last() == EMPTY_PATH

    def test_child_appends_encoded_label(self) -> None:
        path = LabelPath.from_labels(["A"]).child("b/c")
        assert path.segments == ("A", "b%2Fc")

    def test_empty_path_canonical_form(self) -> None:
        assert EMPTY_PATH.canonical == ""
        assert LabelPath.from_canonical("") == EMPTY_PATH


class TestCommonPrefixLength:
    """Shared leading segments between two paths."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ([], [], 0),
            ([], ["A"], 0),
            (["A", "B"], ["A", "B"], 2),
            (["A", "B", "C"], ["A", "B"], 2),
            (["A", "B", "C"], ["A", "X", "C"], 1),
            (["A"], ["B"], 0),
        ],
    )
    def test_symmetric_and_bounded(self, a: list[str], b: list[str], expected: int) -> None:
        pa, pb = LabelPath.from_labels(a), LabelPath.from_labels(b)
        assert pa.common_prefix_length(pb) == expected
        assert pb.common_prefix_length(pa) == expected
        assert expected <= min(len(pa), len(pb))

    def test_comparison_uses_encoded_segments(self) -> None:
        a = LabelPath.from_labels(["M", "x / y"])
        b = LabelPath.from_labels(["M", "x / y", "t"])
        assert a.common_prefix_length(b) == 2
