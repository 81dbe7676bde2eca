"""Tests for text normalization and digram segmentation."""

import pytest

from polysquare.services.preprocessing.digraphs import DigraphSegmenter, split_digraphs
from polysquare.services.preprocessing.normalizer import TextNormalizer


class TestTextNormalizer:
    """Test suite for the text normalizer."""

    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()

    def test_normalize(self, normalizer):
        assert normalizer.normalize("I would like 4 tins of jam.") == "IWOULDLIKETINSOFIAM"

    def test_normalize_full_reports_changes(self, normalizer):
        result = normalizer.normalize_full("jam jar!")

        assert result.text == "IAMIAR"
        assert result.original == "jam jar!"
        assert result.folded == 2
        assert result.removed_chars == {" ": 1, "!": 1}

    def test_unicode_compatibility_forms(self, normalizer):
        """NFKC turns the ligature into plain letters."""
        assert normalizer.normalize("ﬁne") == "FINE"

    def test_empty(self, normalizer):
        assert normalizer.normalize("123 ?!") == ""


class TestSplitDigraphs:
    """Test suite for digram segmentation."""

    def test_pairs(self):
        assert list(split_digraphs("MYSECRETMESSAGE")) == [
            ("M", "Y"), ("S", "E"), ("C", "R"), ("E", "T"),
            ("M", "E"), ("S", "X"), ("S", "A"), ("G", "E"),
        ]

    def test_doubles_are_split(self):
        assert list(split_digraphs("BALLOON")) == [("B", "A"), ("L", "X"), ("L", "O"), ("O", "N")]

    def test_odd_length_padded(self):
        assert list(split_digraphs("ABC")) == [("A", "B"), ("C", "X")]

    def test_filler_never_doubles(self):
        """A lone X is padded with Q instead of X."""
        assert list(split_digraphs("X")) == [("X", "Q")]
        assert list(split_digraphs("XX")) == [("X", "Q"), ("X", "Q")]

    def test_custom_filler(self):
        assert list(split_digraphs("AAB", filler="Z")) == [("A", "Z"), ("A", "B")]

    def test_strict_pairing(self):
        assert list(split_digraphs("EEA", split_doubles=False)) == [("E", "E"), ("A", "X")]

    def test_empty(self):
        assert list(split_digraphs("")) == []


class TestDigraphSegmenter:
    """The segmenter can be iterated more than once."""

    def test_restartable(self):
        segmenter = DigraphSegmenter("HIDETHEGOLD")
        first = list(segmenter)
        assert first == list(segmenter)
        assert len(segmenter) == 6
