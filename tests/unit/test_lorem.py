#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the lorem filler generator."""

import pytest

from semadoc.extensions.lorem import DICTIONARY, LoremGenerator


@pytest.mark.unit
class TestNumberWithinRange:
    """Tests for range parsing."""

    @pytest.mark.parametrize("spec, expected", [(3, 3), (-2, 0), ("5", 5), ("x", 0), ("", 0), ("4-4", 4)])
    def test_fixed_values(self, spec, expected):
        assert LoremGenerator(seed=1).number_within_range(spec) == expected

    def test_range_bounds(self):
        generator = LoremGenerator(seed=7)
        values = {generator.number_within_range("2-4") for _ in range(50)}
        assert values <= {2, 3, 4}

    def test_reversed_range(self):
        generator = LoremGenerator(seed=7)
        assert all(3 <= generator.number_within_range("6-3") <= 6 for _ in range(20))


@pytest.mark.unit
class TestGeneration:
    """Tests for words, sentences and paragraphs."""

    def test_same_seed_same_output(self):
        assert LoremGenerator(seed=42).paragraphs("2-3") == LoremGenerator(seed=42).paragraphs("2-3")

    def test_words_come_from_dictionary(self):
        words = LoremGenerator(seed=3).words(10)
        assert len(words) == 10
        assert set(words) <= set(DICTIONARY)

    def test_sentence_shape(self):
        sentence = LoremGenerator(seed=5).sentence(8)
        assert sentence[0].isupper()
        assert sentence.endswith(".")
        assert len(sentence.split()) == 8

    def test_no_comma_in_last_words(self):
        generator = LoremGenerator(seed=11)
        for _ in range(20):
            words = generator.sentence(10).split()
            assert not any(word.endswith(",") for word in words[-3:])

    def test_empty_sentence(self):
        assert LoremGenerator(seed=1).sentence(0) == ""

    def test_paragraph_sentence_count(self):
        paragraph = LoremGenerator(seed=9).paragraph(3, 5)
        assert paragraph.count(".") == 3

    def test_paragraph_count(self):
        assert len(LoremGenerator(seed=2).paragraphs(4, 5)) == 4

    def test_zero_length(self):
        assert LoremGenerator(seed=2).paragraphs(0) == []
