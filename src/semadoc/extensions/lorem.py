#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/extensions/lorem.py
"""Filler text for the ``lorem::[]`` block macro.

The macro expands to a number of generated paragraphs::

    lorem::[length=2-4,words_per_sentence=6-12]

``length`` is the number of paragraphs (and of sentences per paragraph) and
``words_per_sentence`` the sentence length. Both accept a fixed number or a
``min-max`` range. Pass a seed to ``LoremGenerator`` for reproducible output.

"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from semadoc.constants import DEFAULT_LOREM_LENGTH, DEFAULT_LOREM_WORDS_PER_SENTENCE, LOREM_COMMA_FREQUENCY

logger = logging.getLogger(__name__)

DICTIONARY = (
    "lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit", "sed", "do",
    "eiusmod", "tempor", "incididunt", "ut", "labore", "et", "dolore", "magna", "aliqua", "enim",
    "ad", "minim", "veniam", "quis", "nostrud", "exercitation", "ullamco", "laboris", "nisi",
    "aliquip", "ex", "ea", "commodo", "consequat", "duis", "aute", "irure", "in", "reprehenderit",
    "voluptate", "velit", "esse", "cillum", "eu", "fugiat", "nulla", "pariatur", "excepteur",
    "sint", "occaecat", "cupidatat", "non", "proident", "sunt", "culpa", "qui", "officia",
    "deserunt", "mollit", "anim", "id", "est", "laborum", "curabitur", "pretium", "tincidunt",
    "lacus", "gravida", "orci", "vitae", "mauris", "nunc", "mattis", "rhoncus", "urna", "neque",
    "viverra", "justo", "porta", "nibh", "venenatis", "cras", "semper", "auctor", "fringilla",
)  # fmt: skip

RangeSpec = Union[int, str]


class LoremGenerator:
    """Random filler text generator.

    Parameters
    ----------
    seed : int or None, default = None
        Seed for the underlying ``random.Random``

    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the generator."""
        self._random = random.Random(seed)

    def number_within_range(self, spec: RangeSpec) -> int:
        """Return ``spec`` itself for a number, or a random value in a ``min-max`` range.

        Unparseable values count as zero.
        """
        if isinstance(spec, int):
            return max(spec, 0)

        text = str(spec).strip()
        if "-" not in text:
            return int(text) if text.isdigit() else 0

        low_text, _, high_text = text.partition("-")
        low = int(low_text) if low_text.strip().isdigit() else 0
        high = int(high_text) if high_text.strip().isdigit() else 0
        if high < low:
            low, high = high, low
        return self._random.randint(low, high)

    def words(self, count: int) -> list[str]:
        """Return ``count`` random dictionary words."""
        return [self._random.choice(DICTIONARY) for _ in range(count)]

    def sentence(self, words_per_sentence: RangeSpec = DEFAULT_LOREM_WORDS_PER_SENTENCE) -> str:
        """Return one capitalized sentence ending with a period.

        Commas are inserted at random, never among the last three words.
        """
        words = self.words(self.number_within_range(words_per_sentence))
        if not words:
            return ""

        parts = [words[0].capitalize()]
        for index, word in enumerate(words[1:], start=1):
            if index < len(words) - 3 and self._random.randint(0, LOREM_COMMA_FREQUENCY) == 0:
                parts[-1] += ","
            parts.append(word)
        return " ".join(parts) + "."

    def paragraph(
        self,
        length: RangeSpec = DEFAULT_LOREM_LENGTH,
        words_per_sentence: RangeSpec = DEFAULT_LOREM_WORDS_PER_SENTENCE,
    ) -> str:
        """Return ``length`` sentences joined by spaces."""
        sentences = (self.sentence(words_per_sentence) for _ in range(self.number_within_range(length)))
        return " ".join(sentence for sentence in sentences if sentence)

    def paragraphs(
        self,
        length: RangeSpec = DEFAULT_LOREM_LENGTH,
        words_per_sentence: RangeSpec = DEFAULT_LOREM_WORDS_PER_SENTENCE,
    ) -> list[str]:
        """Return ``length`` non-empty paragraphs."""
        count = self.number_within_range(length)
        result = [self.paragraph(length, words_per_sentence) for _ in range(count)]
        logger.debug("Generated %d lorem paragraphs", count)
        return [text for text in result if text]


__all__ = ["DICTIONARY", "LoremGenerator"]
