#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/template.py
"""Build AsciiDoc source from static text and interpolated values.

Python has no tagged templates, so a template is passed as its static text
segments plus the values between them, the same shape a tagged template
receives::

    >>> from semadoc.template import build_source, raw
    >>> build_source(["Before", "After"], [raw("----\\ncode\\n----")])
    'Before\\n----\\ncode\\n----\\nAfter'

Plain values are inserted as-is. Raw values get a newline before them when
they open with a block fence and the output so far does not end a line, and
a newline after them when neither they nor the following static text provide
one. The assembled source is dedented, so templates can be indented to match
the surrounding code.

``adoc`` wraps this into a converting callable::

    >>> html = adoc(["* Item A\\n* Item ", ""], "B")

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Union

from semadoc.constants import BLOCK_FENCE_PATTERN
from semadoc.options.convert import ConvertOptions
from semadoc.utils.text import dedent

logger = logging.getLogger(__name__)

_BLOCK_FENCE = re.compile(BLOCK_FENCE_PATTERN, re.MULTILINE)


@dataclass(frozen=True)
class PlainText:
    """Interpolated text inserted exactly as given."""

    text: str


@dataclass(frozen=True)
class RawText:
    """Interpolated AsciiDoc snippet that is kept on lines of its own."""

    text: str


Segment = Union[PlainText, RawText]
TemplateStrings = Union[str, Sequence[str]]


def raw(value: Any) -> RawText:
    """Mark ``value`` as a raw AsciiDoc snippet."""
    return RawText(str(value))


def plain(value: Any) -> PlainText:
    """Mark ``value`` as plain text."""
    return PlainText(str(value))


def classify(value: Any) -> Segment:
    """Return ``value`` as a segment; anything that is not one becomes plain text."""
    if isinstance(value, (PlainText, RawText)):
        return value
    return PlainText(str(value))


def _needs_leading_newline(output: str, text: str) -> bool:
    return bool(output) and not output.endswith("\n") and _BLOCK_FENCE.search(text) is not None


def _needs_trailing_newline(text: str, next_static: str | None) -> bool:
    if text.endswith("\n"):
        return False
    return next_static is not None and not next_static.startswith("\n")


def build_source(strings: TemplateStrings, values: Iterable[Any] = ()) -> str:
    """Interleave static template text with interpolated values.

    Parameters
    ----------
    strings : str or sequence of str
        Static text segments; a single string is a template without values
    values : iterable, default = ()
        Values placed after the static segment with the same index

    Returns
    -------
    str
        Dedented AsciiDoc source

    Raises
    ------
    ValueError
        If there are more values than static segments

    """
    statics = (strings,) if isinstance(strings, str) else tuple(strings)
    segments = [classify(value) for value in values]
    if len(segments) > len(statics):
        raise ValueError(f"Got {len(segments)} values for {len(statics)} static template segments")

    output = ""
    for index, static in enumerate(statics):
        output += static
        if index >= len(segments):
            continue

        segment = segments[index]
        if isinstance(segment, RawText):
            next_static = statics[index + 1] if index + 1 < len(statics) else None
            if _needs_leading_newline(output, segment.text):
                output += "\n"
            output += segment.text
            if _needs_trailing_newline(segment.text, next_static):
                output += "\n"
        else:
            output += segment.text

    return dedent(output)


class AdocTemplate:
    """Callable that builds a template's source and converts it to HTML.

    Parameters
    ----------
    options : ConvertOptions or None, default = None
        Options used for every conversion

    Examples
    --------
        >>> adoc("* a\\n* b")
        '<ul><li>a</li><li>b</li></ul>'
        >>> adoc.with_options(ConvertOptions()).source("  == Title")
        '== Title'

    """

    raw = staticmethod(raw)
    plain = staticmethod(plain)

    def __init__(self, options: ConvertOptions | None = None):
        """Initialize the template with its conversion options."""
        self.options = options

    def __call__(self, strings: TemplateStrings, *values: Any) -> str:
        """Build the source and convert it to HTML."""
        from semadoc.api import convert

        source = self.source(strings, *values)
        logger.debug("Converting template source (%d characters)", len(source))
        return convert(source, self.options)

    def source(self, strings: TemplateStrings, *values: Any) -> str:
        """Build the source without converting it."""
        return build_source(strings, values)

    def with_options(self, options: ConvertOptions | None) -> "AdocTemplate":
        """Return a template bound to ``options``."""
        return AdocTemplate(options)


adoc = AdocTemplate()

__all__ = [
    "AdocTemplate",
    "PlainText",
    "RawText",
    "Segment",
    "adoc",
    "build_source",
    "classify",
    "plain",
    "raw",
]
