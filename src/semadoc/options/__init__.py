#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for semadoc parsing and conversion."""

from semadoc.options.asciidoc import AsciiDocParserOptions
from semadoc.options.base import BaseConverterOptions, BaseParserOptions, CloneFrozenMixin
from semadoc.options.convert import ConvertOptions
from semadoc.options.html import HtmlConverterOptions

__all__ = [
    "AsciiDocParserOptions",
    "BaseConverterOptions",
    "BaseParserOptions",
    "CloneFrozenMixin",
    "ConvertOptions",
    "HtmlConverterOptions",
]
