#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/options/html.py
"""Configuration options for semantic HTML conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from semadoc.constants import (
    DEFAULT_DOCUMENT_TITLE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_OUTFILESUFFIX,
    DEFAULT_STANDALONE,
    DEFAULT_SYNTAX_HIGHLIGHTING,
    DEFAULT_TITLE_TAG,
)
from semadoc.options.base import BaseConverterOptions

_TAG_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


@dataclass(frozen=True)
class HtmlConverterOptions(BaseConverterOptions):
    """Configuration options for converting a document tree to HTML.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the root document in a complete ``<!DOCTYPE html>`` envelope.
        When False, only the body fragment is produced.
    title_tag : str, default "summary"
        Element used for block titles outside a collapsible block.
    syntax_highlighting : bool, default True
        Highlight listing blocks with Pygments. When False, the escaped
        source is inserted unchanged.
    highlight_theme : str or None, default None
        Pygments style used when the document sets no ``highlight-theme``
        attribute. ``None`` selects the highlighter's default theme.
    language : str, default "en"
        Value of the ``lang`` attribute of the standalone envelope.
    document_title : str, default "Untitled"
        ``<title>`` of the standalone envelope when the document has none.
    outfilesuffix : str, default ".html"
        Extension of files written by ``convert_file``.

    """

    standalone: bool = field(
        default=DEFAULT_STANDALONE,
        metadata={"help": "Generate a complete HTML document", "cli_name": "standalone", "importance": "core"},
    )
    title_tag: str = field(
        default=DEFAULT_TITLE_TAG,
        metadata={"help": "Element used for block titles", "importance": "core"},
    )
    syntax_highlighting: bool = field(
        default=DEFAULT_SYNTAX_HIGHLIGHTING,
        metadata={"help": "Highlight listing blocks", "cli_name": "no-highlight", "importance": "core"},
    )
    highlight_theme: Optional[str] = field(
        default=None,
        metadata={"help": "Pygments style for code highlighting", "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language (lang attribute)", "importance": "advanced"},
    )
    document_title: str = field(
        default=DEFAULT_DOCUMENT_TITLE,
        metadata={"help": "Fallback <title> for standalone output", "importance": "advanced"},
    )
    outfilesuffix: str = field(
        default=DEFAULT_OUTFILESUFFIX,
        metadata={"help": "Extension of written output files", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the title tag and output suffix.

        Raises
        ------
        ValueError
            If ``title_tag`` is not an element name or ``outfilesuffix``
            does not start with a dot.

        """
        super().__post_init__()

        if not _TAG_NAME.match(self.title_tag):
            raise ValueError(f"title_tag must be an element name, got {self.title_tag!r}")

        if not self.outfilesuffix.startswith("."):
            raise ValueError(f"outfilesuffix must start with '.', got {self.outfilesuffix!r}")
