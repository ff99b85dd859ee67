"""semadoc - AsciiDoc to semantic HTML.

semadoc parses AsciiDoc into an immutable document tree and renders it to
lean, semantic HTML: paragraphs are bare ``<p>`` elements, source listings
are ``<pre><code class="language-...">`` with Pygments highlighting, block
titles become ``<summary>`` (or another configurable element), and blocks
with the ``collapsible`` option turn into ``<details>`` disclosures. Node
types without a semantic renderer fall back to conventional AsciiDoc-style
HTML5.

Examples
--------
Convert a string:

    >>> from semadoc import convert
    >>> convert("* Item A\\n* Item B")
    '<ul><li>Item A</li><li>Item B</li></ul>'

Build source from a template with a raw snippet spliced in:

    >>> from semadoc import adoc, raw
    >>> snippet = raw("----\\nprint('hi')\\n----")
    >>> html = adoc(["Intro", "Outro"], snippet)

Convert a file, writing ``guide.html`` next to it:

    >>> from semadoc import convert_file
    >>> document = convert_file("guide.adoc")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "semadoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from semadoc.api import convert, convert_file, convert_formatted, load_file
from semadoc.ast import Document, DocumentNode, ListItem, ListNode, NodeType
from semadoc.exceptions import (
    DependencyError,
    FetchError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    SemadocError,
)
from semadoc.highlight import Highlighter, get_highlighter, initialize_highlighter
from semadoc.options import AsciiDocParserOptions, ConvertOptions, HtmlConverterOptions
from semadoc.parsers import AsciiDocParser
from semadoc.renderers import GenericHtmlRenderer, SemanticConverter
from semadoc.template import AdocTemplate, adoc, build_source, plain, raw
from semadoc.utils.formatting import format_html, format_html_async
from semadoc.utils.text import dedent

__all__ = [
    "__version__",
    # API
    "convert",
    "convert_file",
    "convert_formatted",
    "load_file",
    # Templates
    "AdocTemplate",
    "adoc",
    "build_source",
    "plain",
    "raw",
    "dedent",
    # Pipeline
    "AsciiDocParser",
    "GenericHtmlRenderer",
    "SemanticConverter",
    "Highlighter",
    "get_highlighter",
    "initialize_highlighter",
    "format_html",
    "format_html_async",
    # Tree
    "Document",
    "DocumentNode",
    "ListItem",
    "ListNode",
    "NodeType",
    # Options
    "AsciiDocParserOptions",
    "ConvertOptions",
    "HtmlConverterOptions",
    # Exceptions
    "DependencyError",
    "FetchError",
    "InvalidOptionsError",
    "OutputWriteError",
    "ParsingError",
    "SemadocError",
]
