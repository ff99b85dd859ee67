#!/usr/bin/env python3
#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Render sample documents with both HTML renderers and compare them side by side.

Each sample is parsed once and converted by ``GenericHtmlRenderer`` (the
conventional AsciiDoc HTML5 output) and by ``SemanticConverter``. The results
are written to an HTML table with one row per sample, showing the source,
both outputs as rendered HTML and both outputs as markup.

Usage:
    python scripts/compare_conversions.py                      # Built-in samples
    python scripts/compare_conversions.py docs/*.adoc          # Also compare these files
    python scripts/compare_conversions.py -o /tmp/table.html   # Choose the output file
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NamedTuple, Optional, Sequence

from semadoc.options import HtmlConverterOptions
from semadoc.parsers import AsciiDocParser
from semadoc.renderers import GenericHtmlRenderer, SemanticConverter
from semadoc.renderers.fallback import TRANSFORM_EMBEDDED
from semadoc.utils.html_utils import escape_html

DEFAULT_OUTPUT = "comparison-table.html"


class Sample(NamedTuple):
    """A named AsciiDoc snippet."""

    name: str
    source: str


SAMPLES = (
    Sample("paragraph", "A simple paragraph."),
    Sample("ulist", "* Item 1\n* Item 2\n* Item 3"),
    Sample("olist", "[loweralpha]\n. First\n. Second"),
    Sample("menu", "[menu]\n* Home\n* Docs"),
    Sample("listing", "[source,python]\n----\nprint('hi')\n----"),
    Sample("example", ".Details\n[%collapsible]\n====\nHidden text.\n===="),
    Sample("quote", '[quote, "Ada Lovelace"]\n____\nThe engine weaves patterns.\n____'),
)


def convert_both(source: str, options: Optional[HtmlConverterOptions] = None) -> tuple[str, str]:
    """Return (generic HTML, semantic HTML) for ``source``."""
    options = options or HtmlConverterOptions(syntax_highlighting=False)
    document = AsciiDocParser().parse(source)
    generic = GenericHtmlRenderer(options).convert(document, TRANSFORM_EMBEDDED)
    semantic = SemanticConverter(options).convert_document(document)
    return generic, semantic


def build_row(sample: Sample, generic: str, semantic: str) -> str:
    """Return one ``<tr>`` of the comparison table."""
    cells = [
        escape_html(sample.name),
        f"<pre>{escape_html(sample.source)}</pre>",
        generic,
        semantic,
        f"<pre>{escape_html(generic)}</pre>",
        f"<pre>{escape_html(semantic)}</pre>",
    ]
    return "<tr>\n" + "\n".join(f"<td>{cell}</td>" for cell in cells) + "\n</tr>"


def build_table(samples: Sequence[Sample]) -> str:
    """Convert every sample and return the complete comparison page."""
    rows = [build_row(sample, *convert_both(sample.source)) for sample in samples]
    head = "".join(
        f"<th>{label}</th>"
        for label in ("Node", "AsciiDoc", "Generic", "Semantic", "Generic markup", "Semantic markup")
    )
    return (
        '<!DOCTYPE html>\n<html>\n<head>\n<meta charset="UTF-8">\n<title>semadoc comparison</title>\n'
        "<style>td { vertical-align: top; border: 1px solid #ccc; padding: 4px; }</style>\n"
        f"</head>\n<body>\n<table>\n<thead>\n<tr>{head}</tr>\n</thead>\n<tbody>\n"
        + "\n".join(rows)
        + "\n</tbody>\n</table>\n</body>\n</html>\n"
    )


def load_samples(paths: Sequence[str]) -> list[Sample]:
    """Return the built-in samples followed by one sample per file in ``paths``."""
    samples = list(SAMPLES)
    for path in paths:
        file_path = Path(path)
        samples.append(Sample(file_path.stem, file_path.read_text(encoding="utf-8")))
    return samples


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the comparison table."""
    parser = argparse.ArgumentParser(description="Compare generic and semantic HTML output")
    parser.add_argument("files", nargs="*", help="Additional AsciiDoc files to compare")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help=f"Output file (default: {DEFAULT_OUTPUT})")
    args = parser.parse_args(argv)

    try:
        samples = load_samples(args.files)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    Path(args.output).write_text(build_table(samples), encoding="utf-8")
    print(f"Comparison table generated: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
