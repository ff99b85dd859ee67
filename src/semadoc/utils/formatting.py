#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/utils/formatting.py
"""HTML pretty-printing backed by BeautifulSoup.

``format_html`` re-indents a rendered fragment or document; the content of
``<pre>`` elements is left untouched. Text is written back with ``&amp;``,
``&lt;`` and ``&gt;`` escaped. ``format_html_async`` runs the same
work in a worker thread for use from coroutines.
"""

from __future__ import annotations

import asyncio
import logging

from semadoc.constants import DEFAULT_FORMAT_INDENT, DEPS_FORMAT
from semadoc.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


@requires_dependencies("format", DEPS_FORMAT)
def format_html(html: str, indent: int = DEFAULT_FORMAT_INDENT) -> str:
    """Pretty-print HTML.

    Parameters
    ----------
    html : str
        HTML fragment or complete document
    indent : int, default = 2
        Spaces per nesting level

    Returns
    -------
    str
        Re-indented HTML ending with a newline

    """
    from bs4 import BeautifulSoup
    from bs4.dammit import EntitySubstitution
    from bs4.formatter import HTMLFormatter

    if not html.strip():
        return ""

    soup = BeautifulSoup(html, "html.parser")
    formatter = HTMLFormatter(entity_substitution=EntitySubstitution.substitute_xml, indent=indent)
    return soup.prettify(formatter=formatter)


async def format_html_async(html: str, indent: int = DEFAULT_FORMAT_INDENT) -> str:
    """Pretty-print HTML without blocking the event loop."""
    return await asyncio.to_thread(format_html, html, indent)


__all__ = ["format_html", "format_html_async"]
