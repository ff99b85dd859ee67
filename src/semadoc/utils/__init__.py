#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the semadoc parser, renderers and API."""

from semadoc.utils.html_utils import escape_html, unescape_html
from semadoc.utils.text import dedent, slugify

__all__ = ["dedent", "escape_html", "slugify", "unescape_html"]
