#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/constants.py
"""Constants and policy values shared across semadoc.

This module centralizes the rendering policy constants (attribute exclusions,
list numbering tables, wrap thresholds), default option values, and the
dependency declarations used by the ``requires_dependencies`` decorator.

"""

from __future__ import annotations

from typing import Literal, Optional

# =============================================================================
# Dependency declarations: (install_name, import_name, version_spec)
# =============================================================================

DEPS_HIGHLIGHT = [("Pygments", "pygments", ">=2.17")]
DEPS_FORMAT = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_NETWORK = [("httpx", "httpx", ">=0.28.1")]

# =============================================================================
# Attribute handling
# =============================================================================

OPTION_SUFFIX = "-option"
POSITIONAL_MARKER = "$positional"

# Keys consumed by dedicated logic and never emitted as generic attributes
DEFAULT_EXCLUDED_ATTRIBUTES = frozenset({"id", "role", "style", "title", POSITIONAL_MARKER})

# =============================================================================
# Block rendering policy
# =============================================================================

DEFAULT_TITLE_TAG = "summary"
DEFAULT_SUMMARY_TEXT = "Details"
COLLAPSIBLE_OPTION = "collapsible"
OPEN_OPTION = "open"

LIST_ITEM_WRAP_THRESHOLD = 80
MARKUP_CHARACTER = "<"

DEFAULT_LISTING_LANGUAGE = "plaintext"
SOURCE_STYLE = "source"
HIGHLIGHT_CLASS = "highlight"
MENU_STYLE = "menu"

# Numbering style to the HTML type attribute; None means the attribute is omitted
ORDERED_LIST_TYPE_MAP: dict[str, Optional[str]] = {
    "arabic": None,
    "loweralpha": "a",
    "upperalpha": "A",
    "lowerroman": "i",
    "upperroman": "I",
}
DEFAULT_ORDERED_LIST_STYLE = "arabic"
FALLBACK_ORDERED_LIST_TYPE = "1"

# Numbering style applied by nesting depth when the source gives none
ORDERED_LIST_DEPTH_STYLES = ("arabic", "loweralpha", "lowerroman", "upperalpha", "upperroman")

# =============================================================================
# Syntax highlighting
# =============================================================================

HIGHLIGHT_THEMES = {
    "light": "default",
    "dark": "monokai",
}
DEFAULT_HIGHLIGHT_THEME = HIGHLIGHT_THEMES["dark"]
PLAINTEXT_LANGUAGE = "plaintext"
HIGHLIGHT_THEME_ATTRIBUTE = "highlight-theme"

# =============================================================================
# Templated source builder
# =============================================================================

BLOCK_FENCE_PATTERN = r"^\s*[-=]{4,}"

# =============================================================================
# Parser defaults
# =============================================================================

AttributeMissingPolicy = Literal["keep", "blank", "warn"]

DEFAULT_PARSE_ATTRIBUTES = True
DEFAULT_RESOLVE_ATTRIBUTE_REFS = True
DEFAULT_ATTRIBUTE_MISSING_POLICY: AttributeMissingPolicy = "keep"
DEFAULT_STRIP_COMMENTS = True
DEFAULT_HONOR_HARD_BREAKS = True
DEFAULT_ENABLE_LOREM = True

ADMONITION_TYPES = ("NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION")

DEFAULT_CAPTIONS = {
    "example-caption": "Example",
    "table-caption": "Table",
    "figure-caption": "Figure",
}

SECTION_ID_PREFIX = "_"
SECTION_ID_SEPARATOR = "_"

# =============================================================================
# Renderer / orchestration defaults
# =============================================================================

DEFAULT_STANDALONE = False
DEFAULT_SYNTAX_HIGHLIGHTING = True
DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_DOCUMENT_TITLE = "Untitled"
DEFAULT_OUTFILESUFFIX = ".html"
DEFAULT_OUTPUT_BASENAME = "output"
DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "semadoc-fetcher/1.0"

# Pretty-printer indentation (spaces per nesting level)
DEFAULT_FORMAT_INDENT = 2

# =============================================================================
# Lorem ipsum block macro
# =============================================================================

DEFAULT_LOREM_LENGTH = "1-3"
DEFAULT_LOREM_WORDS_PER_SENTENCE = "4-16"
LOREM_COMMA_FREQUENCY = 10

# =============================================================================
# CLI
# =============================================================================

ENV_PREFIX = "SEMADOC_"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_DEPENDENCY_ERROR = 3
