#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/parsers/asciidoc.py
"""AsciiDoc to document tree parser.

This module turns AsciiDoc source into the immutable ``Document`` tree that
the semantic converter renders. It uses a two-stage process: a line lexer
produces one token per source line, then a recursive parser groups the tokens
into blocks. Inline text is substituted to HTML as blocks are built, so every
``content`` string in the tree is already HTML-safe.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional, Sequence

from semadoc.ast import Document, DocumentNode, DocumentSettings, ListItem, ListNode, NodeType, TableNode
from semadoc.constants import (
    ADMONITION_TYPES,
    DEFAULT_CAPTIONS,
    DEFAULT_LOREM_LENGTH,
    DEFAULT_LOREM_WORDS_PER_SENTENCE,
    OPTION_SUFFIX,
    ORDERED_LIST_DEPTH_STYLES,
    ORDERED_LIST_TYPE_MAP,
    POSITIONAL_MARKER,
    SECTION_ID_PREFIX,
    SECTION_ID_SEPARATOR,
    SOURCE_STYLE,
)
from semadoc.exceptions import ParsingError
from semadoc.extensions.lorem import LoremGenerator
from semadoc.options.asciidoc import AsciiDocParserOptions
from semadoc.parsers.base import BaseParser
from semadoc.parsers.inline import InlineParser, default_image_alt
from semadoc.utils.html_utils import escape_html, unescape_html
from semadoc.utils.text import dedent, slugify, strip_tags

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for the AsciiDoc lexer."""

    # Structure
    HEADING = auto()
    BLOCK_TITLE = auto()
    THEMATIC_BREAK = auto()
    PAGE_BREAK = auto()
    BLOCK_MACRO = auto()

    # Block delimiters
    LISTING_DELIMITER = auto()
    FENCE_DELIMITER = auto()
    LITERAL_DELIMITER = auto()
    PASS_DELIMITER = auto()
    QUOTE_DELIMITER = auto()
    EXAMPLE_DELIMITER = auto()
    SIDEBAR_DELIMITER = auto()
    OPEN_DELIMITER = auto()
    TABLE_DELIMITER = auto()
    COMMENT_DELIMITER = auto()

    # List markers
    UNORDERED_LIST = auto()
    ORDERED_LIST = auto()
    DESCRIPTION_TERM = auto()
    LIST_CONTINUATION = auto()

    # Attributes and metadata
    ATTRIBUTE = auto()
    BLOCK_ATTRIBUTE = auto()
    ANCHOR = auto()

    # Special
    COMMENT = auto()
    BLANK_LINE = auto()
    TEXT_LINE = auto()
    EOF = auto()


# Delimiters whose content is taken verbatim
VERBATIM_DELIMITERS = frozenset(
    {
        TokenType.LISTING_DELIMITER,
        TokenType.FENCE_DELIMITER,
        TokenType.LITERAL_DELIMITER,
        TokenType.PASS_DELIMITER,
        TokenType.COMMENT_DELIMITER,
    }
)

# Delimiters whose content is parsed as nested blocks
COMPOUND_DELIMITERS = {
    TokenType.QUOTE_DELIMITER: NodeType.QUOTE,
    TokenType.EXAMPLE_DELIMITER: NodeType.EXAMPLE,
    TokenType.SIDEBAR_DELIMITER: NodeType.SIDEBAR,
    TokenType.OPEN_DELIMITER: NodeType.OPEN,
}

# Styles that change what an open block (or a styled paragraph) becomes
_STYLE_NODE_TYPES = {
    "quote": NodeType.QUOTE,
    "verse": NodeType.QUOTE,
    "example": NodeType.EXAMPLE,
    "sidebar": NodeType.SIDEBAR,
}

_LIST_TOKENS = (TokenType.UNORDERED_LIST, TokenType.ORDERED_LIST, TokenType.DESCRIPTION_TERM)

_ADMONITION_PARAGRAPH = re.compile(rf"^({'|'.join(ADMONITION_TYPES)}):\s+(.*)$", re.DOTALL)
_CHECKLIST_ITEM = re.compile(r"^\[([ xX*])\]\s+(.*)$", re.DOTALL)
_NAMED_ATTRIBUTE = re.compile(r"^([\w-]+)\s*=\s*(.*)$", re.DOTALL)
_SHORTHAND_PART = re.compile(r"([#.%])([^#.%]*)")
# Optional cell specifier (span, alignment, style) followed by the cell separator
_CELL_START = re.compile(r"^(?:\d+(?:\.\d+)?[+*])?(?:[<^>])?(?:\.[<^>])?[a-z]?\|")


@dataclass
class Token:
    """Represents a token from the lexer.

    Parameters
    ----------
    type : TokenType
        Type of the token
    content : str
        Token content/value
    line_num : int
        Line number in source (0-based)
    indent : int
        Indentation width of the source line
    raw : str
        Source line as written
    metadata : dict
        Additional token metadata

    """

    type: TokenType
    content: str
    line_num: int
    indent: int = 0
    raw: str = ""
    metadata: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        """Initialize metadata if not provided."""
        if self.metadata is None:
            self.metadata = {}


class AsciiDocLexer:
    """Tokenizer for AsciiDoc content.

    This lexer performs line-by-line tokenization of AsciiDoc content,
    identifying block delimiters, list markers, attributes, and text.

    Parameters
    ----------
    content : str
        AsciiDoc content to tokenize

    """

    def __init__(self, content: str):
        """Initialize the lexer with content."""
        self.lines = content.split("\n")
        self.current_line = 0
        self.tokens: list[Token] = []

        # Patterns for matching
        self.heading_pattern = re.compile(r"^(={1,6})\s+(.+?)(?:\s+\1)?$")
        self.block_title_pattern = re.compile(r"^\.([^\s.].*)$")
        self.ul_pattern = re.compile(r"^(\*{1,5}|-)\s+(.*)$")
        self.ol_pattern = re.compile(r"^(\.{1,5})\s+(.*)$")
        self.ol_explicit_pattern = re.compile(r"^(\d+|[a-z]|[A-Z])\.\s+(.*)$")
        self.desc_pattern = re.compile(r"^(.*?[^:;\s].*?)(:{2,4}|;;)(?:\s+(.*))?$")
        self.attribute_pattern = re.compile(r"^:(!?)([\w][\w-]*)(!?):(?:\s+(.*))?$")
        self.block_attr_pattern = re.compile(r"^\[([^\[\]].*)?\]$")
        self.anchor_pattern = re.compile(r"^\[\[([^\]]+)\]\]$")
        self.block_macro_pattern = re.compile(r"^([a-zA-Z][\w-]*)::(\S*?)\[(.*)\]$")

    def tokenize(self) -> list[Token]:
        """Tokenize the content into a list of tokens.

        Returns
        -------
        list[Token]
            List of tokens

        """
        while self.current_line < len(self.lines):
            line = self.lines[self.current_line]
            token = self._tokenize_line(line, self.current_line)
            self.tokens.append(token)
            self.current_line += 1

        # Add EOF token
        self.tokens.append(Token(type=TokenType.EOF, content="", line_num=self.current_line, indent=0))

        return self.tokens

    def _tokenize_line(self, line: str, line_num: int) -> Token:
        """Tokenize a single line.

        Parameters
        ----------
        line : str
            Line content
        line_num : int
            Line number

        Returns
        -------
        Token
            Token for this line

        """
        indent = len(line) - len(line.lstrip())
        stripped = line.strip()

        def token(token_type: TokenType, content: str = stripped, **metadata: Any) -> Token:
            return Token(token_type, content, line_num, indent, line, metadata)

        # Blank line
        if not stripped:
            return token(TokenType.BLANK_LINE, "")

        # Indented lines are literal text unless they carry a list marker
        if indent > 0:
            return self._tokenize_list_line(stripped, token) or token(TokenType.TEXT_LINE)

        if stripped == "+":
            return token(TokenType.LIST_CONTINUATION)

        if stripped == "--":
            return token(TokenType.OPEN_DELIMITER)

        if stripped.startswith("```"):
            language = stripped[3:].strip()
            return token(TokenType.FENCE_DELIMITER, "```", language=language or None)

        if stripped.startswith("|===") and all(c == "=" for c in stripped[1:]):
            return token(TokenType.TABLE_DELIMITER)

        # Block delimiters (at least 4 characters, all the same)
        if len(stripped) >= 4 and all(c == stripped[0] for c in stripped):
            delimiter_map = {
                "-": TokenType.LISTING_DELIMITER,
                ".": TokenType.LITERAL_DELIMITER,
                "+": TokenType.PASS_DELIMITER,
                "_": TokenType.QUOTE_DELIMITER,
                "=": TokenType.EXAMPLE_DELIMITER,
                "*": TokenType.SIDEBAR_DELIMITER,
                "/": TokenType.COMMENT_DELIMITER,
            }
            if stripped[0] in delimiter_map:
                return token(delimiter_map[stripped[0]])

        # Comment
        if stripped.startswith("//"):
            return token(TokenType.COMMENT, stripped[2:].strip())

        # Thematic break (''' or the Markdown-style ---, ***, ___)
        if stripped in ("'''", "---", "***", "___", "- - -", "* * *"):
            return token(TokenType.THEMATIC_BREAK)

        if stripped == "<<<":
            return token(TokenType.PAGE_BREAK)

        # Heading (= is the document title, level 0)
        heading_match = self.heading_pattern.match(stripped)
        if heading_match:
            return token(TokenType.HEADING, heading_match.group(2), level=len(heading_match.group(1)) - 1)

        # Anchor
        anchor_match = self.anchor_pattern.match(stripped)
        if anchor_match:
            return token(TokenType.ANCHOR, anchor_match.group(1))

        # Block attribute list
        block_attr_match = self.block_attr_pattern.match(stripped)
        if block_attr_match:
            return token(TokenType.BLOCK_ATTRIBUTE, block_attr_match.group(1) or "")

        # Document attribute (with continuation support)
        attr_match = self.attribute_pattern.match(stripped)
        if attr_match:
            return self._tokenize_attribute(attr_match, token)

        # Block title
        title_match = self.block_title_pattern.match(stripped)
        if title_match:
            return token(TokenType.BLOCK_TITLE, title_match.group(1))

        # Block macro (image::, lorem::, toc::, ...)
        macro_match = self.block_macro_pattern.match(stripped)
        if macro_match:
            return token(
                TokenType.BLOCK_MACRO,
                macro_match.group(1),
                target=macro_match.group(2),
                attrlist=macro_match.group(3),
            )

        return self._tokenize_list_line(stripped, token) or token(TokenType.TEXT_LINE)

    def _tokenize_attribute(self, attr_match: re.Match[str], token: Any) -> Token:
        """Build an attribute entry token, joining `` +`` continuation lines."""
        attr_name = attr_match.group(2)
        is_unset = bool(attr_match.group(1) or attr_match.group(3))
        attr_value = None if is_unset else (attr_match.group(4) or "")

        if attr_value and attr_value.endswith(" +"):
            value_parts = [attr_value[:-2]]
            continuation_line_num = self.current_line + 1
            while continuation_line_num < len(self.lines):
                cont_stripped = self.lines[continuation_line_num].strip()
                if not cont_stripped:
                    break
                continuation_line_num += 1
                if cont_stripped.endswith(" +"):
                    value_parts.append(cont_stripped[:-2])
                else:
                    value_parts.append(cont_stripped)
                    break
            attr_value = " ".join(value_parts)
            self.current_line = continuation_line_num - 1

        return token(TokenType.ATTRIBUTE, attr_name, value=attr_value, unset=is_unset)

    def _tokenize_list_line(self, stripped: str, token: Any) -> Optional[Token]:
        """Return a list marker token for ``stripped``, or None."""
        ul_match = self.ul_pattern.match(stripped)
        if ul_match:
            marker = ul_match.group(1)
            level = 1 if marker == "-" else len(marker)
            return token(TokenType.UNORDERED_LIST, ul_match.group(2), level=level, marker=marker)

        ol_match = self.ol_pattern.match(stripped)
        if ol_match:
            marker = ol_match.group(1)
            return token(TokenType.ORDERED_LIST, ol_match.group(2), level=len(marker), marker=marker)

        explicit_match = self.ol_explicit_pattern.match(stripped)
        if explicit_match:
            number = explicit_match.group(1)
            if number.isdigit():
                style, start = "arabic", number
            elif number.islower():
                style, start = "loweralpha", str(ord(number) - ord("a") + 1)
            else:
                style, start = "upperalpha", str(ord(number) - ord("A") + 1)
            return token(
                TokenType.ORDERED_LIST,
                explicit_match.group(2),
                level=ORDERED_LIST_DEPTH_STYLES.index(style) + 1,
                marker=f"<{style}>",
                style=style,
                start=start,
            )

        desc_match = self.desc_pattern.match(stripped)
        if desc_match:
            marker = desc_match.group(2)
            return token(
                TokenType.DESCRIPTION_TERM,
                desc_match.group(1).strip(),
                description=desc_match.group(3) or "",
                marker=marker,
            )

        return None


@dataclass
class BlockMetadata:
    """Attributes, title and anchor collected for the next block."""

    id: Optional[str] = None
    style: Optional[str] = None
    roles: list[str] = field(default_factory=list)
    options: list[str] = field(default_factory=list)
    positional: list[str] = field(default_factory=list)
    named: dict[str, str] = field(default_factory=dict)
    title: Optional[str] = None
    caption: Optional[str] = None

    def has_option(self, name: str) -> bool:
        """Return whether ``name`` was set with ``%name`` or ``options=``."""
        return name in self.options

    def positional_at(self, index: int) -> Optional[str]:
        """Return the 1-based positional attribute, or None."""
        if 0 < index <= len(self.positional):
            return self.positional[index - 1] or None
        return None


class AsciiDocParser(BaseParser):
    r"""Convert AsciiDoc to a document tree.

    Supported Features
    ------------------
    - Document header (title, author and revision lines) and attribute
      entries (``:name: value``, ``:name!:``, multi-line values with `` +``)
    - Sections (``==`` through ``======``) with generated ids, optional
      numbering (``sectnums``) and discrete headings (``[discrete]``)
    - Paragraphs, literal paragraphs (indented lines), admonition paragraphs
      (``NOTE: ...``) and styled paragraphs (``[source]``, ``[quote]``, ...)
    - Lists: unordered (``*``, ``-``), ordered (``.``, ``1.``, ``a.``),
      checklists, description lists (``term::``), nesting, list continuation
      (``+``) and attached literal paragraphs
    - Delimited blocks: listing (``----`` and fenced code), literal
      (``....``), passthrough (``++++``), quote/verse (``____``), example
      (``====``), sidebar (``****``), open (``--``), comment (``////``)
    - Tables (``|===``) with implicit or explicit header rows
    - Block macros: ``image::``, ``lorem::`` and ``toc::`` (ignored)
    - Block metadata: ``.Title``, ``[[anchor]]`` and attribute lists with
      the ``style#id.role%option`` shorthand and named attributes
    - Captions for titled examples, tables, figures and (opt-in) listings

    Parameters
    ----------
    options : AsciiDocParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = AsciiDocParser()
        >>> doc = parser.parse("= Title\n\nThis is *bold*.")
        >>> doc.blocks[0].content
        'This is <strong>bold</strong>.'

    """

    def __init__(self, options: AsciiDocParserOptions | None = None):
        """Initialize the AsciiDoc parser."""
        BaseParser._validate_options_type(options, AsciiDocParserOptions, "asciidoc")
        options = options or AsciiDocParserOptions()
        super().__init__(options)
        self.options: AsciiDocParserOptions = options
        self._reset()

    def _reset(self) -> None:
        """Reset parser state so nothing leaks across parse calls."""
        self.tokens: list[Token] = []
        self.current_token_index = 0
        self.attributes: dict[str, str] = {}
        self._locked_attributes: set[str] = set()
        self.pending_block_attrs = BlockMetadata()
        self.settings = DocumentSettings()
        self.inline = InlineParser({}, self.options)
        self._lorem = LoremGenerator(self.options.lorem_seed)
        self._ids: set[str] = set()
        self._caption_counters: dict[str, int] = {}
        self._section_numbers = [0] * 6
        self._block_depth = 0
        self._doctitle_source: Optional[str] = None

    def parse(self, source: str) -> Document:
        """Parse AsciiDoc source into a document tree.

        Parameters
        ----------
        source : str
            AsciiDoc text

        Returns
        -------
        Document
            Root of the parsed tree

        Raises
        ------
        ParsingError
            If ``source`` is not text

        """
        if not isinstance(source, str):
            raise ParsingError(f"AsciiDoc source must be str, got {type(source).__name__}")

        self._reset()
        self.tokens = AsciiDocLexer(self._normalize_newlines(source)).tokenize()

        self._init_attributes()
        if self.options.parse_attributes:
            self._collect_attributes()
        body_start = self._parse_header()

        self.settings = DocumentSettings(self.attributes)
        self.inline = InlineParser(self.settings.attributes, self.options)

        self.current_token_index = body_start
        blocks = self._parse_document()

        title_html = self.inline.convert(self._doctitle_source) if self._doctitle_source else ""
        logger.debug("Parsed %d top-level blocks", len(blocks))
        return Document(
            title=self.settings.title,
            content=title_html,
            blocks=tuple(blocks),
            document=self.settings,
            footnotes=tuple(self.inline.footnotes),
        )

    # ------------------------------------------------------------------
    # Token navigation
    # ------------------------------------------------------------------

    def _current_token(self) -> Token:
        """Get the current token."""
        if self.current_token_index < len(self.tokens):
            return self.tokens[self.current_token_index]
        return self.tokens[-1]  # EOF

    def _peek_token(self, offset: int = 1) -> Token:
        """Peek at a token ahead."""
        index = self.current_token_index + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return self.tokens[-1]  # EOF

    def _advance(self) -> Token:
        """Advance to the next token and return the previous one."""
        token = self._current_token()
        if token.type != TokenType.EOF:
            self.current_token_index += 1
        return token

    def _skip_blank_lines(self) -> None:
        """Skip over blank lines, and over comments when they are stripped."""
        while True:
            token_type = self._current_token().type
            if token_type == TokenType.BLANK_LINE:
                self._advance()
            elif token_type == TokenType.COMMENT and self.options.strip_comments:
                self._advance()
            else:
                break

    # ------------------------------------------------------------------
    # Document attributes and header
    # ------------------------------------------------------------------

    def _init_attributes(self) -> None:
        """Seed built-in defaults, then apply preset attributes from the options.

        A preset whose name or value ends with ``@`` is soft and may be
        redefined by the document; any other preset is locked.
        """
        self.attributes.update(DEFAULT_CAPTIONS)
        self.attributes.update({f"{name.lower()}-caption": name.title() for name in ADMONITION_TYPES})
        self.attributes.update({"idprefix": SECTION_ID_PREFIX, "idseparator": SECTION_ID_SEPARATOR, "sectids": ""})

        for raw_name, raw_value in self.options.attributes.items():
            name = raw_name.rstrip("@!")
            soft = raw_name.endswith("@") or (isinstance(raw_value, str) and raw_value.endswith("@"))
            unset = raw_value is None or raw_name.endswith("!")

            if unset:
                self.attributes.pop(name, None)
            else:
                value = str(raw_value)
                self.attributes[name] = value[:-1] if value.endswith("@") else value

            if not soft:
                self._locked_attributes.add(name)

    def _set_attribute(self, name: str, value: Optional[str]) -> None:
        """Set (or, for None, unset) a document attribute unless it is locked."""
        if name in self._locked_attributes:
            logger.debug("Attribute %s is locked by the caller; ignoring document entry", name)
            return
        if value is None:
            self.attributes.pop(name, None)
        else:
            self.attributes[name] = value

    def _collect_attributes(self) -> None:
        """Collect document attribute entries on a first pass.

        Entries inside verbatim blocks (listings, literals, passthroughs,
        comment blocks) are content, not attribute entries.
        """
        open_delimiter: Optional[Token] = None

        for token in self.tokens:
            if open_delimiter is not None:
                if token.type == open_delimiter.type and token.content == open_delimiter.content:
                    open_delimiter = None
                continue

            if token.type in VERBATIM_DELIMITERS:
                open_delimiter = token
            elif token.type == TokenType.ATTRIBUTE:
                assert token.metadata is not None
                self._set_attribute(token.content, None if token.metadata.get("unset") else token.metadata["value"])

    def _parse_header(self) -> int:
        """Read the document title, author and revision lines.

        Returns
        -------
        int
            Index of the first body token

        """
        index = 0
        while index < len(self.tokens) and self.tokens[index].type in (
            TokenType.BLANK_LINE,
            TokenType.COMMENT,
            TokenType.ATTRIBUTE,
        ):
            index += 1

        token = self.tokens[index]
        if token.type != TokenType.HEADING or (token.metadata or {}).get("level") != 0:
            return 0

        self._doctitle_source = token.content
        if "doctitle" not in self.attributes:
            title_html = InlineParser(self.attributes, self.options).convert(token.content)
            self._set_attribute("doctitle", unescape_html(strip_tags(title_html)))
        index += 1

        header_lines = []
        while self.tokens[index].type == TokenType.TEXT_LINE and len(header_lines) < 2:
            header_lines.append(self.tokens[index].content)
            index += 1

        if header_lines:
            self._parse_author_line(header_lines[0])
        if len(header_lines) > 1:
            self._parse_revision_line(header_lines[1])

        return index

    def _parse_author_line(self, line: str) -> None:
        """Store ``author`` and ``email`` from the first author of the line."""
        first_author = line.split(";")[0].strip()
        email_match = re.search(r"<([^>]+)>", first_author)
        if email_match:
            self._set_attribute("email", email_match.group(1))
            first_author = first_author[: email_match.start()].strip()
        self._set_attribute("author", first_author)

    def _parse_revision_line(self, line: str) -> None:
        """Store ``revnumber``, ``revdate`` and ``revremark`` from a revision line."""
        match = re.match(r"^v?([^,:]*?)(?:,\s*([^:]*))?(?::\s*(.*))?$", line)
        if not match:
            return
        for name, value in zip(("revnumber", "revdate", "revremark"), match.groups()):
            if value and value.strip():
                self._set_attribute(name, value.strip())

    # ------------------------------------------------------------------
    # Block metadata
    # ------------------------------------------------------------------

    def _parse_block_attribute(self, attr_content: str) -> None:
        """Parse a block attribute list into the pending block metadata.

        Handles the first positional shorthand (``style#id.role%option``),
        further positional attributes and named attributes, including
        ``id``, ``role``, ``options``/``opts``, ``title`` and ``caption``.

        Parameters
        ----------
        attr_content : str
            Content inside the brackets

        """
        meta = self.pending_block_attrs
        entries = split_attribute_list(self.inline.resolve_attributes(attr_content))
        positional: list[str] = []

        for index, entry in enumerate(entries):
            named_match = _NAMED_ATTRIBUTE.match(entry) if not entry.startswith(("'", '"')) else None
            if named_match:
                key, value = named_match.group(1), _unquote(named_match.group(2))
                if key == "id":
                    meta.id = value
                elif key == "role":
                    meta.roles.extend(value.split())
                elif key in ("options", "opts"):
                    meta.options.extend(opt.strip() for opt in value.split(",") if opt.strip())
                elif key == "title":
                    meta.title = value
                elif key == "caption":
                    meta.caption = value
                else:
                    meta.named[key] = value
                continue

            value = _unquote(entry)
            if index == 0:
                value = self._parse_shorthand(value)
            positional.append(value)

        if positional:
            meta.positional = positional

    def _parse_shorthand(self, value: str) -> str:
        """Apply a ``style#id.role%option`` shorthand and return the style part."""
        meta = self.pending_block_attrs
        style_end = len(value)
        for match in _SHORTHAND_PART.finditer(value):
            style_end = min(style_end, match.start())
            marker, name = match.group(1), match.group(2)
            if not name:
                continue
            if marker == "#":
                meta.id = name
            elif marker == ".":
                meta.roles.append(name)
            else:
                meta.options.append(name)

        style = value[:style_end].strip()
        if style:
            meta.style = style
        return style

    def _consume_pending_attrs(self) -> BlockMetadata:
        """Consume and clear pending block metadata."""
        meta = self.pending_block_attrs
        self.pending_block_attrs = BlockMetadata()
        return meta

    def _node_attributes(
        self,
        meta: BlockMetadata,
        positional_names: Sequence[str] = (),
        extra: Optional[dict[str, str]] = None,
    ) -> dict[str, str]:
        """Build the attribute mapping of a node from its block metadata."""
        attributes: dict[str, str] = {}
        if meta.id:
            attributes["id"] = meta.id
        if meta.roles:
            attributes["role"] = " ".join(meta.roles)
        if meta.title:
            attributes["title"] = meta.title
        if meta.style:
            attributes["style"] = meta.style

        for position, name in enumerate(positional_names, start=2):
            value = meta.positional_at(position)
            if value:
                attributes[name] = value

        attributes.update(meta.named)
        if extra:
            attributes.update(extra)
        for option in meta.options:
            attributes[f"{option}{OPTION_SUFFIX}"] = ""
        if meta.positional:
            attributes[POSITIONAL_MARKER] = ",".join(meta.positional)
        return attributes

    def _make_node(
        self,
        node_type: NodeType,
        meta: BlockMetadata,
        *,
        node_class: type[DocumentNode] = DocumentNode,
        caption: Optional[str] = None,
        positional_names: Sequence[str] = (),
        extra: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a node of ``node_class`` carrying the block metadata."""
        if meta.id:
            self._ids.add(meta.id)
        return node_class(
            node_type=node_type,
            id=meta.id,
            roles=tuple(dict.fromkeys(meta.roles)),
            title=meta.title,
            caption=caption,
            attributes=self._node_attributes(meta, positional_names, extra),
            document=self.settings,
            **kwargs,
        )

    def _caption_for(self, kind: str, meta: BlockMetadata) -> Optional[str]:
        """Return the numbered caption prefix (``"Example 1. "``) of a titled block."""
        if not meta.title:
            return None
        if meta.caption is not None:
            return meta.caption

        label = self.attributes.get(f"{kind}-caption")
        if not label:
            return None

        self._caption_counters[kind] = self._caption_counters.get(kind, 0) + 1
        return f"{label} {self._caption_counters[kind]}. "

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _parse_document(self) -> list[DocumentNode]:
        """Parse the document body into a list of block nodes."""
        nodes: list[DocumentNode] = []

        while self._current_token().type != TokenType.EOF:
            self._skip_blank_lines()
            if self._current_token().type == TokenType.EOF:
                break
            self._append(nodes, self._parse_block())

        return nodes

    @staticmethod
    def _append(nodes: list[DocumentNode], parsed: DocumentNode | list[DocumentNode] | None) -> None:
        if parsed is None:
            return
        if isinstance(parsed, list):
            nodes.extend(parsed)
        else:
            nodes.append(parsed)

    def _parse_block(self) -> DocumentNode | list[DocumentNode] | None:
        """Parse a single block-level element.

        Returns
        -------
        DocumentNode, list of DocumentNode, or None
            Parsed block node(s); None for metadata lines

        """
        token = self._current_token()

        # Skip attributes (already collected)
        if token.type == TokenType.ATTRIBUTE:
            self._advance()
            return None

        if token.type == TokenType.BLOCK_ATTRIBUTE:
            self._parse_block_attribute(token.content)
            self._advance()
            return None

        if token.type == TokenType.ANCHOR:
            self.pending_block_attrs.id = token.content.split(",", 1)[0].strip()
            self._advance()
            return None

        if token.type == TokenType.BLOCK_TITLE:
            self.pending_block_attrs.title = self.inline.resolve_attributes(token.content)
            self._advance()
            return None

        if token.type == TokenType.COMMENT:
            self._advance()
            return self._comment_node([token.content])

        if token.type == TokenType.HEADING:
            style = (self.pending_block_attrs.style or "").lower()
            if self._block_depth > 0 or style in ("discrete", "float"):
                return self._parse_floating_title()
            return self._parse_section()

        if token.type in (TokenType.UNORDERED_LIST, TokenType.ORDERED_LIST):
            return self._parse_list(())

        if token.type == TokenType.DESCRIPTION_TERM:
            return self._parse_description_list(())

        if token.type in (TokenType.LISTING_DELIMITER, TokenType.FENCE_DELIMITER):
            return self._parse_listing_block()

        if token.type == TokenType.LITERAL_DELIMITER:
            return self._parse_literal_block()

        if token.type == TokenType.PASS_DELIMITER:
            return self._parse_pass_block()

        if token.type == TokenType.COMMENT_DELIMITER:
            self._consume_pending_attrs()
            lines = self._collect_verbatim(self._advance())
            return self._comment_node(lines)

        if token.type in COMPOUND_DELIMITERS:
            return self._parse_compound_block()

        if token.type == TokenType.TABLE_DELIMITER:
            return self._parse_table()

        if token.type in (TokenType.THEMATIC_BREAK, TokenType.PAGE_BREAK):
            self._advance()
            node_type = NodeType.THEMATIC_BREAK if token.type == TokenType.THEMATIC_BREAK else NodeType.PAGE_BREAK
            return self._make_node(node_type, self._consume_pending_attrs())

        if token.type == TokenType.BLOCK_MACRO:
            return self._parse_block_macro()

        if token.type == TokenType.TEXT_LINE:
            return self._parse_paragraph()

        # Stray list continuation or unknown token
        self._advance()
        return None

    def _comment_node(self, lines: list[str]) -> Optional[DocumentNode]:
        """Return an HTML comment node, or None when comments are stripped."""
        if self.options.strip_comments:
            return None
        text = "\n".join(lines).replace("--", "- -")
        return DocumentNode(NodeType.PASS, content=f"<!-- {text} -->", document=self.settings)

    def _collect_verbatim(self, opening: Token) -> list[str]:
        """Collect raw lines up to the delimiter matching ``opening``."""
        lines: list[str] = []
        while True:
            token = self._current_token()
            if token.type == TokenType.EOF:
                logger.warning("Unterminated delimited block starting at line %d", opening.line_num + 1)
                break
            if token.type == opening.type and token.content == opening.content:
                self._advance()
                break
            lines.append(token.raw)
            self._advance()

        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        return lines

    def _parse_container_blocks(self, opening: Token) -> list[DocumentNode]:
        """Parse nested blocks up to the delimiter matching ``opening``."""
        children: list[DocumentNode] = []
        self._block_depth += 1
        try:
            while True:
                self._skip_blank_lines()
                token = self._current_token()
                if token.type == TokenType.EOF:
                    logger.warning("Unterminated delimited block starting at line %d", opening.line_num + 1)
                    break
                if token.type == opening.type and token.content == opening.content:
                    self._advance()
                    break
                self._append(children, self._parse_block())
        finally:
            self._block_depth -= 1

        # Metadata with no block to attach to
        self.pending_block_attrs = BlockMetadata()
        return children

    def _parse_section(self) -> DocumentNode:
        """Parse a section heading and every block up to the next heading of the same or higher rank."""
        meta = self._consume_pending_attrs()
        token = self._advance()
        level = (token.metadata or {}).get("level", 1)

        title_html = self.inline.convert(token.content)
        title = unescape_html(strip_tags(title_html))
        meta.id = meta.id or self._generate_section_id(title)
        meta.title = title
        caption = self._section_number(level)

        children: list[DocumentNode] = []
        while True:
            self._skip_blank_lines()
            next_token = self._current_token()
            if next_token.type == TokenType.EOF:
                break
            if next_token.type == TokenType.HEADING:
                next_style = (self.pending_block_attrs.style or "").lower()
                if next_style not in ("discrete", "float") and (next_token.metadata or {}).get("level", 1) <= level:
                    break
            self._append(children, self._parse_block())

        return self._make_node(
            NodeType.SECTION,
            meta,
            caption=caption,
            content=title_html,
            blocks=tuple(children),
            level=level,
        )

    def _generate_section_id(self, title: str) -> Optional[str]:
        """Generate a unique id for a heading when ``sectids`` is set."""
        if "sectids" not in self.attributes:
            return None
        return slugify(
            title,
            seen_slugs=self._ids,
            prefix=self.attributes.get("idprefix", SECTION_ID_PREFIX),
            separator=self.attributes.get("idseparator", SECTION_ID_SEPARATOR) or SECTION_ID_SEPARATOR,
        )

    def _section_number(self, level: int) -> Optional[str]:
        """Return the ``1.2. `` number prefix of a section when ``sectnums`` is set."""
        if "sectnums" not in self.attributes or level < 1:
            return None
        depth = min(level, len(self._section_numbers))
        self._section_numbers[depth - 1] += 1
        for index in range(depth, len(self._section_numbers)):
            self._section_numbers[index] = 0
        return ".".join(str(number) for number in self._section_numbers[:depth]) + ". "

    def _parse_floating_title(self) -> DocumentNode:
        """Parse a discrete heading (not part of the section structure)."""
        meta = self._consume_pending_attrs()
        token = self._advance()
        title_html = self.inline.convert(token.content)
        title = unescape_html(strip_tags(title_html))
        meta.id = meta.id or self._generate_section_id(title)
        meta.title = title
        return self._make_node(
            NodeType.FLOATING_TITLE,
            meta,
            content=title_html,
            level=max((token.metadata or {}).get("level", 1), 1),
        )

    def _parse_paragraph(self) -> DocumentNode | list[DocumentNode]:
        """Parse a paragraph (consecutive text lines) and apply its style.

        Indented paragraphs are literal; ``NOTE:`` style prefixes make an
        admonition; a ``source``, ``listing``, ``literal``, ``pass``,
        ``quote``, ``verse``, ``example`` or ``sidebar`` style turns the
        paragraph into that block.
        """
        meta = self._consume_pending_attrs()
        style = (meta.style or "").lower()
        first = self._current_token()

        tokens: list[Token] = []
        while self._current_token().type == TokenType.TEXT_LINE:
            tokens.append(self._advance())

        if first.indent > 0 and not meta.style:
            return self._make_node(
                NodeType.LITERAL,
                meta,
                content=escape_html(dedent("\n".join(t.raw for t in tokens)), quote=False),
            )

        raw_text = dedent("\n".join(t.raw for t in tokens))
        text = "\n".join(t.content for t in tokens)

        if style in (SOURCE_STYLE, "listing"):
            return self._listing_node(meta, raw_text)

        if style == "literal":
            return self._make_node(NodeType.LITERAL, meta, content=escape_html(raw_text, quote=False))

        if style == "pass":
            return self._make_node(NodeType.PASS, meta, content=raw_text)

        if style.upper() in ADMONITION_TYPES:
            return self._admonition_node(meta, style.upper(), content=self.inline.convert(text))

        admonition_match = _ADMONITION_PARAGRAPH.match(text)
        if admonition_match and not meta.style:
            name, body = admonition_match.group(1), admonition_match.group(2)
            return self._admonition_node(meta, name, content=self.inline.convert(body))

        if style in _STYLE_NODE_TYPES:
            return self._styled_container(meta, style, text)

        hardbreaks = meta.has_option("hardbreaks") or "hardbreaks-option" in self.attributes
        return self._make_node(NodeType.PARAGRAPH, meta, content=self.inline.convert(text, hardbreaks=hardbreaks))

    def _styled_container(self, meta: BlockMetadata, style: str, text: str) -> DocumentNode:
        """Wrap paragraph text in a quote, verse, example or sidebar node."""
        node_type = _STYLE_NODE_TYPES[style]
        if style == "verse":
            child = DocumentNode(
                NodeType.LITERAL,
                roles=("content",),
                content=self.inline.convert(text),
                document=self.settings,
            )
        else:
            child = DocumentNode(NodeType.PARAGRAPH, content=self.inline.convert(text), document=self.settings)

        caption = self._caption_for("example", meta) if node_type == NodeType.EXAMPLE else None
        positional_names = ("attribution", "citetitle") if node_type == NodeType.QUOTE else ()
        return self._make_node(node_type, meta, caption=caption, positional_names=positional_names, blocks=(child,))

    def _admonition_node(
        self,
        meta: BlockMetadata,
        name: str,
        *,
        content: str = "",
        blocks: Sequence[DocumentNode] = (),
    ) -> DocumentNode:
        """Create an admonition node (``name`` is NOTE, TIP, ...)."""
        lowered = name.lower()
        extra = {"name": lowered, "textlabel": self.attributes.get(f"{lowered}-caption", name.title())}
        meta.style = name.upper()
        return self._make_node(NodeType.ADMONITION, meta, extra=extra, content=content, blocks=tuple(blocks))

    def _listing_node(self, meta: BlockMetadata, code: str, language: Optional[str] = None) -> DocumentNode:
        """Create a listing node; ``source`` blocks default to ``source-language``."""
        style = (meta.style or "").lower()
        extra: dict[str, str] = {}

        language = language or meta.positional_at(2)
        if style == SOURCE_STYLE and not language:
            language = self.attributes.get("source-language")
        if language:
            extra["language"] = language
        if meta.positional_at(3) == "linenums":
            meta.options.append("linenums")

        caption = self._caption_for("listing", meta)
        return self._make_node(
            NodeType.LISTING,
            meta,
            caption=caption,
            extra=extra,
            content=escape_html(code, quote=False),
        )

    def _parse_listing_block(self) -> DocumentNode:
        """Parse a ``----`` listing block or a fenced code block."""
        meta = self._consume_pending_attrs()
        opening = self._advance()
        code = "\n".join(self._collect_verbatim(opening))

        if opening.type == TokenType.FENCE_DELIMITER:
            meta.style = meta.style or SOURCE_STYLE
            return self._listing_node(meta, code, language=(opening.metadata or {}).get("language"))

        style = (meta.style or "").lower()
        if style == "literal":
            return self._make_node(NodeType.LITERAL, meta, content=escape_html(code, quote=False))
        return self._listing_node(meta, code)

    def _parse_literal_block(self) -> DocumentNode:
        """Parse a ``....`` literal block."""
        meta = self._consume_pending_attrs()
        code = "\n".join(self._collect_verbatim(self._advance()))

        style = (meta.style or "").lower()
        if style in (SOURCE_STYLE, "listing"):
            return self._listing_node(meta, code)
        return self._make_node(NodeType.LITERAL, meta, content=escape_html(code, quote=False))

    def _parse_pass_block(self) -> DocumentNode:
        """Parse a ``++++`` passthrough block (content is emitted as-is)."""
        meta = self._consume_pending_attrs()
        content = "\n".join(self._collect_verbatim(self._advance()))
        return self._make_node(NodeType.PASS, meta, content=content)

    def _parse_compound_block(self) -> DocumentNode:
        """Parse a quote, example, sidebar or open block.

        An admonition style on an example or open block makes an admonition;
        a verbatim style (``source``, ``listing``, ``literal``, ``pass``) on
        an open block makes that verbatim block.
        """
        meta = self._consume_pending_attrs()
        opening = self._current_token()
        node_type = COMPOUND_DELIMITERS[opening.type]
        style = (meta.style or "").lower()

        if node_type == NodeType.OPEN and style in (SOURCE_STYLE, "listing", "literal", "pass"):
            self._advance()
            code = "\n".join(self._collect_verbatim(opening))
            if style == "literal":
                return self._make_node(NodeType.LITERAL, meta, content=escape_html(code, quote=False))
            if style == "pass":
                return self._make_node(NodeType.PASS, meta, content=code)
            return self._listing_node(meta, code)

        if node_type == NodeType.QUOTE and style == "verse":
            self._advance()
            verse = "\n".join(self._collect_verbatim(opening))
            return self._styled_container(meta, "verse", verse)

        if node_type in (NodeType.OPEN, NodeType.EXAMPLE) and style.upper() in ADMONITION_TYPES:
            self._advance()
            return self._admonition_node(meta, style.upper(), blocks=self._parse_container_blocks(opening))

        if node_type == NodeType.OPEN and style in _STYLE_NODE_TYPES:
            node_type = _STYLE_NODE_TYPES[style]

        caption = self._caption_for("example", meta) if node_type == NodeType.EXAMPLE else None
        positional_names = ("attribution", "citetitle") if node_type == NodeType.QUOTE else ()

        self._advance()
        children = self._parse_container_blocks(opening)
        return self._make_node(
            node_type,
            meta,
            caption=caption,
            positional_names=positional_names,
            blocks=tuple(children),
        )

    def _parse_block_macro(self) -> DocumentNode | list[DocumentNode] | None:
        """Parse ``image::``, ``lorem::`` and ``toc::`` block macros.

        Other macro lines are treated as paragraph text.
        """
        token = self._current_token()
        metadata = token.metadata or {}
        name = token.content

        if name == "image":
            self._advance()
            return self._image_node(metadata["target"], metadata["attrlist"])

        if name == "lorem" and self.options.enable_lorem:
            self._advance()
            return self._lorem_nodes(metadata["attrlist"])

        if name == "toc":
            self._advance()
            self._consume_pending_attrs()
            logger.debug("Ignoring toc::[] macro at line %d", token.line_num + 1)
            return None

        token.type = TokenType.TEXT_LINE
        token.content = token.raw.strip()
        return self._parse_paragraph()

    def _image_node(self, target: str, attrlist: str) -> DocumentNode:
        """Create an image node from ``image::target[alt,width,height,...]``."""
        meta = self._consume_pending_attrs()
        positional: list[str] = []

        # Positional entries are alt, width and height; no style shorthand
        for entry in split_attribute_list(self.inline.resolve_attributes(attrlist)):
            named_match = _NAMED_ATTRIBUTE.match(entry) if not entry.startswith(("'", '"')) else None
            if not named_match:
                positional.append(_unquote(entry))
                continue
            key, value = named_match.group(1), _unquote(named_match.group(2))
            if key == "id":
                meta.id = value
            elif key == "role":
                meta.roles.extend(value.split())
            elif key == "title":
                meta.title = value
            else:
                meta.named[key] = value

        extra = {"target": self.inline.resolve_attributes(target)}
        for name, value in zip(("alt", "width", "height"), positional):
            if value:
                extra[name] = value
        extra.setdefault("alt", meta.named.pop("alt", None) or default_image_alt(target))

        caption = self._caption_for("figure", meta)
        return self._make_node(NodeType.IMAGE, meta, caption=caption, extra=extra)

    def _lorem_nodes(self, attrlist: str) -> list[DocumentNode]:
        """Generate filler paragraphs for ``lorem::[length=..,words_per_sentence=..]``."""
        self._parse_block_attribute(attrlist)
        meta = self._consume_pending_attrs()
        length = meta.named.pop("length", None) or DEFAULT_LOREM_LENGTH
        words_per_sentence = meta.named.pop("words_per_sentence", None) or DEFAULT_LOREM_WORDS_PER_SENTENCE

        paragraphs = self._lorem.paragraphs(length, words_per_sentence)
        attributes = dict(meta.named)
        return [
            DocumentNode(
                NodeType.PARAGRAPH,
                attributes=attributes,
                content=escape_html(text, quote=False),
                document=self.settings,
            )
            for text in paragraphs
        ]

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    @staticmethod
    def _marker(token: Token) -> tuple[TokenType, str]:
        return token.type, str((token.metadata or {}).get("marker", ""))

    def _parse_list(self, ancestors: tuple[tuple[TokenType, str], ...]) -> ListNode:
        """Parse an ordered or unordered list.

        Items continue while tokens carry the same marker. A different marker
        that is not an ancestor starts a nested list inside the current item.

        Parameters
        ----------
        ancestors : tuple
            Markers of the enclosing lists

        """
        meta = self._consume_pending_attrs()
        first = self._current_token()
        first_metadata = first.metadata or {}
        marker = self._marker(first)
        ordered = first.type == TokenType.ORDERED_LIST
        level = first_metadata.get("level", 1)

        items: list[ListItem] = []
        checklist = False

        while True:
            token = self._advance()
            text_lines = [token.content]
            while self._current_token().type == TokenType.TEXT_LINE:
                text_lines.append(self._advance().content)
            text = "\n".join(text_lines)

            if not ordered:
                check_match = _CHECKLIST_ITEM.match(text)
                if check_match:
                    checklist = True
                    mark = "&#10003;" if check_match.group(1) in "xX*" else "&#10063;"
                    text = check_match.group(2)
                    blocks = self._parse_list_item_blocks(ancestors + (marker,))
                    items.append(ListItem(f"{mark} {self.inline.convert(text)}", blocks))
                    if not self._next_sibling(marker):
                        break
                    continue

            blocks = self._parse_list_item_blocks(ancestors + (marker,))
            items.append(ListItem(self.inline.convert(text), blocks))
            if not self._next_sibling(marker):
                break

        extra: dict[str, str] = {}
        if ordered:
            style = meta.style if meta.style in ORDERED_LIST_TYPE_MAP else first_metadata.get("style")
            if not style:
                style = ORDERED_LIST_DEPTH_STYLES[(level - 1) % len(ORDERED_LIST_DEPTH_STYLES)]
            meta.style = style
            start = meta.named.get("start") or first_metadata.get("start")
            if start and start != "1":
                extra["start"] = start
        if checklist:
            meta.roles.append("checklist")
            meta.options.append("checklist")

        return self._make_node(
            NodeType.OLIST if ordered else NodeType.ULIST,
            meta,
            node_class=ListNode,
            extra=extra,
            items=tuple(items),
            level=len(ancestors) + 1,
        )

    def _next_sibling(self, marker: tuple[TokenType, str]) -> bool:
        """Skip blank lines when a sibling item follows; otherwise stay put."""
        saved_index = self.current_token_index
        self._skip_blank_lines()
        if self._current_token().type in _LIST_TOKENS and self._marker(self._current_token()) == marker:
            return True
        self.current_token_index = saved_index
        return False

    def _parse_list_item_blocks(self, stack: tuple[tuple[TokenType, str], ...]) -> tuple[DocumentNode, ...]:
        """Parse the blocks attached to a list item.

        Attached blocks are nested lists, blocks joined with a ``+`` list
        continuation line, and indented literal paragraphs.
        """
        blocks: list[DocumentNode] = []

        while True:
            if self._current_token().type == TokenType.LIST_CONTINUATION:
                self._advance()
                self._append(blocks, self._parse_attached_block())
                continue

            saved_index = self.current_token_index
            self._skip_blank_lines()
            token = self._current_token()

            if token.type in _LIST_TOKENS and self._marker(token) not in stack:
                if token.type == TokenType.DESCRIPTION_TERM:
                    blocks.append(self._parse_description_list(stack))
                else:
                    blocks.append(self._parse_list(stack))
                continue

            if token.type == TokenType.TEXT_LINE and token.indent > 0 and self.current_token_index != saved_index:
                self._append(blocks, self._parse_paragraph())
                continue

            self.current_token_index = saved_index
            return tuple(blocks)

    def _parse_attached_block(self) -> DocumentNode | list[DocumentNode] | None:
        """Parse the block after a list continuation, including its metadata lines."""
        while self._current_token().type in (TokenType.BLOCK_ATTRIBUTE, TokenType.ANCHOR, TokenType.BLOCK_TITLE):
            self._parse_block()

        token = self._current_token()
        if token.type in (TokenType.BLANK_LINE, TokenType.EOF):
            return None
        return self._parse_block()

    def _parse_description_list(self, ancestors: tuple[tuple[TokenType, str], ...]) -> ListNode:
        """Parse a description list (``term:: description``)."""
        meta = self._consume_pending_attrs()
        marker = self._marker(self._current_token())
        items: list[ListItem] = []

        while True:
            token = self._advance()
            description = (token.metadata or {}).get("description", "")
            text_lines = [description] if description else []

            if not description:
                saved_index = self.current_token_index
                self._skip_blank_lines()
                if self._current_token().type != TokenType.TEXT_LINE:
                    self.current_token_index = saved_index

            while self._current_token().type == TokenType.TEXT_LINE:
                text_lines.append(self._advance().content)

            blocks = self._parse_list_item_blocks(ancestors + (marker,))
            items.append(
                ListItem(
                    text=self.inline.convert("\n".join(text_lines)),
                    blocks=blocks,
                    term=self.inline.convert(token.content),
                )
            )
            if not self._next_sibling(marker):
                break

        return self._make_node(
            NodeType.DLIST,
            meta,
            node_class=ListNode,
            items=tuple(items),
            level=len(ancestors) + 1,
        )

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _parse_table(self) -> TableNode:
        r"""Parse a ``|===`` table.

        Cells start at each unescaped ``|``; a line without a leading ``|``
        continues the previous cell. The column count comes from the ``cols``
        attribute or from the first line. The first row is a header when the
        ``header`` option is set, or when the first line is followed by a
        blank line and ``noheader`` is not set.
        """
        meta = self._consume_pending_attrs()
        opening = self._advance()
        lines = self._collect_verbatim(opening)

        cells: list[str] = []
        first_line_cells = 0
        implicit_header = False

        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped:
                if index == 1 and first_line_cells:
                    implicit_header = True
                continue

            if not _CELL_START.match(stripped):
                if cells:
                    cells[-1] = f"{cells[-1]}\n{stripped}"
                else:
                    cells.append(stripped)
                continue

            parts = split_table_cells(stripped)
            if parts[0]:
                logger.debug("Ignoring cell specifier %r at table line %d", parts[0], index + 1)
            row_cells = parts[1:]
            cells.extend(cell.strip() for cell in row_cells)
            if index == 0:
                first_line_cells = len(row_cells)

        column_count = parse_column_count(meta.named.get("cols")) or first_line_cells or 1
        rows = [cells[i : i + column_count] for i in range(0, len(cells), column_count)]
        if rows and len(rows[-1]) < column_count:
            rows[-1].extend([""] * (column_count - len(rows[-1])))

        if meta.has_option("header"):
            header_row_count = 1
        elif meta.has_option("noheader"):
            header_row_count = 0
        else:
            header_row_count = 1 if implicit_header else 0

        caption = self._caption_for("table", meta)
        return self._make_node(
            NodeType.TABLE,
            meta,
            node_class=TableNode,
            caption=caption,
            rows=tuple(tuple(self.inline.convert(cell) for cell in row) for row in rows),
            header_row_count=min(header_row_count, len(rows)),
        )


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def split_attribute_list(content: str) -> list[str]:
    """Split an attribute list on commas outside quotes.

    Examples
    --------
        >>> split_attribute_list('source,python,title="a, b"')
        ['source', 'python', 'title="a, b"']

    """
    entries: list[str] = []
    current: list[str] = []
    quote: Optional[str] = None

    for char in content:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
        elif char in ("'", '"') and (not "".join(current).strip() or "".join(current).rstrip().endswith("=")):
            quote = char
            current.append(char)
        elif char == ",":
            entries.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    tail = "".join(current).strip()
    if tail or entries:
        entries.append(tail)
    return entries


def split_table_cells(line: str) -> list[str]:
    r"""Split a table line on unescaped ``|``; ``\|`` stays as a literal bar."""
    placeholder = "\x00PIPE\x00"
    parts = line.replace(r"\|", placeholder).split("|")
    return [part.replace(placeholder, "|") for part in parts]


def parse_column_count(cols: Optional[str]) -> int:
    """Return the column count of a ``cols`` attribute (``"3"``, ``"3*"``, ``"1,2,1"``)."""
    if not cols:
        return 0
    cols = cols.strip()
    multiplier = re.match(r"^(\d+)\*", cols)
    if multiplier:
        return int(multiplier.group(1))
    if "," in cols or ";" in cols:
        return len([spec for spec in re.split(r"[,;]", cols) if spec.strip()])
    if cols.isdigit():
        return int(cols)
    return 1


__all__ = ["AsciiDocLexer", "AsciiDocParser", "BlockMetadata", "Token", "TokenType", "split_attribute_list"]
