#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/parsers/__init__.py
"""Parsers that turn source markup into a document tree."""

from semadoc.parsers.asciidoc import AsciiDocLexer, AsciiDocParser, Token, TokenType
from semadoc.parsers.base import BaseParser
from semadoc.parsers.inline import InlineParser

__all__ = ["AsciiDocLexer", "AsciiDocParser", "BaseParser", "InlineParser", "Token", "TokenType"]
