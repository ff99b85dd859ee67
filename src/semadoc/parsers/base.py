#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/parsers/base.py
"""Base class for document parsers.

A parser turns source text into an immutable ``Document`` tree that the
semantic converter can render.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from semadoc.ast import Document
from semadoc.exceptions import InvalidOptionsError
from semadoc.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for semadoc parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from semadoc.ast import Document
        >>> from semadoc.parsers.base import BaseParser
        >>>
        >>> class EmptyParser(BaseParser):
        ...     def parse(self, source):
        ...         return Document()

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _normalize_newlines(source: str) -> str:
        """Convert CRLF and CR line terminators to LF and drop a byte order mark."""
        return source.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")

    @abstractmethod
    def parse(self, source: str) -> Document:
        """Parse source text into a document tree.

        Parameters
        ----------
        source : str
            Complete source text

        Returns
        -------
        Document
            Root of the parsed tree

        Raises
        ------
        ParsingError
            If the source cannot be parsed

        """
        ...
