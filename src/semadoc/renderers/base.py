#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/renderers/base.py
"""Base class for document tree converters.

A converter turns a parsed ``Document`` into an output string. Subclasses
implement ``convert_document``; ``render`` writes that string to a path or a
stream.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from semadoc.ast import Document
from semadoc.exceptions import InvalidOptionsError
from semadoc.options.base import BaseConverterOptions
from semadoc.utils.io_utils import write_content


class BaseConverter(ABC):
    """Abstract base class for semadoc converters.

    Parameters
    ----------
    options : BaseConverterOptions or None, default = None
        Format-specific conversion options

    """

    def __init__(self, options: BaseConverterOptions | None = None):
        """Initialize the converter with optional configuration."""
        self.options = options

    @abstractmethod
    def convert_document(self, document: Document) -> str:
        """Convert a whole document tree to a string.

        Parameters
        ----------
        document : Document
            Root of the tree to convert

        Returns
        -------
        str
            Converted output

        """

    def render(self, document: Document, output: Union[str, Path, IO[str]]) -> None:
        """Convert ``document`` and write the result to ``output``.

        Parameters
        ----------
        document : Document
            Root of the tree to convert
        output : str, Path or IO[str]
            File path or writable stream

        Raises
        ------
        OutputWriteError
            If the file cannot be written

        """
        write_content(self.convert_document(document), output)

    @staticmethod
    def _validate_options_type(
        options: BaseConverterOptions | None, expected_type: type, converter_name: str
    ) -> None:
        """Validate that options are of the correct type for this converter.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=converter_name,
                expected_type=expected_type,
                received_type=type(options),
            )


__all__ = ["BaseConverter"]
