#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/semadoc/options/base.py
"""Shared base classes of the semadoc options.

All options are frozen dataclasses validated in ``__post_init__``. A changed
copy is made with ``create_updated``, which re-runs the validation::

    >>> options = HtmlConverterOptions()
    >>> options.create_updated(standalone=True).standalone
    True

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Adds ``create_updated`` to a frozen dataclass."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Raises
        ------
        TypeError
            If a keyword is not a field of the options class
        ValueError
            If a new value fails the class validation

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Options accepted by a ``BaseParser`` subclass."""

    def __post_init__(self) -> None:
        """Hook for field validation in subclasses."""


@dataclass(frozen=True)
class BaseConverterOptions(CloneFrozenMixin):
    """Options accepted by a ``BaseConverter`` subclass."""

    def __post_init__(self) -> None:
        """Hook for field validation in subclasses."""
