#  Copyright (c) 2025 Tom Villani, Ph.D.

# semadoc/options/asciidoc.py
"""Configuration options for AsciiDoc parsing.

This module defines the options that control how AsciiDoc source text is
turned into a ``Document`` tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from semadoc.constants import (
    DEFAULT_ATTRIBUTE_MISSING_POLICY,
    DEFAULT_ENABLE_LOREM,
    DEFAULT_HONOR_HARD_BREAKS,
    DEFAULT_PARSE_ATTRIBUTES,
    DEFAULT_RESOLVE_ATTRIBUTE_REFS,
    DEFAULT_STRIP_COMMENTS,
    AttributeMissingPolicy,
)
from semadoc.options.base import BaseParserOptions

_ATTRIBUTE_MISSING_POLICIES = ("keep", "blank", "warn")


@dataclass(frozen=True)
class AsciiDocParserOptions(BaseParserOptions):
    """Configuration options for AsciiDoc-to-tree parsing.

    Parameters
    ----------
    parse_attributes : bool, default True
        Whether to parse document attributes (``:name: value`` syntax).
    resolve_attribute_refs : bool, default True
        Whether to resolve attribute references (``{name}``) in text.
    attribute_missing_policy : {"keep", "blank", "warn"}, default "keep"
        What to do with a reference to an undefined attribute: keep the
        reference literally, drop it, or keep it and log a warning.
    strip_comments : bool, default True
        Whether to drop ``//`` line comments and ``////`` comment blocks.
        When False, they are emitted as HTML comments.
    honor_hard_breaks : bool, default True
        Whether a trailing `` +`` produces a ``<br>`` line break.
    enable_lorem : bool, default True
        Whether the ``lorem::[]`` block macro generates filler paragraphs.
        When False, the macro line is kept as paragraph text.
    lorem_seed : int or None, default None
        Seed for the lorem generator, for reproducible output.
    attributes : Mapping[str, str or None], default empty
        Preset document attributes. A value ending in ``@`` is soft: the
        document may redefine or unset it. Any other value is locked and wins
        over the document. A ``None`` value unsets the attribute.

    """

    parse_attributes: bool = field(
        default=DEFAULT_PARSE_ATTRIBUTES,
        metadata={"help": "Parse document attributes", "cli_name": "no-parse-attributes", "importance": "core"},
    )
    resolve_attribute_refs: bool = field(
        default=DEFAULT_RESOLVE_ATTRIBUTE_REFS,
        metadata={
            "help": "Resolve attribute references ({name}) in text",
            "cli_name": "no-resolve-attributes",
            "importance": "advanced",
        },
    )
    attribute_missing_policy: AttributeMissingPolicy = field(
        default=DEFAULT_ATTRIBUTE_MISSING_POLICY,
        metadata={
            "help": "Policy for undefined attribute references: keep literal, use blank, or warn",
            "choices": list(_ATTRIBUTE_MISSING_POLICIES),
            "importance": "advanced",
        },
    )
    strip_comments: bool = field(
        default=DEFAULT_STRIP_COMMENTS,
        metadata={"help": "Drop // comments instead of emitting HTML comments", "importance": "core"},
    )
    honor_hard_breaks: bool = field(
        default=DEFAULT_HONOR_HARD_BREAKS,
        metadata={
            "help": "Honor explicit line breaks (trailing space + plus)",
            "cli_name": "no-honor-hard-breaks",
            "importance": "advanced",
        },
    )
    enable_lorem: bool = field(
        default=DEFAULT_ENABLE_LOREM,
        metadata={"help": "Expand the lorem::[] block macro", "cli_name": "no-lorem", "importance": "advanced"},
    )
    lorem_seed: Optional[int] = field(
        default=None,
        metadata={"help": "Seed for the lorem generator", "type": int, "importance": "advanced"},
    )
    attributes: Mapping[str, Optional[str]] = field(
        default_factory=dict,
        metadata={"help": "Preset document attributes (NAME=VALUE, a trailing @ makes it soft)", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the missing-attribute policy and freeze the preset attributes.

        Raises
        ------
        ValueError
            If ``attribute_missing_policy`` is not a known policy.

        """
        super().__post_init__()

        if self.attribute_missing_policy not in _ATTRIBUTE_MISSING_POLICIES:
            raise ValueError(
                f"attribute_missing_policy must be one of {_ATTRIBUTE_MISSING_POLICIES}, "
                f"got {self.attribute_missing_policy!r}"
            )

        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes or {})))
