#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options bundle used by the orchestration API."""

from __future__ import annotations

from dataclasses import dataclass, field

from semadoc.constants import DEFAULT_FETCH_TIMEOUT, DEFAULT_USER_AGENT
from semadoc.options.asciidoc import AsciiDocParserOptions
from semadoc.options.base import CloneFrozenMixin
from semadoc.options.html import HtmlConverterOptions


@dataclass(frozen=True)
class ConvertOptions(CloneFrozenMixin):
    """Parser and converter options plus remote loading settings.

    Parameters
    ----------
    parser : AsciiDocParserOptions
        Options for reading the source
    converter : HtmlConverterOptions
        Options for producing HTML
    fetch_timeout : float, default 10.0
        Timeout in seconds for remote sources
    user_agent : str
        ``User-Agent`` header sent with remote requests

    """

    parser: AsciiDocParserOptions = field(default_factory=AsciiDocParserOptions)
    converter: HtmlConverterOptions = field(default_factory=HtmlConverterOptions)
    fetch_timeout: float = field(
        default=DEFAULT_FETCH_TIMEOUT,
        metadata={"help": "Timeout in seconds for remote sources", "type": float, "importance": "advanced"},
    )
    user_agent: str = field(
        default=DEFAULT_USER_AGENT,
        metadata={"help": "User-Agent header for remote requests", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the fetch timeout.

        Raises
        ------
        ValueError
            If ``fetch_timeout`` is not positive.

        """
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")
