#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Loading AsciiDoc sources from the filesystem or over HTTP(S).

``load_source`` resolves a user-supplied path or URL into a ``LoadedSource``
holding the decoded text and where it came from, so the orchestration layer
can decide where (and whether) to write output next to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote, urlparse

from semadoc.constants import DEFAULT_FETCH_TIMEOUT, DEFAULT_USER_AGENT, DEPS_NETWORK
from semadoc.exceptions import FetchError, FileAccessError, FileNotFoundError
from semadoc.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_REMOTE_SCHEMES = ("http", "https")


def is_remote_source(value: Union[str, Path]) -> bool:
    """Return whether ``value`` is an http(s) URL."""
    if isinstance(value, Path):
        return False
    return urlparse(value.strip()).scheme.lower() in _REMOTE_SCHEMES


@dataclass(frozen=True)
class LoadedSource:
    """Decoded source text and its origin.

    Parameters
    ----------
    text : str
        Source text with any UTF-8 byte order mark removed
    name : str
        Display name: the file name, or the last URL path segment
    path : Path or None
        Resolved local path, None for remote sources
    url : str or None
        Source URL, None for local files

    """

    text: str
    name: str
    path: Optional[Path] = None
    url: Optional[str] = None

    @property
    def is_remote(self) -> bool:
        """Return whether the source was fetched over the network."""
        return self.url is not None

    @property
    def stem(self) -> str:
        """File name without its extension."""
        return Path(self.name).stem or self.name


def read_local_source(path: Union[str, Path]) -> LoadedSource:
    """Read a UTF-8 AsciiDoc file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist or is not a file
    FileAccessError
        If the file cannot be read or is not valid UTF-8

    """
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise FileNotFoundError(str(file_path))

    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(str(file_path), original_error=e) from e

    logger.debug("Read %d characters from %s", len(text), file_path)
    return LoadedSource(text=text, name=file_path.name, path=file_path.resolve())


@requires_dependencies("network", DEPS_NETWORK)
def fetch_remote_source(
    url: str,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> LoadedSource:
    """Fetch an AsciiDoc document over HTTP(S).

    Redirects are followed. There are no retries.

    Raises
    ------
    FetchError
        If the request fails or the response status is not a success

    """
    import httpx

    try:
        with httpx.Client(timeout=timeout, follow_redirects=True, headers={"User-Agent": user_agent}) as client:
            response = client.get(url)
    except httpx.HTTPError as e:
        raise FetchError(url, reason=str(e) or type(e).__name__, original_error=e) from e

    if not response.is_success:
        raise FetchError(url, status_code=response.status_code, reason=response.reason_phrase)

    name = unquote(Path(urlparse(url).path).name) or "index"
    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return LoadedSource(text=response.text.lstrip("\ufeff"), name=name, url=url)


def load_source(
    path_or_url: Union[str, Path],
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> LoadedSource:
    """Load a source from a local path or an http(s) URL."""
    if is_remote_source(path_or_url):
        return fetch_remote_source(str(path_or_url).strip(), timeout=timeout, user_agent=user_agent)
    return read_local_source(path_or_url)


__all__ = ["LoadedSource", "fetch_remote_source", "is_remote_source", "load_source", "read_local_source"]
