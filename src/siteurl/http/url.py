"""src/siteurl/http/url.py

Structured URL value for siteurl.
"""

import logging
import urllib.parse
from typing import Optional

from siteurl.exceptions import MalformedURLError
from siteurl.utils.validators import validate_url

__all__ = ["URL"]

logger = logging.getLogger(__name__)


class URL:
    """
    A parsed, syntactically valid URL.

    Components are exposed as they appear in the string: nothing is
    percent-decoded and absent parts are ``None``.

    Raises:
        MalformedURLError: If ``url`` is not a valid URL.
    """

    __slots__ = (
        "raw",
        "parsed",
        "scheme",
        "username",
        "password",
        "host",
        "port",
        "path",
        "query",
        "fragment",
    )

    def __init__(self, url: str):
        if not validate_url(url):
            logger.debug("Rejected URL %r", url)
            raise MalformedURLError(url)

        self.raw = url
        self.parsed = urllib.parse.urlsplit(url)
        try:
            self.port: Optional[int] = self.parsed.port
        except ValueError as exc:
            raise MalformedURLError(url, str(exc)) from exc

        self.scheme: str = self.parsed.scheme
        self.username: Optional[str] = self.parsed.username
        self.password: Optional[str] = self.parsed.password
        self.host: str = _split_host(self.parsed.netloc)
        self.path: str = self.parsed.path
        self.query: Optional[str] = self.parsed.query or None
        self.fragment: Optional[str] = self.parsed.fragment or None

    @property
    def user_info(self) -> Optional[str]:
        """The raw ``user[:password]`` part of the authority, if any."""
        netloc = self.parsed.netloc
        if "@" not in netloc:
            return None
        return netloc.rpartition("@")[0]

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"URL({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URL):
            return self.raw == other.raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.raw)


def _split_host(netloc: str) -> str:
    """Host part of a netloc, with its original case and IPv6 brackets kept."""
    host_port = netloc.rpartition("@")[2]
    if host_port.startswith("["):
        return host_port[: host_port.find("]") + 1]
    return host_port.partition(":")[0]
