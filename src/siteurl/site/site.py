"""src/siteurl/site/site.py

A programmatic representation of a website address.
"""

# pylint: disable=too-many-instance-attributes

from typing import Any, Dict, List, Optional, Union

from siteurl.http.url import URL
from siteurl.site.config import DEFAULT_CHARSET, SiteConfig
from siteurl.site.scheme import DEFAULT_PORT, Scheme, default_port_for
from siteurl.utils.encoding import encode

__all__ = ["Site"]


class Site:
    """
    Structured, mutable URL of a website.

    A Site keeps the parts of a URL apart so they can be changed one by one,
    and renders them back into a URL string with ``str()``::

        site = Site(Scheme.HTTP, "example.org")
        site.add_subdomain("www")
        site.add_path("user")
        site.file = "home.html"
        site.put_parameter("id", "3")
        site.fragment = "top"
        str(site)  # 'http://www.example.org/user/home.html?id=3#top'

    Two Sites are equal when they render to the same string. Sites are
    mutable and therefore unhashable.
    """

    __slots__ = (
        "charset",
        "_scheme",
        "username",
        "password",
        "subdomains",
        "host",
        "port",
        "paths",
        "file",
        "parameters",
        "fragment",
    )

    def __init__(self, scheme: Union[Scheme, str], host: str):
        self.charset: str = DEFAULT_CHARSET
        self._scheme: str = ""
        self.scheme = scheme
        self.username: Optional[str] = None
        self.password: Optional[str] = None
        self.subdomains: List[str] = []
        self.host: str = host
        self.port: int = DEFAULT_PORT
        self.paths: List[str] = []
        self.file: Optional[str] = None
        self.parameters: Dict[str, str] = {}
        self.fragment: Optional[str] = None

    @classmethod
    def from_url(cls, url: Union[URL, str]) -> "Site":
        """
        Build a Site by taking an existing URL apart.

        Args:
            url: A URL string or an already parsed URL.

        Returns:
            A new Site rendering the same address.

        Raises:
            MalformedURLError: If ``url`` is a string that is not a valid URL.
        """
        if not isinstance(url, URL):
            url = URL(url)

        labels = url.host.split(".")
        site = cls(url.scheme, ".".join(labels[-2:]))
        site.subdomains.extend(labels[:-2])

        if url.user_info is not None:
            username, sep, password = url.user_info.partition(":")
            site.set_authentication(username, password if sep else None)

        site.port = url.port if url.port else default_port_for(url.scheme)

        if url.path:
            segments = url.path[1:] if url.path.startswith("/") else url.path
            *paths, last = segments.split("/")
            site.paths.extend(paths)
            if "." in last:
                site.file = last
            else:
                site.paths.append(last)

        if url.query:
            for token in url.query.split("&"):
                if token:
                    key, _, value = token.partition("=")
                    site.put_parameter(key, value)

        site.fragment = url.fragment
        return site

    @classmethod
    def from_config(cls, config: SiteConfig) -> "Site":
        """Build a Site from a SiteConfig, copying its collections."""
        site = cls(config.scheme, config.host)
        site.charset = config.charset
        site.set_authentication(config.username, config.password)
        site.subdomains = list(config.subdomains)
        site.port = config.port
        site.paths = list(config.paths)
        site.file = config.file
        site.parameters = dict(config.parameters)
        site.fragment = config.fragment
        return site

    def copy(self) -> "Site":
        """Return an independent copy of this Site."""
        site = self.__class__(self._scheme, self.host)
        site.charset = self.charset
        site.set_authentication(self.username, self.password)
        site.subdomains = list(self.subdomains)
        site.port = self.port
        site.paths = list(self.paths)
        site.file = self.file
        site.parameters = dict(self.parameters)
        site.fragment = self.fragment
        return site

    def __copy__(self) -> "Site":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Site":
        # Every field is a string, an int or a container of strings.
        return self.copy()

    @property
    def scheme(self) -> str:
        """The URL scheme as a protocol token (e.g. ``"http"``)."""
        return self._scheme

    @scheme.setter
    def scheme(self, scheme: Union[Scheme, str]) -> None:
        self._scheme = scheme.protocol if isinstance(scheme, Scheme) else scheme

    def set_authentication(
        self, username: Optional[str], password: Optional[str] = None
    ) -> None:
        """Set the user-info; the password is only rendered with a username."""
        self.username = username
        self.password = password

    def add_subdomain(self, subdomain: str) -> None:
        """Append a subdomain label (e.g. "www")."""
        self.subdomains.append(subdomain)

    def add_path(self, path: str) -> None:
        """Append a path segment."""
        self.paths.append(path)

    def get_parameter(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Value of a query parameter, or ``default`` if it is not set."""
        return self.parameters.get(key, default)

    def put_parameter(self, key: str, value: str) -> None:
        """
        Set a query parameter.

        An existing key keeps its position and only its value is replaced.
        """
        self.parameters[key] = value

    def remove_parameter(self, key: str) -> None:
        """Remove a query parameter if present."""
        self.parameters.pop(key, None)

    def get_url(self) -> URL:
        """
        The rendered address as a parsed URL.

        Raises:
            MalformedURLError: If the current fields do not make a valid URL.
        """
        return URL(self.to_string())

    def to_string(self) -> str:
        """Render the Site as a URL string."""
        parts = [self._scheme, "://"]

        if self.username is not None:
            parts.append(self.username)
            if self.password is not None:
                parts.append(f":{self.password}")
            parts.append("@")

        parts.extend(f"{subdomain}." for subdomain in self.subdomains)
        parts.append(self.host)

        if self.port != DEFAULT_PORT:
            parts.append(f":{self.port}")

        parts.extend(f"/{path}" for path in self.paths)

        if self.file is not None:
            parts.append(f"/{self.file}")

        if self.parameters:
            query = "&".join(
                f"{self._encode(key)}={self._encode(value)}"
                for key, value in self.parameters.items()
            )
            parts.append(f"?{query}")

        if self.fragment is not None:
            parts.append(f"#{self._encode(self.fragment)}")

        return "".join(parts)

    def _encode(self, value: str) -> str:
        return encode(value, self.charset)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Site):
            return self.to_string() == other.to_string()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
