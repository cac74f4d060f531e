"""src/siteurl/site/config.py

Site construction settings.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from siteurl.site.scheme import DEFAULT_PORT, Scheme

if TYPE_CHECKING:  # pragma: no cover
    from siteurl.site.site import Site

DEFAULT_CHARSET = "UTF-8"


@dataclass
class SiteConfig:
    """
    Everything needed to build a Site in one go.

    Attributes:
        scheme: URL scheme, as a Scheme or a protocol token.
        host: URL host (e.g. "example.org").
        charset: Encoding used for query and fragment values.
        username: Optional user-info name.
        password: Optional user-info password, ignored without a username.
        subdomains: Labels rendered in order before the host.
        port: Port, omitted from the URL when it is 80.
        paths: Path segments.
        file: Final path segment (e.g. "home.html").
        parameters: Query parameters, in rendering order.
        fragment: URL fragment.
    """

    scheme: Union[Scheme, str]
    host: str
    charset: str = DEFAULT_CHARSET
    username: Optional[str] = None
    password: Optional[str] = None
    subdomains: List[str] = field(default_factory=list)
    port: int = DEFAULT_PORT
    paths: List[str] = field(default_factory=list)
    file: Optional[str] = None
    parameters: Dict[str, str] = field(default_factory=dict)
    fragment: Optional[str] = None

    def to_site(self) -> "Site":
        """Build a new Site from these settings."""
        # pylint: disable=import-outside-toplevel
        from siteurl.site.site import Site

        return Site.from_config(self)
