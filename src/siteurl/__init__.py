"""src/siteurl/__init__.py

siteurl - Structured, mutable website addresses for Python.

A Site holds the parts of a URL (scheme, user-info, subdomains, host, port,
path segments, file, query parameters and fragment) as separate, editable
fields and renders them into a URL string. A Site can also be built by
taking an existing URL apart.

Key Features:
    - Zero external dependencies
    - Parse existing URLs into editable parts
    - Deterministic rendering (insertion-ordered query parameters)
    - Charset-aware percent-encoding of query and fragment values
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Building a Site::

        from siteurl import Scheme, Site

        site = Site(Scheme.HTTPS, "example.org")
        site.add_subdomain("www")
        site.add_path("search")
        site.put_parameter("q", "python urls")
        print(site)  # https://www.example.org/search?q=python+urls

    Parsing a URL::

        from siteurl import Site

        site = Site.from_url("http://www.example.org/user/home.html?id=3")
        site.put_parameter("id", "4")
        print(site.get_url())
"""

from siteurl.exceptions import MalformedURLError, SiteError
from siteurl.http.url import URL
from siteurl.site.config import SiteConfig
from siteurl.site.scheme import Scheme
from siteurl.site.site import Site
from siteurl.version import __version__

__all__ = [
    "Site",
    "SiteConfig",
    "Scheme",
    "URL",
    "SiteError",
    "MalformedURLError",
]
