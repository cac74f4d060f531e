"""src/siteurl/site/__init__.py"""

from .config import DEFAULT_CHARSET, SiteConfig
from .scheme import DEFAULT_PORT, Scheme, default_port_for
from .site import Site

__all__ = [
    "Site",
    "SiteConfig",
    "Scheme",
    "DEFAULT_CHARSET",
    "DEFAULT_PORT",
    "default_port_for",
]
