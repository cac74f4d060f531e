"""src/siteurl/http/__init__.py"""

from .url import URL

__all__ = ["URL"]
