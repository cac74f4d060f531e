"""src/siteurl/utils/__init__.py"""

from .encoding import encode
from .validators import validate_url

__all__ = ["encode", "validate_url"]
