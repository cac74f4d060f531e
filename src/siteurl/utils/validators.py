"""utils/validators.py

Validation utilities for siteurl.
"""

import re
import urllib.parse

# RFC 3986 section 3.1
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def validate_url(url: str) -> bool:
    """
    Syntactic URL validation.

    A URL is accepted when it has a well-formed scheme followed by "//" and
    a non-empty host. The scheme itself is not checked against a list of
    known protocols and the host is not resolved.
    """
    if not url or any(c.isspace() for c in url):
        return False

    scheme, sep, _ = url.partition("://")
    if not sep or not _SCHEME_RE.match(scheme):
        return False

    try:
        netloc = urllib.parse.urlsplit(url).netloc
    except ValueError:
        return False

    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host.find("]") > 1
    return bool(host.partition(":")[0])
