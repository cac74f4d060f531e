"""src/siteurl/exceptions.py

siteurl Exceptions hierarchy.
"""


class SiteError(Exception):
    """Base exception for all siteurl errors."""


class MalformedURLError(SiteError, ValueError):
    """
    A string could not be understood as a URL.
    Raised when parsing a URL and when a rendered Site does not parse back.
    """

    def __init__(self, url: str, reason: str = "not a valid URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"{url!r}: {reason}")
