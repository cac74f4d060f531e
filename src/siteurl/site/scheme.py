"""src/siteurl/site/scheme.py

Supported Site schemes.
"""

import enum
from typing import Dict

__all__ = ["Scheme", "DEFAULT_PORT", "default_port_for"]

DEFAULT_PORT = 80

_WELL_KNOWN_PORTS: Dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}


class Scheme(enum.Enum):
    """
    All possible Site schemes.

    Each member carries the protocol token used in the URL.
    """

    HTTP = "http"
    HTTPS = "https"

    @property
    def protocol(self) -> str:
        """The protocol name as used in the URL (e.g. ``"http"``)."""
        return self.value

    @property
    def default_port(self) -> int:
        """Conventional port of the protocol."""
        return _WELL_KNOWN_PORTS[self.value]

    @classmethod
    def from_protocol(cls, protocol: str) -> "Scheme":
        """Look up a Scheme by protocol token, case-insensitively."""
        try:
            return cls(protocol.lower())
        except ValueError:
            raise ValueError(f"Unsupported scheme: {protocol!r}") from None

    def __str__(self) -> str:
        return self.value


def default_port_for(protocol: str) -> int:
    """Conventional port for a protocol token, or DEFAULT_PORT if unknown."""
    return _WELL_KNOWN_PORTS.get(protocol.lower(), DEFAULT_PORT)
