"""tests/unit/test_scheme.py"""

import pytest

from siteurl.site.scheme import DEFAULT_PORT, Scheme, default_port_for


class TestScheme:
    """Tests for Scheme enumeration."""

    def test_members(self):
        """Test that only HTTP and HTTPS are defined."""
        assert [scheme.name for scheme in Scheme] == ["HTTP", "HTTPS"]

    def test_protocol(self):
        """Test protocol tokens."""
        assert Scheme.HTTP.protocol == "http"
        assert Scheme.HTTPS.protocol == "https"
        assert str(Scheme.HTTPS) == "https"

    def test_default_port(self):
        """Test conventional ports."""
        assert Scheme.HTTP.default_port == 80
        assert Scheme.HTTPS.default_port == 443

    @pytest.mark.parametrize("token", ["https", "HTTPS", "Https"])
    def test_from_protocol(self, token):
        """Test case-insensitive lookup by protocol token."""
        assert Scheme.from_protocol(token) is Scheme.HTTPS

    def test_from_protocol_unknown(self):
        """Test that unknown tokens raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported scheme"):
            Scheme.from_protocol("gopher")


@pytest.mark.parametrize(
    "protocol, expected",
    [
        ("http", 80),
        ("https", 443),
        ("HTTPS", 443),
        ("wss", 443),
        ("ftp", 21),
        ("gopher", DEFAULT_PORT),
    ],
)
def test_default_port_for(protocol, expected):
    """Test default port lookup for protocol tokens."""
    assert default_port_for(protocol) == expected
