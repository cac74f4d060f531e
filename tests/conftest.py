import pytest

from siteurl.site.scheme import Scheme
from siteurl.site.site import Site


@pytest.fixture
def full_site():
    """Fixture providing a Site with every field populated."""
    site = Site(Scheme.HTTP, "example.org")
    site.set_authentication("alice", "secret")
    site.add_subdomain("www")
    site.port = 8080
    site.add_path("user")
    site.add_path("taig")
    site.file = "home.html"
    site.put_parameter("id", "3")
    site.put_parameter("session", "ASDF")
    site.fragment = "top"
    return site
