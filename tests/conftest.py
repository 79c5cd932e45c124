from typing import Iterator
from unittest import mock

import pytest
from yarl import URL

from httpauth import AuthRequest, Credential

# RFC 7616 Section 3.9.1
RFC_USERNAME = "Mufasa"
RFC_PASSWORD = "Circle of Life"
RFC_CNONCE = "f2/wE4q74E6zIJEtWaHKaf5wv/H5QzzpXusqGemxURZJ"
RFC_CHALLENGE = (
    'Digest realm="http-auth@example.org", qop="auth, auth-int", '
    "algorithm={algorithm}, "
    'nonce="7ypf/xlj9XXwfDPEoM4URrv/xwf94BcCAzFZH4GiTo0v", '
    'opaque="FQhe/qaU925kfnzjCev0ciny7QMkPqMAFRtzCUYo5tdS"'
)


@pytest.fixture
def fixed_cnonce() -> Iterator[mock.MagicMock]:
    """Pin the client nonce to the RFC 7616 example value."""
    with mock.patch(
        "httpauth.digest.generate_client_nonce", return_value=RFC_CNONCE
    ) as patched:
        yield patched


@pytest.fixture
def rfc_credential() -> Credential:
    return Credential(RFC_USERNAME, RFC_PASSWORD)


@pytest.fixture
def rfc_request() -> AuthRequest:
    return AuthRequest("GET", URL("http://www.example.org/dir/index.html"))


@pytest.fixture
def rfc_challenge() -> str:
    """RFC 7616 example challenge, with an {algorithm} placeholder."""
    return RFC_CHALLENGE
