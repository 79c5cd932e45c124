"""HTTP Headers constants."""

from typing import Final

from multidict import istr

METH_GET: Final[str] = "GET"

AUTHORIZATION: Final[str] = istr("Authorization")
WWW_AUTHENTICATE: Final[str] = istr("WWW-Authenticate")

AUTH_BASIC: Final[str] = "Basic"
AUTH_DIGEST: Final[str] = "Digest"
