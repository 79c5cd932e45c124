from typing import Optional

import attr
from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL

from . import hdrs
from .typedefs import LooseHeaders

__all__ = ("AuthRequest", "AuthResponse")


def _to_url(value: object) -> URL:
    return value if isinstance(value, URL) else URL(str(value))


def _to_headers(value: Optional[LooseHeaders]) -> "CIMultiDict[str]":
    if isinstance(value, CIMultiDict):
        return value
    return CIMultiDict(value or ())


def _to_headers_proxy(
    value: Optional[LooseHeaders],
) -> "Optional[CIMultiDictProxy[str]]":
    if value is None:
        return None
    if isinstance(value, CIMultiDictProxy):
        return value
    return CIMultiDictProxy(CIMultiDict(value))


@attr.s(frozen=True, slots=True)
class AuthRequest:
    """Minimal outgoing request consumed by authenticators."""

    method = attr.ib(type=str, default=hdrs.METH_GET)
    url = attr.ib(type=URL, default=URL("/"), converter=_to_url)
    headers = attr.ib(
        type=CIMultiDict, factory=CIMultiDict, converter=_to_headers
    )


@attr.s(frozen=True, slots=True)
class AuthResponse:
    """Server reply carrying the authentication challenge."""

    status = attr.ib(type=int, default=401)
    headers = attr.ib(
        type=Optional[CIMultiDictProxy],
        default=None,
        converter=_to_headers_proxy,
    )

    @property
    def www_authenticate(self) -> str:
        if self.headers is None:
            return ""
        return self.headers.get(hdrs.WWW_AUTHENTICATE, "")
