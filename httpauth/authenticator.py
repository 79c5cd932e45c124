"""Pick and build the Authorization header for a request."""

from typing import Mapping, Optional

from multidict import CIMultiDict, CIMultiDictProxy

from . import hdrs
from .abc import AbstractAuthenticator
from .challenge import parse_scheme, parse_www_authenticate
from .credentials import Credential, CredentialStore
from .digest import compute_digest
from .log import auth_logger
from .typedefs import CredentialMapping, PathLike, RequestLike, ResponseLike

__all__ = ("Authenticator", "get_basic_auth")


def get_basic_auth(credential: Credential) -> str:
    return credential.encode()


def _get_challenge(headers: Mapping[str, str]) -> str:
    if not isinstance(headers, (CIMultiDict, CIMultiDictProxy)):
        headers = CIMultiDict(headers)
    return headers.get(hdrs.WWW_AUTHENTICATE, "")


class Authenticator(AbstractAuthenticator):
    """Authenticator backed by an immutable host to credential mapping.

    Usage::

        auther = Authenticator.load("creds.txt", {"example.com": "user:pass"})
        value = auther.try_get_auth(request, response)
        if value:
            request.headers[hdrs.AUTHORIZATION] = value
    """

    __slots__ = ("_creds",)

    def __init__(self, creds: CredentialMapping) -> None:
        self._creds = creds

    @classmethod
    def load(
        cls,
        filename: Optional[PathLike] = None,
        hosts_to_creds: Optional[Mapping[str, str]] = None,
        *,
        encoding: str = "utf-8",
    ) -> "Authenticator":
        return cls(
            CredentialStore.load(filename, hosts_to_creds, encoding=encoding)
        )

    @property
    def credentials(self) -> CredentialMapping:
        return self._creds

    def try_get_auth(
        self, request: RequestLike, response: Optional[ResponseLike] = None
    ) -> str:
        host = request.url.host
        creds = self._creds.get(host) if host is not None else None
        if creds is None:
            auth_logger.debug("No credentials for host %s", host)
            return ""

        headers = getattr(response, "headers", None)
        if headers is None:
            # Unknown scheme yet: guess Basic to save a round trip.
            return get_basic_auth(creds)

        challenge = _get_challenge(headers)
        scheme = parse_scheme(challenge)
        if scheme == hdrs.AUTH_BASIC:
            return get_basic_auth(creds)
        if scheme == hdrs.AUTH_DIGEST:
            return compute_digest(creds, request, parse_www_authenticate(challenge))

        auth_logger.debug("Unsupported auth scheme %r for host %s", scheme, host)
        return ""

    def update_auth(
        self, request: RequestLike, response: Optional[ResponseLike] = None
    ) -> bool:
        """Set the Authorization header on request.

        Returns False, leaving request untouched, if no header could be
        built.
        """
        value = self.try_get_auth(request, response)
        if not value:
            return False
        request.headers[hdrs.AUTHORIZATION] = value
        return True
