"""Per-host credential storage."""

import base64
import binascii
import os
from collections import namedtuple
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from .exceptions import CredentialsError
from .log import auth_logger
from .typedefs import PathLike

__all__ = (
    "Credential",
    "CredentialStore",
    "read_credentials_file",
    "split_userpass",
)

CREDENTIALS_ENV = "HTTPAUTH_CREDENTIALS"


class Credential(namedtuple("Credential", ["username", "password"])):
    """Username and password pair for one host."""

    def __new__(cls, username: str, password: str = "") -> "Credential":
        if username is None:
            raise ValueError("None is not allowed as username value")

        if password is None:
            raise ValueError("None is not allowed as password value")

        return super().__new__(cls, username, password)

    @classmethod
    def from_userpass(cls, payload: str) -> "Credential":
        """Create a Credential from a "username[:password]" string."""
        username, _, password = payload.partition(":")
        return cls(username, password)

    @classmethod
    def decode(cls, auth_header: str, encoding: str = "utf-8") -> "Credential":
        """Create a Credential object from a Basic Authorization header."""
        try:
            auth_type, encoded_credentials = auth_header.split(" ", 1)
        except ValueError:
            raise ValueError("Could not parse authorization header.")

        if auth_type.lower() != "basic":
            raise ValueError("Unknown authorization method %s" % auth_type)

        try:
            decoded = base64.b64decode(
                encoded_credentials.encode("ascii"), validate=True
            ).decode(encoding)
        except binascii.Error:
            raise ValueError("Invalid base64 encoding.")

        return cls.from_userpass(decoded)

    def encode(self, encoding: str = "utf-8") -> str:
        """Encode credentials as a Basic Authorization header value."""
        creds = f"{self.username}:{self.password}".encode(encoding)
        return "Basic %s" % base64.b64encode(creds).decode("ascii")


def split_userpass(payload: str) -> Credential:
    # Only the first colon separates: passwords may contain colons.
    return Credential.from_userpass(payload)


def read_credentials_file(
    filename: PathLike, *, encoding: str = "utf-8"
) -> Dict[str, str]:
    """Read "host[ username[:password]]" lines from filename.

    Returns a host to "username[:password]" mapping; a host listed more
    than once keeps its last entry. An unreadable file yields an empty
    mapping and a warning.
    """
    creds: Dict[str, str] = {}
    try:
        with open(filename, encoding=encoding) as f:
            for line in f:
                line = line.rstrip("\r\n")
                if not line:
                    continue
                # Spaces are legal in Basic auth passwords, keep them.
                host, _, userpass = line.partition(" ")
                creds[host] = userpass
    except (OSError, UnicodeDecodeError) as e:
        auth_logger.warning("Couldn't read credentials file %s: %s", filename, e)
        return {}
    return creds


def _validate(hosts_to_creds: object) -> Mapping[str, str]:
    if not isinstance(hosts_to_creds, Mapping):
        raise CredentialsError(
            "hosts_to_creds should be a mapping, got %r"
            % type(hosts_to_creds).__name__
        )
    for host, userpass in hosts_to_creds.items():
        if not isinstance(host, str) or not host:
            raise CredentialsError(f"Invalid host {host!r}")
        if not isinstance(userpass, str):
            raise CredentialsError(
                f"Credentials for {host!r} should be a str, "
                f"got {type(userpass).__name__}"
            )
    return hosts_to_creds


class CredentialStore(Mapping[str, Credential]):
    """Read-only host to Credential mapping.

    Built once by :meth:`load`; never mutated afterwards, so lookups
    are safe from any number of threads or tasks.
    """

    __slots__ = ("_creds",)

    def __init__(self, creds: Optional[Mapping[str, Credential]] = None) -> None:
        self._creds: Mapping[str, Credential] = MappingProxyType(dict(creds or {}))

    @classmethod
    def load(
        cls,
        filename: Optional[PathLike] = None,
        hosts_to_creds: Optional[Mapping[str, str]] = None,
        *,
        encoding: str = "utf-8",
    ) -> "CredentialStore":
        """Build a store from a credentials file and an explicit mapping.

        Entries from hosts_to_creds override entries read from filename.
        Hosts are lowercased, matching how URLs report them.
        Raises CredentialsError if hosts_to_creds is malformed.
        """
        explicit = _validate(hosts_to_creds) if hosts_to_creds is not None else {}

        creds: Dict[str, Credential] = {}
        if filename:
            for host, userpass in read_credentials_file(
                filename, encoding=encoding
            ).items():
                creds[host.lower()] = split_userpass(userpass)
        for host, userpass in explicit.items():
            creds[host.lower()] = split_userpass(userpass)

        auth_logger.debug("Loaded credentials for %d host(s)", len(creds))
        return cls(creds)

    @classmethod
    def from_env(
        cls,
        hosts_to_creds: Optional[Mapping[str, str]] = None,
        *,
        encoding: str = "utf-8",
    ) -> "CredentialStore":
        """Build a store using the file named by $HTTPAUTH_CREDENTIALS."""
        filename = os.environ.get(CREDENTIALS_ENV) or None
        return cls.load(filename, hosts_to_creds, encoding=encoding)

    def __getitem__(self, host: str) -> Credential:
        return self._creds[host]

    def __iter__(self) -> Iterator[str]:
        return iter(self._creds)

    def __len__(self) -> int:
        return len(self._creds)

    def __repr__(self) -> str:
        return f"<CredentialStore hosts={sorted(self._creds)!r}>"
