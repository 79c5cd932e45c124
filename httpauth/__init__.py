__version__ = "1.0.0"

from . import hdrs
from .abc import AbstractAuthenticator
from .authenticator import Authenticator, get_basic_auth
from .challenge import parse_scheme, parse_www_authenticate, unquote
from .credentials import (
    Credential,
    CredentialStore,
    read_credentials_file,
    split_userpass,
)
from .digest import DigestFunctions, compute_digest, generate_client_nonce
from .exceptions import AuthError, CredentialsError
from .reqrep import AuthRequest, AuthResponse

__all__ = (
    "hdrs",
    # abc
    "AbstractAuthenticator",
    # authenticator
    "Authenticator",
    "get_basic_auth",
    # challenge
    "parse_scheme",
    "parse_www_authenticate",
    "unquote",
    # credentials
    "Credential",
    "CredentialStore",
    "read_credentials_file",
    "split_userpass",
    # digest
    "DigestFunctions",
    "compute_digest",
    "generate_client_nonce",
    # exceptions
    "AuthError",
    "CredentialsError",
    # reqrep
    "AuthRequest",
    "AuthResponse",
)
