"""Authentication related errors."""

__all__ = ("AuthError", "CredentialsError")


class AuthError(Exception):
    """Base class for authentication errors."""


class CredentialsError(AuthError, ValueError):
    """Malformed credential source.

    Raised while building a credential store from an explicit
    host to "username[:password]" mapping.
    """
