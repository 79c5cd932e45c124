"""Digest access authentication (RFC 7616), client side.

Only the "auth" quality of protection is produced. The nonce count is
always 1: no state is kept between calls, so every response is built
as if it answered a fresh challenge.

Please also refer to:
- RFC 7616: HTTP Digest Access Authentication
- RFC 2617: HTTP Authentication (deprecated by RFC 7616)
"""

import base64
import functools
import hashlib
import os
from types import MappingProxyType
from typing import Callable, Dict, Final, Mapping

from . import hdrs
from .challenge import unquote
from .credentials import Credential
from .log import digest_logger
from .typedefs import RequestLike

__all__ = ("DigestFunctions", "compute_digest", "generate_client_nonce")


DigestFunctions: Final[Mapping[str, Callable[[bytes], "hashlib._Hash"]]] = (
    MappingProxyType(
        {
            "MD5": hashlib.md5,
            "SHA-256": hashlib.sha256,
            "SHA-512-256": functools.partial(hashlib.new, "sha512_256"),
        }
    )
)

SESSION_SUFFIX: Final[str] = "-sess"
NONCE_COUNT: Final[str] = f"{1:08x}"
CNONCE_SIZE: Final[int] = 32


def generate_client_nonce() -> str:
    """Return 32 random bytes, base64 encoded."""
    return base64.b64encode(os.urandom(CNONCE_SIZE)).decode("ascii")


def compute_digest(
    credential: Credential, request: RequestLike, params: Dict[str, str]
) -> str:
    """Build a Digest Authorization header value.

    params are the challenge parameters as returned by
    :func:`httpauth.challenge.parse_www_authenticate`, values still quoted.
    Returns an empty string when no valid response can be built; the
    caller must not send a header in that case.
    """
    algorithm = params.get("algorithm") or "MD5"
    name = algorithm
    sess = name.endswith(SESSION_SUFFIX)
    if sess:
        name = name[: -len(SESSION_SUFFIX)]
    hash_fn = DigestFunctions.get(name)
    if hash_fn is None:
        digest_logger.debug("Unsupported digest algorithm %s", algorithm)
        return ""
    try:
        hash_fn(b"")
    except ValueError as e:
        # e.g. SHA-512-256 on OpenSSL builds without it
        digest_logger.debug("Digest algorithm %s unavailable: %s", algorithm, e)
        return ""

    def H(data: str) -> str:
        """RFC 7616 Section 3: H(data) = hex(hash(data))."""
        return hash_fn(data.encode("utf-8")).hexdigest()

    def KD(secret: str, data: str) -> str:
        """RFC 7616 Section 3: KD(secret, data) = H(secret ":" data)."""
        return H(f"{secret}:{data}")

    realm = params.get("realm", "")
    nonce = params.get("nonce", "")
    try:
        cnonce = generate_client_nonce()
    except NotImplementedError as e:
        digest_logger.debug("Couldn't generate client nonce: %s", e)
        return ""

    # RFC 7616 Section 3.4.2
    username = unquote(credential.username)
    A1 = f"{username}:{unquote(realm)}:{credential.password}"
    if sess:
        A1 = f"{H(A1)}:{unquote(nonce)}:{unquote(cnonce)}"

    method = request.method or hdrs.METH_GET
    uri = request.url.raw_path_qs

    qop_options = (params.get("qop") or "auth").split(", ")
    qop = qop_options[0]
    if len(qop_options) > 1:
        # The split cut the closing quote off a quoted list.
        qop += '"'
    if unquote(qop) != "auth":
        digest_logger.debug("Unsupported quality of protection %s", qop)
        return ""

    # RFC 7616 Section 3.4.3
    A2 = f"{method}:{uri}"

    response = KD(
        H(A1),
        ":".join(
            (unquote(nonce), NONCE_COUNT, unquote(cnonce), unquote(qop), H(A2))
        ),
    )

    # RFC 7616 Section 3.4.4: the username is hashed last.
    userhash = params.get("userhash") or "false"
    if userhash == "true":
        username = H(f"{username}:{unquote(realm)}")
    else:
        username = credential.username

    pairs = [
        f'username="{username}"',
        f"realm={realm}",
        f'uri="{uri}"',
        f"algorithm={algorithm}",
        f"nonce={nonce}",
        f"nc={NONCE_COUNT}",
        f'cnonce="{cnonce}"',
        f"qop={qop}",
        f'response="{response}"',
        f"userhash={userhash}",
    ]
    # Some servers (Apache) refuse an empty opaque.
    opaque = params.get("opaque")
    if opaque:
        pairs.append(f"opaque={opaque}")

    return f"{hdrs.AUTH_DIGEST} {', '.join(pairs)}"
