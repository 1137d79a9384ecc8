"""Continuation token to cache identifier mapping.

Identifiers are a pure function of the token: `"head"` for the first page,
otherwise a prefixed, unpadded, lowercase base32 encoding of the token's
UTF-8 bytes. The prefix keeps every encoded token distinct from `"head"`.
Base32 uses a single letter case, so distinct tokens stay distinct file
names on case-insensitive filesystems as well.
"""

from __future__ import annotations

import base64
import binascii

HEAD_IDENTIFIER = "head"
TOKEN_PREFIX = "c-"

FILENAME_PREFIX = "allPages."
FILENAME_SUFFIX = ".json"


def identifier_for(token: str | None) -> str:
    """Get the cache identifier for a continuation token.

    Examples:
        >>> identifier_for(None)
        'head'
        >>> identifier_for("Abc")
        'c-ifrgg'
    """
    if token is None:
        return HEAD_IDENTIFIER
    encoded = base64.b32encode(token.encode("utf-8")).decode("ascii")
    return TOKEN_PREFIX + encoded.rstrip("=").lower()


def token_for(identifier: str) -> str | None:
    """Recover the continuation token an identifier was derived from.

    Raises:
        ValueError: If `identifier` was not produced by `identifier_for`
    """
    if identifier == HEAD_IDENTIFIER:
        return None
    if not identifier.startswith(TOKEN_PREFIX):
        raise ValueError(f"Not a cache identifier: {identifier!r}")

    encoded = identifier[len(TOKEN_PREFIX) :]
    padded = encoded + "=" * (-len(encoded) % 8)
    try:
        return base64.b32decode(padded.encode("ascii"), casefold=True).decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        raise ValueError(f"Not a cache identifier: {identifier!r}") from e


def filename_for(identifier: str) -> str:
    """Get the on-disk file name for a cache identifier."""
    return f"{FILENAME_PREFIX}{identifier}{FILENAME_SUFFIX}"


def identifier_from_filename(filename: str) -> str | None:
    """Inverse of `filename_for`; None for files that are not cache entries."""
    if not (filename.startswith(FILENAME_PREFIX) and filename.endswith(FILENAME_SUFFIX)):
        return None
    identifier = filename[len(FILENAME_PREFIX) : -len(FILENAME_SUFFIX)]
    return identifier or None
