"""Local response cache: identifier codec and disk store."""

from .codec import (
    HEAD_IDENTIFIER,
    filename_for,
    identifier_for,
    identifier_from_filename,
    token_for,
)
from .disk import DiskCacheStore

__all__ = [
    "HEAD_IDENTIFIER",
    "DiskCacheStore",
    "identifier_for",
    "token_for",
    "filename_for",
    "identifier_from_filename",
]
