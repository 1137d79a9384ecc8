"""High-level clients."""

from .all_pages import AllPagesClient

__all__ = ["AllPagesClient"]
