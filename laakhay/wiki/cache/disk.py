"""Write-once disk store for raw API responses."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ..core import CacheReadError, CacheWriteError
from .codec import filename_for, identifier_from_filename

logger = logging.getLogger(__name__)

TMP_SUFFIX = ".tmp"


class DiskCacheStore:
    """Append-only blob store keyed by cache identifier.

    Each entry is a single file `allPages.<identifier>.json` under `root`
    holding the response bytes verbatim. Entries are never updated or
    deleted.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def path_for(self, identifier: str) -> Path:
        return self.root / filename_for(identifier)

    def contains(self, identifier: str) -> bool:
        return self.path_for(identifier).is_file()

    def read(self, identifier: str) -> bytes:
        """Read a stored entry.

        Raises:
            CacheReadError: If the entry is missing or unreadable
        """
        path = self.path_for(identifier)
        try:
            return path.read_bytes()
        except OSError as e:
            raise CacheReadError(
                f"Cannot read cache entry {path}: {e}", identifier=identifier, path=path
            ) from e

    def read_or_none(self, identifier: str) -> bytes | None:
        """Read a stored entry, or None if it cannot be read for any reason."""
        try:
            return self.read(identifier)
        except CacheReadError as e:
            if not isinstance(e.__cause__, FileNotFoundError):
                logger.debug("Unreadable cache entry", extra={"path": str(e.path), "error": str(e)})
            return None

    def write_once(self, identifier: str, data: bytes) -> None:
        """Persist `data` under `identifier`.

        The body is written and synced to a temporary sibling first, then
        hard-linked into place, so the entry appears complete or not at all.

        Raises:
            CacheWriteError: If the entry already exists or cannot be written
        """
        path = self.path_for(identifier)
        tmp_path: Path | None = None
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=self.root, prefix=".", suffix=TMP_SUFFIX, delete=False
            ) as fh:
                tmp_path = Path(fh.name)
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            # link fails with FileExistsError instead of replacing an entry
            os.link(tmp_path, path)
        except FileExistsError as e:
            raise CacheWriteError(
                f"Cache entry already exists: {path}", identifier=identifier, path=path
            ) from e
        except OSError as e:
            raise CacheWriteError(
                f"Failed to write cache entry {path}: {e}", identifier=identifier, path=path
            ) from e
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)

    def identifiers(self) -> list[str]:
        """List identifiers of all stored entries, sorted."""
        try:
            names = [p.name for p in self.root.iterdir() if p.is_file()]
        except OSError:
            return []
        found = (identifier_from_filename(name) for name in names)
        return sorted(identifier for identifier in found if identifier is not None)

    def __repr__(self) -> str:
        return f"DiskCacheStore(root={str(self.root)!r})"
