"""Album cache persisted as JSON files.

Each key is stored in its own document named after the sha1 of the key, so
different keys never touch the same file. Every write goes to its own
temporary file which is then renamed into place, so concurrent writers of the
same key end up with one complete document (last write wins).
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Callable

from ..core.paths import album_cache_dir
from ..photos.errors import CacheBackendError, CacheMissError
from ..photos.models import Album
from .base import TTL, ttl_seconds


class FileAlbumCache:
    """AlbumCache stored on disk under the per-user data directory.

    A ``ttl`` of zero, a negative value or None stores the entry without
    expiry. Expiry uses wall-clock time so it survives restarts.
    """

    def __init__(
        self,
        directory: Path | str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.log = logging.getLogger(__name__)
        self.directory = Path(directory) if directory else album_cache_dir()
        self._clock = clock

    def _entry_path(self, key: str) -> Path:
        digest = hashlib.sha1(key.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.json"

    def get_album(self, key: str) -> Album:
        path = self._entry_path(key)
        try:
            with path.open("r", encoding="utf-8") as f:
                data: dict[str, Any] = json.load(f)
        except FileNotFoundError:
            raise CacheMissError(key) from None
        except (OSError, ValueError) as e:
            raise CacheBackendError(f"Failed to read cache entry {path}: {e}") from e

        if (
            not isinstance(data, dict)
            or data.get("key") != key
            or not isinstance(data.get("album"), dict)
        ):
            raise CacheBackendError(f"Malformed cache entry {path}")

        expires_at = data.get("expires_at")
        if expires_at is not None and (
            isinstance(expires_at, bool) or not isinstance(expires_at, (int, float))
        ):
            raise CacheBackendError(f"Malformed expiry in cache entry {path}")
        if expires_at is not None and expires_at <= self._clock():
            self.log.debug("Cache entry expired: %s", key)
            self.invalidate_album(key)
            raise CacheMissError(key)

        return Album.from_api(data["album"])

    def put_album(self, key: str, album: Album, ttl: TTL) -> None:
        seconds = ttl_seconds(ttl)
        document = {
            "key": key,
            "album": album.to_dict(),
            "expires_at": self._clock() + seconds if seconds else None,
        }
        path = self._entry_path(key)
        temp_name: str | None = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.directory, prefix=f"{path.stem}.", suffix=".tmp", delete=False
            ) as f:
                temp_name = f.name
                json.dump(document, f)
            os.replace(temp_name, path)
            temp_name = None
        except OSError as e:
            raise CacheBackendError(f"Failed to write cache entry {path}: {e}") from e
        finally:
            if temp_name is not None:
                Path(temp_name).unlink(missing_ok=True)

    def invalidate_album(self, key: str) -> None:
        try:
            self._entry_path(key).unlink(missing_ok=True)
        except OSError as e:
            raise CacheBackendError(f"Failed to remove cache entry for {key!r}: {e}") from e

    def clear(self) -> None:
        """Remove every cache document in the directory."""
        if not self.directory.exists():
            return
        for path in self.directory.glob("*.json"):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                raise CacheBackendError(f"Failed to remove cache entry {path}: {e}") from e
