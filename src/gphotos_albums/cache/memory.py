"""In-process album cache with per-entry expiry."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from ..photos.errors import CacheMissError
from ..photos.models import Album
from .base import TTL, ttl_seconds


class MemoryAlbumCache:
    """AlbumCache kept in a dictionary.

    A ``ttl`` of zero, a negative value or None stores the entry without
    expiry. Expired entries are dropped when read. Safe to share between
    threads; concurrent writes to the same key are last-write-wins.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.log = logging.getLogger(__name__)
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[Album, float | None]] = {}

    def get_album(self, key: str) -> Album:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                raise CacheMissError(key)
            album, expires_at = entry
            if expires_at is not None and expires_at <= self._clock():
                del self._entries[key]
                self.log.debug("Cache entry expired: %s", key)
                raise CacheMissError(key)
            return album

    def put_album(self, key: str, album: Album, ttl: TTL) -> None:
        seconds = ttl_seconds(ttl)
        expires_at = self._clock() + seconds if seconds else None
        with self._lock:
            self._entries[key] = (album, expires_at)

    def invalidate_album(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(
                1 for _, expires_at in self._entries.values()
                if expires_at is None or expires_at > now
            )
