"""Album cache contract.

Backends store Album snapshots under already-namespaced keys. A missing or
expired entry is reported with CacheMissError; any other exception is a
backend failure and must not be treated as a miss.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

from ..photos.models import Album

ALBUM_KEY_PREFIX = "album:"

# TTL value stored for entries that never expire
NO_EXPIRY = 0.0

TTL = timedelta | float | int | None


def album_cache_key(title: str) -> str:
    """Return the cache key of the album titled ``title``."""
    return ALBUM_KEY_PREFIX + title


def ttl_seconds(ttl: TTL) -> float:
    """Normalize a TTL to seconds; zero or less means the entry never expires."""
    if ttl is None:
        return NO_EXPIRY
    if isinstance(ttl, timedelta):
        seconds = ttl.total_seconds()
    else:
        seconds = float(ttl)
    return seconds if seconds > 0 else NO_EXPIRY


class AlbumCache(Protocol):
    def get_album(self, key: str) -> Album:
        """Return the cached album, raising CacheMissError if absent or expired."""
        ...

    def put_album(self, key: str, album: Album, ttl: TTL) -> None:
        """Store or overwrite the entry for ``key``."""
        ...

    def invalidate_album(self, key: str) -> None:
        """Remove the entry for ``key``; absent keys are ignored."""
        ...
