"""Album cache contract and backends."""

from .base import ALBUM_KEY_PREFIX, NO_EXPIRY, AlbumCache, album_cache_key, ttl_seconds
from .file import FileAlbumCache
from .memory import MemoryAlbumCache

__all__ = [
    "ALBUM_KEY_PREFIX",
    "NO_EXPIRY",
    "AlbumCache",
    "FileAlbumCache",
    "MemoryAlbumCache",
    "album_cache_key",
    "ttl_seconds",
]
