"""Find-or-create albums in Google Photos.

The GalleryClient resolves albums by title through a cache and the paginated
album listing of the Photos Library API, creates albums only when no album
with the title exists, and adds uploaded media to the library or an album.
"""

from .albums.resolver import AlbumResolver
from .cache import FileAlbumCache, MemoryAlbumCache, album_cache_key
from .client import GalleryClient
from .core.config import ClientConfig
from .core.paths import app_version
from .photos import (
    Album,
    AlbumNotFoundError,
    AlbumPage,
    AuthenticationError,
    CacheBackendError,
    CacheMissError,
    ConfigError,
    GalleryError,
    GooglePhotosAuth,
    MediaItem,
    MediaItemCreationError,
    PhotosLibraryService,
)

__version__ = app_version()

__all__ = [
    "__version__",
    "Album",
    "AlbumNotFoundError",
    "AlbumPage",
    "AlbumResolver",
    "AuthenticationError",
    "CacheBackendError",
    "CacheMissError",
    "ClientConfig",
    "ConfigError",
    "FileAlbumCache",
    "GalleryClient",
    "GalleryError",
    "GooglePhotosAuth",
    "MediaItem",
    "MediaItemCreationError",
    "MemoryAlbumCache",
    "PhotosLibraryService",
    "album_cache_key",
]
