"""Google Photos Library API integration.

This package provides modules for authenticating with the Google Photos
Library API and calling its album and media item endpoints using the
requests library.
"""

from .auth import GooglePhotosAuth
from .errors import (
    AlbumNotFoundError,
    AuthenticationError,
    CacheBackendError,
    CacheMissError,
    ConfigError,
    GalleryError,
    MediaItemCreationError,
)
from .models import Album, AlbumPage, MediaItem
from .service import AlbumService, PhotosLibraryService

__all__ = [
    "Album",
    "AlbumNotFoundError",
    "AlbumPage",
    "AlbumService",
    "AuthenticationError",
    "CacheBackendError",
    "CacheMissError",
    "ConfigError",
    "GalleryError",
    "GooglePhotosAuth",
    "MediaItem",
    "MediaItemCreationError",
    "PhotosLibraryService",
]
