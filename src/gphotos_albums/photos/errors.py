"""Exceptions raised by the album client.

Remote failures are not represented here: transport and HTTP errors from the
Photos Library API surface as the unwrapped ``requests`` exceptions.
"""

from __future__ import annotations


class GalleryError(Exception):
    """Base exception for the album client."""


class AlbumNotFoundError(GalleryError):
    """Raised when no album with the requested title exists."""

    def __init__(self, title: str) -> None:
        super().__init__(f"album not found: {title!r}")
        self.title = title


class CacheMissError(GalleryError):
    """Raised by a cache backend when a key is absent or expired."""

    def __init__(self, key: str) -> None:
        super().__init__(f"cache miss: {key!r}")
        self.key = key


class CacheBackendError(GalleryError):
    """Raised when the cache backend itself fails."""


class MediaItemCreationError(GalleryError):
    """Raised when the API rejects a new media item."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(f"media item creation failed: {message} (code={code})")
        self.message = message
        self.code = code


class AuthenticationError(GalleryError):
    """Raised when credentials are missing, invalid or cannot be refreshed."""


class ConfigError(GalleryError):
    """Raised when a configuration value is invalid."""
