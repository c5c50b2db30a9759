"""Album resolution by title."""

from .resolver import DEFAULT_CACHE_TTL, AlbumResolver

__all__ = ["DEFAULT_CACHE_TTL", "AlbumResolver"]
