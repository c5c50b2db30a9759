"""Album lookup by title on top of the paginated album listing.

Titles are used as lookup keys even though the Photos Library API allows
several albums with the same title; the first match in listing order wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..cache.base import TTL, AlbumCache, album_cache_key
from ..photos.errors import AlbumNotFoundError, CacheMissError
from ..photos.models import Album
from ..photos.service import MAX_ALBUM_PAGE_SIZE, AlbumService

DEFAULT_CACHE_TTL = 3600.0


class AlbumResolver:
    """Finds, lists and creates albums, remembering resolved albums in a cache."""

    def __init__(
        self,
        service: AlbumService,
        cache: AlbumCache,
        page_size: int = MAX_ALBUM_PAGE_SIZE,
        cache_ttl: TTL = DEFAULT_CACHE_TTL,
    ) -> None:
        """Initialize the resolver.

        Args:
            service: Remote album service
            cache: Cache of resolved albums keyed by album_cache_key(title)
            page_size: Albums requested per listing call
            cache_ttl: Lifetime of cache entries, zero or None for no expiry
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.log = logging.getLogger(__name__)
        self.service = service
        self.cache = cache
        self.page_size = page_size
        self.cache_ttl = cache_ttl

    def iter_album_pages(self) -> Iterator[tuple[Album, ...]]:
        """Yield album pages in listing order.

        Each page is fetched when the previous one has been consumed, so
        closing the generator early stops paging.
        """
        page_token = ""
        while True:
            page = self.service.list_albums(page_size=self.page_size, page_token=page_token)
            self.log.debug("Fetched album page with %d albums", len(page.albums))
            yield page.albums

            # Short pages are not terminal, only a missing token is
            page_token = page.next_page_token
            if not page_token:
                break

    def list_all_albums(self) -> list[Album]:
        """Return every album, draining all pages of the listing.

        Returns:
            Albums in listing order, without deduplication
        """
        all_albums: list[Album] = []
        for albums in self.iter_album_pages():
            all_albums.extend(albums)
        return all_albums

    def find_album(self, title: str) -> Album:
        """Return the album titled exactly ``title``.

        A cached album is returned without asking the service. Otherwise the
        whole listing is scanned and the first exact match is cached.

        Raises:
            AlbumNotFoundError: If no album has this title
        """
        key = album_cache_key(title)
        try:
            album = self.cache.get_album(key)
        except CacheMissError:
            self.log.debug("Cache miss for album %r", title)
        else:
            self.log.debug("Cache hit for album %r", title)
            return album

        for albums in self.iter_album_pages():
            for album in albums:
                if album.title == title:
                    self.cache.put_album(key, album, self.cache_ttl)
                    return album

        raise AlbumNotFoundError(title)

    def create_album(self, title: str) -> Album:
        """Return the album titled ``title``, creating it only if none exists.

        Lookup failures other than AlbumNotFoundError propagate and no album
        is created. The created album is not cached.
        """
        try:
            return self.find_album(title)
        except AlbumNotFoundError:
            pass

        album = self.service.create_album(title)
        self.log.info("Album %r did not exist, created %s", title, album.id)
        return album

    def invalidate_album(self, title: str) -> None:
        """Drop the cached album titled ``title``."""
        self.cache.invalidate_album(album_cache_key(title))
