"""Gallery client facade.

This module provides the public entry point combining album resolution with
the media item endpoints of the Photos Library API.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from .albums.resolver import DEFAULT_CACHE_TTL, AlbumResolver
from .cache.base import TTL, AlbumCache
from .cache.file import FileAlbumCache
from .cache.memory import MemoryAlbumCache
from .core.config import ClientConfig
from .photos.auth import GooglePhotosAuth
from .photos.models import Album, MediaItem
from .photos.service import MAX_ALBUM_PAGE_SIZE, AlbumService, PhotosLibraryService


class GalleryClient:
    """Finds, lists and creates albums and adds uploaded media to them."""

    def __init__(
        self,
        service: AlbumService,
        cache: AlbumCache | None = None,
        page_size: int = MAX_ALBUM_PAGE_SIZE,
        cache_ttl: TTL = DEFAULT_CACHE_TTL,
        serialize_creates: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            service: Remote album service, usually a PhotosLibraryService
            cache: Album cache, an in-memory cache by default
            page_size: Albums requested per listing call
            cache_ttl: Lifetime of cached albums, zero or None for no expiry
            serialize_creates: If True, concurrent create_album calls for the
                               same title run one at a time, so only the first
                               one creates the album
        """
        self.log = logging.getLogger(__name__)
        self.service = service
        self.cache = cache if cache is not None else MemoryAlbumCache()
        self.resolver = AlbumResolver(service, self.cache, page_size=page_size, cache_ttl=cache_ttl)
        self.serialize_creates = serialize_creates
        self._create_locks: dict[str, tuple[threading.Lock, int]] = {}
        self._create_locks_guard = threading.Lock()

    @classmethod
    def from_config(cls, config: ClientConfig) -> GalleryClient:
        """Authenticate and build a client from configuration.

        Raises:
            FileNotFoundError: If the OAuth client secrets file is missing
            AuthenticationError: If no valid credentials can be obtained
        """
        auth = GooglePhotosAuth(config.credentials_path, token_path=config.token_path)
        credentials = auth.authenticate()
        service = PhotosLibraryService(credentials, timeout=config.timeout, debug=config.debug)

        cache: AlbumCache
        if config.cache_backend == "file":
            cache = FileAlbumCache(config.cache_dir)
        else:
            cache = MemoryAlbumCache()

        return cls(
            service,
            cache=cache,
            page_size=config.page_size,
            cache_ttl=config.cache_ttl,
            serialize_creates=config.serialize_creates,
        )

    def __enter__(self) -> GalleryClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self.service, "close", None)
        if close is not None:
            close()

    # Albums

    def list_albums(self) -> list[Album]:
        """Return all albums in listing order."""
        return self.resolver.list_all_albums()

    def iter_albums(self) -> Iterator[Album]:
        """Yield albums one by one, fetching pages as they are needed."""
        for albums in self.resolver.iter_album_pages():
            yield from albums

    def find_album(self, title: str) -> Album:
        """Return the album titled ``title``.

        Raises:
            AlbumNotFoundError: If no album has this title
        """
        return self.resolver.find_album(title)

    def create_album(self, title: str) -> Album:
        """Return the album titled ``title``, creating it if it does not exist."""
        if not self.serialize_creates:
            return self.resolver.create_album(title)

        lock = self._acquire_create_lock(title)
        try:
            with lock:
                return self.resolver.create_album(title)
        finally:
            self._release_create_lock(title)

    def invalidate_album(self, title: str) -> None:
        """Forget the cached album titled ``title``."""
        self.resolver.invalidate_album(title)

    def _acquire_create_lock(self, title: str) -> threading.Lock:
        with self._create_locks_guard:
            lock, users = self._create_locks.get(title, (threading.Lock(), 0))
            self._create_locks[title] = (lock, users + 1)
            return lock

    def _release_create_lock(self, title: str) -> None:
        with self._create_locks_guard:
            lock, users = self._create_locks[title]
            if users <= 1:
                del self._create_locks[title]
            else:
                self._create_locks[title] = (lock, users - 1)

    # Media Items

    def add_media_to_library(self, upload_token: str, file_name: str = "", description: str = "") -> MediaItem:
        """Create a library media item from an upload token."""
        return self.service.batch_create_media_items(
            upload_token, file_name=file_name, description=description
        )

    def add_media_to_album(
        self, upload_token: str, album_id: str, file_name: str = "", description: str = ""
    ) -> MediaItem:
        """Create a media item from an upload token inside the album ``album_id``."""
        return self.service.batch_create_media_items(
            upload_token, album_id=album_id, file_name=file_name, description=description
        )
