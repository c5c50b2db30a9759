"""Shared fixtures: an in-memory album service and a recording cache."""

from __future__ import annotations

import pytest
import requests

from gphotos_albums.cache.memory import MemoryAlbumCache
from gphotos_albums.photos.models import Album, AlbumPage, MediaItem


class FakeAlbumService:
    """AlbumService over an ordered list of albums.

    Pages are slices of the gallery; the page token is the offset of the next
    slice. ``max_per_page`` makes pages shorter than the requested size while
    more pages remain.
    """

    def __init__(self, titles: list[str] | None = None, max_per_page: int | None = None) -> None:
        self.gallery: list[Album] = [
            Album(title=title, id=f"id-{i}") for i, title in enumerate(titles or [], start=1)
        ]
        self.max_per_page = max_per_page
        self.list_calls: list[tuple[int, str]] = []
        self.create_calls: list[str] = []
        self.media_calls: list[dict[str, object]] = []
        self.list_error: Exception | None = None
        self.failing_titles: set[str] = {"should-fail"}
        self.closed = False

    def list_albums(self, page_size: int, page_token: str = "") -> AlbumPage:
        self.list_calls.append((page_size, page_token))
        if self.list_error is not None:
            raise self.list_error
        start = int(page_token) if page_token else 0
        size = min(page_size, self.max_per_page) if self.max_per_page else page_size
        end = start + size
        next_token = str(end) if end < len(self.gallery) else ""
        return AlbumPage(albums=tuple(self.gallery[start:end]), next_page_token=next_token)

    def create_album(self, title: str) -> Album:
        self.create_calls.append(title)
        if title in self.failing_titles:
            raise requests.HTTPError("400 Client Error: album creation failure")
        album = Album(title=title, id=f"created-{len(self.create_calls)}")
        self.gallery.append(album)
        return album

    def batch_create_media_items(
        self,
        upload_token: str,
        album_id: str | None = None,
        file_name: str = "",
        description: str = "",
    ) -> MediaItem:
        self.media_calls.append(
            {
                "upload_token": upload_token,
                "album_id": album_id,
                "file_name": file_name,
                "description": description,
            }
        )
        return MediaItem(id=f"media-{len(self.media_calls)}", filename=file_name, description=description)

    def close(self) -> None:
        self.closed = True


class RecordingCache(MemoryAlbumCache):
    """MemoryAlbumCache that records the keys it was asked for."""

    def __init__(self) -> None:
        super().__init__()
        self.gets: list[str] = []
        self.puts: list[str] = []

    def get_album(self, key: str) -> Album:
        self.gets.append(key)
        return super().get_album(key)

    def put_album(self, key, album, ttl) -> None:
        self.puts.append(key)
        super().put_album(key, album, ttl)


def album_titles(n: int) -> list[str]:
    return [f"album-{i}" for i in range(1, n + 1)]


@pytest.fixture
def service() -> FakeAlbumService:
    return FakeAlbumService()


@pytest.fixture
def cache() -> RecordingCache:
    return RecordingCache()
