"""Value records for Photos Library API resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Album:
    """An album as returned by the Photos Library API.

    ``id`` is assigned by the service and is ``None`` for an album that has
    not been created yet.
    """

    title: str
    id: str | None = None
    product_url: str = ""
    media_items_count: int = 0
    cover_photo_base_url: str = ""
    is_writeable: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Album:
        """Build an Album from an API album resource.

        Args:
            data: Album JSON object (``albums[]`` entry or create response)

        Returns:
            Album instance
        """
        return cls(
            title=data.get("title", ""),
            id=data.get("id"),
            product_url=data.get("productUrl", ""),
            # mediaItemsCount is an int64 and therefore serialized as a string
            media_items_count=int(data.get("mediaItemsCount", 0) or 0),
            cover_photo_base_url=data.get("coverPhotoBaseUrl", ""),
            is_writeable=bool(data.get("isWriteable", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the album in the API JSON shape."""
        data: dict[str, Any] = {"title": self.title}
        if self.id is not None:
            data["id"] = self.id
        if self.product_url:
            data["productUrl"] = self.product_url
        if self.media_items_count:
            data["mediaItemsCount"] = str(self.media_items_count)
        if self.cover_photo_base_url:
            data["coverPhotoBaseUrl"] = self.cover_photo_base_url
        if self.is_writeable:
            data["isWriteable"] = True
        return data


@dataclass(frozen=True)
class AlbumPage:
    """One page of an album listing.

    An empty ``next_page_token`` marks the last page.
    """

    albums: tuple[Album, ...]
    next_page_token: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> AlbumPage:
        albums = tuple(Album.from_api(item) for item in data.get("albums", []))
        return cls(albums=albums, next_page_token=data.get("nextPageToken", "") or "")


@dataclass(frozen=True)
class MediaItem:
    """A media item created in the library."""

    id: str
    filename: str = ""
    description: str = ""
    mime_type: str = ""
    product_url: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> MediaItem:
        return cls(
            id=data.get("id", ""),
            filename=data.get("filename", ""),
            description=data.get("description", ""),
            mime_type=data.get("mimeType", ""),
            product_url=data.get("productUrl", ""),
        )
