"""Photos Library API album service using requests.

This module defines the remote album service contract used by the album
resolver and provides its implementation over the Photos Library REST API.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials

from .errors import AuthenticationError, MediaItemCreationError
from .models import Album, AlbumPage, MediaItem

# Google Photos API base URL
API_BASE_URL = "https://photoslibrary.googleapis.com/v1"

# Maximum pageSize accepted by albums.list
MAX_ALBUM_PAGE_SIZE = 50


def _api_error_message(response: requests.Response | None) -> str:
    """Extract ``error.message`` from a Google API error body, if any."""
    if response is None:
        return ""
    try:
        body = response.json()
    except ValueError:
        return ""
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return str(error.get("message", ""))
    return ""


class AlbumService(Protocol):
    """Remote operations the album resolver and client depend on."""

    def list_albums(self, page_size: int, page_token: str = "") -> AlbumPage:
        """Return one page of albums; an empty next_page_token ends the listing."""
        ...

    def create_album(self, title: str) -> Album:
        """Create an album, regardless of whether the title already exists."""
        ...

    def batch_create_media_items(
        self,
        upload_token: str,
        album_id: str | None = None,
        file_name: str = "",
        description: str = "",
    ) -> MediaItem:
        """Turn an upload token into a media item, optionally inside an album."""
        ...


class PhotosLibraryService:
    """AlbumService backed by the Photos Library REST API."""

    def __init__(
        self,
        credentials: Credentials,
        timeout: float = 30.0,
        debug: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the API service.

        Args:
            credentials: OAuth 2.0 credentials from GooglePhotosAuth
            timeout: Seconds before a request is abandoned with requests.Timeout
            debug: If True, log detailed API request/response information
            session: HTTP session to use, a new one is created by default
        """
        self.log = logging.getLogger(__name__)
        self.credentials = credentials
        self.timeout = timeout
        self.debug = debug
        self.session = session or requests.Session()
        self._update_session_auth()

    def __enter__(self) -> PhotosLibraryService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def _update_session_auth(self) -> None:
        """Update session with current credentials."""
        if not self.credentials.valid:
            if self.credentials.expired and self.credentials.refresh_token:
                try:
                    self.credentials.refresh(Request())
                except RefreshError as e:
                    raise AuthenticationError(f"Failed to refresh credentials: {e}") from e
            else:
                raise AuthenticationError("Credentials are invalid and cannot be refreshed")

        self.session.headers.update(
            {"Authorization": f"Bearer {self.credentials.token}"}
        )

    def _request(
        self, method: str, endpoint: str, params: dict[str, Any] | None = None, json_data: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Make an API request and return JSON response.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            params: Query parameters
            json_data: JSON body data

        Returns:
            JSON response as dictionary

        Raises:
            requests.RequestException: If the request fails
            AuthenticationError: If the credentials cannot be refreshed
        """
        url = f"{API_BASE_URL}/{endpoint.lstrip('/')}"

        self._update_session_auth()

        if self.debug:
            self.log.info("API Request: %s %s params=%s body=%s", method, url, params, json_data)

        try:
            response = self.session.request(
                method=method, url=url, params=params, json=json_data, timeout=self.timeout
            )
            response.raise_for_status()
            response_json = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            detail = _api_error_message(e.response)
            if status == 403:
                # Albums outside the app-created scope are reported as 403 too
                self.log.error(
                    "API request forbidden (403): %s %s: %s. Check that the Photos Library API is "
                    "enabled and the appendonly scope was granted.",
                    method,
                    url,
                    detail or e,
                )
            else:
                self.log.error("API request failed: %s %s - %s", method, url, detail or e)
            raise
        except requests.RequestException as e:
            self.log.error("API request failed: %s %s - %s", method, url, e)
            raise

        if self.debug:
            self.log.info("API Response: %s %s -> %s", method, url, response.status_code)
        return response_json

    # Albums Methods

    def list_albums(self, page_size: int = MAX_ALBUM_PAGE_SIZE, page_token: str = "") -> AlbumPage:
        """List one page of albums.

        Args:
            page_size: Maximum number of albums to return (max 50)
            page_token: Token from the previous page, empty for the first one

        Returns:
            Page of albums and the token of the next page
        """
        params: dict[str, Any] = {"pageSize": min(page_size, MAX_ALBUM_PAGE_SIZE)}
        if page_token:
            params["pageToken"] = page_token

        return AlbumPage.from_api(self._request("GET", "albums", params=params))

    def create_album(self, title: str) -> Album:
        """Create a new album.

        Args:
            title: Album title; the API does not require titles to be unique

        Returns:
            The created album
        """
        response = self._request("POST", "albums", json_data={"album": {"title": title}})
        album = Album.from_api(response)
        self.log.info("Created album %r (%s)", album.title, album.id)
        return album

    # Media Items Methods

    def batch_create_media_items(
        self,
        upload_token: str,
        album_id: str | None = None,
        file_name: str = "",
        description: str = "",
    ) -> MediaItem:
        """Create a media item from an upload token.

        Args:
            upload_token: Token returned by the bytes upload endpoint
            album_id: Album to add the item to, library only if None
            file_name: File name shown in Google Photos
            description: Item description

        Returns:
            The created media item

        Raises:
            MediaItemCreationError: If the API rejects the item
        """
        simple_item: dict[str, Any] = {"uploadToken": upload_token}
        if file_name:
            simple_item["fileName"] = file_name
        new_item: dict[str, Any] = {"simpleMediaItem": simple_item}
        if description:
            new_item["description"] = description

        request_body: dict[str, Any] = {"newMediaItems": [new_item]}
        if album_id:
            request_body["albumId"] = album_id

        response = self._request("POST", "mediaItems:batchCreate", json_data=request_body)
        results = response.get("newMediaItemResults", [])
        if not results:
            raise MediaItemCreationError("empty response")

        result = results[0]
        status = result.get("status", {})
        code = status.get("code", 0)
        if code:
            raise MediaItemCreationError(status.get("message", ""), code)
        return MediaItem.from_api(result.get("mediaItem", {}))
