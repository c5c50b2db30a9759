"""Google Photos OAuth 2.0 authentication.

This module handles OAuth 2.0 authentication flow for Google Photos API,
including credential storage and token refresh.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from ..core.paths import app_data_dir
from .errors import AuthenticationError

# Albums and media items can only be created with appendonly; since March 2025
# reading back is limited to data created by this application
SCOPES = [
    "https://www.googleapis.com/auth/photoslibrary.appendonly",
    "https://www.googleapis.com/auth/photoslibrary.readonly.appcreateddata",
]

# Token file name (stored in app data directory)
TOKEN_FILE = "google_photos_token.json"


class GooglePhotosAuth:
    """Manages OAuth 2.0 authentication for Google Photos API."""

    def __init__(
        self,
        credentials_path: Path | str,
        token_path: Path | str | None = None,
        scopes: list[str] | None = None,
    ) -> None:
        """Initialize the authentication handler.

        Args:
            credentials_path: Path to the OAuth 2.0 client secrets JSON file
                             (downloaded from Google Cloud Console)
            token_path: Where the authorized user token is stored; defaults
                        to the per-user app data directory
            scopes: OAuth scopes to request, defaults to SCOPES
        """
        self.log = logging.getLogger(__name__)
        self.credentials_path = Path(credentials_path)
        self.token_path = Path(token_path) if token_path else app_data_dir() / TOKEN_FILE
        self.scopes = list(scopes or SCOPES)
        self.credentials: Credentials | None = None

    def authenticate(self) -> Credentials:
        """Authenticate and return credentials.

        Loads existing credentials if available, otherwise starts OAuth flow.
        Automatically refreshes expired tokens.

        Returns:
            Valid OAuth 2.0 credentials

        Raises:
            FileNotFoundError: If the client secrets file is needed but missing
            AuthenticationError: If no valid credentials could be obtained
        """
        if self.token_path.exists():
            try:
                self.credentials = Credentials.from_authorized_user_file(
                    str(self.token_path), self.scopes
                )
                self.log.info("Loaded existing credentials from %s", self.token_path)
            except (OSError, ValueError) as e:
                self.log.warning("Failed to load credentials: %s", e)
                self.credentials = None

        if not self.credentials or not self.credentials.valid:
            if self.credentials and self.credentials.expired and self.credentials.refresh_token:
                try:
                    self.credentials.refresh(Request())
                    self.log.info("Refreshed expired credentials")
                except RefreshError as e:
                    self.log.warning("Failed to refresh credentials: %s", e)
                    self.credentials = None

            if not self.credentials or not self.credentials.valid:
                self._run_oauth_flow()

        if not self.credentials or not self.credentials.valid:
            raise AuthenticationError("Authentication failed: no valid credentials obtained")

        self._save_credentials()
        return self.credentials

    def _run_oauth_flow(self) -> None:
        """Run the OAuth 2.0 flow to obtain new credentials."""
        if not self.credentials_path.exists():
            raise FileNotFoundError(
                f"Credentials file not found: {self.credentials_path}\n"
                "Download an OAuth client (Desktop app) from Google Cloud Console "
                "and point GPHOTOS_CREDENTIALS_PATH at it."
            )
        self.log.info("Starting OAuth 2.0 flow...")
        flow = InstalledAppFlow.from_client_secrets_file(str(self.credentials_path), self.scopes)
        creds = flow.run_local_server(port=0, open_browser=True)
        self.credentials = creds  # type: ignore[assignment]
        self.log.info("OAuth flow completed successfully")

    def _save_credentials(self) -> None:
        """Save credentials to token file."""
        if not self.credentials:
            return

        self.token_path.parent.mkdir(parents=True, exist_ok=True)

        token_data: dict[str, Any] = {
            "token": self.credentials.token,
            "refresh_token": self.credentials.refresh_token,
            "token_uri": self.credentials.token_uri,
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
            "scopes": self.credentials.scopes,
        }

        with self.token_path.open("w") as f:
            json.dump(token_data, f, indent=2)

        self.log.info("Saved credentials to %s", self.token_path)

    def is_authenticated(self) -> bool:
        """Check if valid credentials are available."""
        if not self.credentials:
            return False
        if not self.credentials.valid:
            if self.credentials.expired and self.credentials.refresh_token:
                try:
                    self.credentials.refresh(Request())
                    return True
                except RefreshError:
                    return False
            return False
        return True

    def revoke(self) -> None:
        """Forget credentials and delete the token file."""
        if self.token_path.exists():
            self.token_path.unlink()
            self.log.info("Deleted token file: %s", self.token_path)

        self.credentials = None
