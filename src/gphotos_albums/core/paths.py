"""Application paths and version lookup.

This module provides functions for accessing:
- Per-user application data directory (for the OAuth token and album cache)
- The installed package version, with a source-tree fallback

The module uses platformdirs to determine platform-appropriate paths
for application data.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from platformdirs import user_data_dir

# Application metadata constants
APP_NAME = "gphotos-albums"
APP_ORG = "gphotos-albums"
_DEFAULT_VERSION = "0.1.0"  # Fallback version if unable to determine


def app_version() -> str:
    """Get the application version.

    Tries multiple approaches:
    1. importlib.metadata.version() (works when installed)
    2. Reading pyproject.toml from source tree (development mode)
    3. Returns default version as fallback

    Returns:
        Version string (e.g., "0.1.0")
    """
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        pass

    try:
        # Navigate from src/gphotos_albums/core/paths.py to project root
        project_root = Path(__file__).parent.parent.parent.parent
        pyproject_path = project_root / "pyproject.toml"
        if pyproject_path.exists():
            import tomllib

            with pyproject_path.open("rb") as f:
                data = tomllib.load(f)
                if "project" in data and "version" in data["project"]:
                    return data["project"]["version"]
    except (OSError, ValueError) as e:
        log = logging.getLogger(__name__)
        log.debug("Could not read version from pyproject.toml: %s", e)

    return _DEFAULT_VERSION


def app_data_dir() -> Path:
    """Return a per-user app data directory for the token and cache."""
    return Path(user_data_dir(appname=APP_NAME, appauthor=APP_ORG, roaming=True))


def album_cache_dir() -> Path:
    """Return the default directory of the file-backed album cache."""
    return app_data_dir() / "cache" / "albums"
