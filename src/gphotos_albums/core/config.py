"""Client configuration loaded from the environment.

Values are read from ``GPHOTOS_*`` environment variables; a ``.env`` file in
the working directory is honoured through python-dotenv.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from ..photos.auth import TOKEN_FILE
from ..photos.errors import ConfigError
from ..photos.service import MAX_ALBUM_PAGE_SIZE
from .paths import album_cache_dir, app_data_dir

DEFAULT_CACHE_TTL_SECONDS = 3600.0
DEFAULT_TIMEOUT_SECONDS = 30.0
CACHE_BACKENDS = ("memory", "file")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class ClientConfig:
    credentials_path: Path
    token_path: Path
    page_size: int = MAX_ALBUM_PAGE_SIZE
    cache_ttl: float = DEFAULT_CACHE_TTL_SECONDS
    cache_backend: str = "memory"
    cache_dir: Path | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    debug: bool = False
    log_level: str = "INFO"
    serialize_creates: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.page_size <= MAX_ALBUM_PAGE_SIZE:
            raise ConfigError(
                f"page size must be between 1 and {MAX_ALBUM_PAGE_SIZE}, got {self.page_size}"
            )
        if self.cache_backend not in CACHE_BACKENDS:
            raise ConfigError(
                f"cache backend must be one of {', '.join(CACHE_BACKENDS)}, got {self.cache_backend!r}"
            )
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, dotenv: bool = True) -> ClientConfig:
        """Build a configuration from ``GPHOTOS_*`` environment variables.

        Args:
            dotenv: If True, load a ``.env`` file first (existing variables win)

        Returns:
            Validated configuration

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        token_env = os.getenv("GPHOTOS_TOKEN_PATH")
        cache_dir_env = os.getenv("GPHOTOS_CACHE_DIR")
        return cls(
            credentials_path=Path(os.getenv("GPHOTOS_CREDENTIALS_PATH", "credentials.json")),
            token_path=Path(token_env) if token_env else app_data_dir() / TOKEN_FILE,
            page_size=_env_int("GPHOTOS_PAGE_SIZE", MAX_ALBUM_PAGE_SIZE),
            cache_ttl=_env_float("GPHOTOS_CACHE_TTL", DEFAULT_CACHE_TTL_SECONDS),
            cache_backend=os.getenv("GPHOTOS_CACHE_BACKEND", "memory").strip().lower(),
            cache_dir=Path(cache_dir_env) if cache_dir_env else album_cache_dir(),
            timeout=_env_float("GPHOTOS_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
            debug=_env_bool("GPHOTOS_DEBUG"),
            log_level=os.getenv("GPHOTOS_LOG_LEVEL", "INFO").strip().upper(),
            serialize_creates=_env_bool("GPHOTOS_SERIALIZE_CREATES"),
        )


def configure_logging(level: str | int = "INFO") -> None:
    """Install a basic stream handler on the root logger."""
    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
