"""
Application configuration.

Values are read once at startup and passed down explicitly (database URL for the settings store,
base URL under which the sprite folders are served, log level).
"""

import os
from dataclasses import dataclass
from typing import Mapping, Self

ENV_PREFIX = "CHESSWIDGET_"

DEFAULT_DATABASE_URL = "sqlite:///chesswidget.db"
DEFAULT_ASSET_BASE_URL = "/static/"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class AppConfig:
    database_url: str = DEFAULT_DATABASE_URL
    asset_base_url: str = DEFAULT_ASSET_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Read CHESSWIDGET_* variables, falling back to the defaults for anything unset."""
        if environ is None:
            environ = os.environ
        return cls(
            database_url=environ.get(
                f"{ENV_PREFIX}DATABASE_URL", DEFAULT_DATABASE_URL
            ),
            asset_base_url=environ.get(
                f"{ENV_PREFIX}ASSET_BASE_URL", DEFAULT_ASSET_BASE_URL
            ),
            log_level=environ.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
