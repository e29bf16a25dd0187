"""Application configuration using pydantic-settings.

Every setting can be overridden with a ``FRANCHISES_``-prefixed
environment variable or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "franchises.json"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="FRANCHISES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Document store: a JSON file on disk, or a dict that lives as long as the process
    store: Literal["json", "memory"] = "json"
    data_file: Path = _DEFAULT_DATA_FILE

    # Logging
    log_level: str = "INFO"
    debug: bool = False  # human-readable logs instead of JSON lines

    # HTTP
    api_title: str = "Franchises API"
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: str = "*"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
