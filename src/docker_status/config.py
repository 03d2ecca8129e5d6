"""Application configuration via environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docker_status.constants import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT


class Settings(BaseSettings):
    host: str = DEFAULT_HOST
    # Plain PORT is honoured so existing deployments keep working
    port: int = Field(
        default=DEFAULT_PORT,
        validation_alias=AliasChoices("DOCKER_STATUS_PORT", "PORT", "port"),
    )
    docker_host: str | None = None  # None -> DOCKER_HOST / local socket
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = SettingsConfigDict(
        env_prefix="DOCKER_STATUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the global Settings (resolved once, cached)."""
    return Settings()
