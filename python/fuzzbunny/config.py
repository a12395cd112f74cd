"""Runtime configuration for fuzzbunny."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tunables for bulk filtering, read from ``FUZZBUNNY_*`` environment variables."""

    max_workers: int = Field(default=4, ge=1)
    parallel_threshold: int = Field(default=10_000, ge=1)
    chunk_size: int = Field(default=2_048, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = SettingsConfigDict(env_prefix="FUZZBUNNY_", env_file=(), extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
