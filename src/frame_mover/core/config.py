# src/frame_mover/core/config.py
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    App settings (12-factor). Override via env vars, e.g.
      FM_LOG_LEVEL=DEBUG  FM_HASH_CHUNK_SIZE=1048576
    """

    # App
    VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Engine tuning
    HASH_CHUNK_SIZE: int = Field(64 * 1024, ge=4096)
    INDEX_PROGRESS_EVERY: int = Field(50, ge=1)  # indexing events every N files

    # CLI default when neither --dry-run nor --apply is passed
    DRY_RUN_DEFAULT: bool = False

    model_config = SettingsConfigDict(
        env_prefix="FM_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    FastAPI-friendly cached getter. Use Depends(get_settings) where needed.
    """
    return Settings()
