"""Configuration management for shopflow."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopflow.application.order_processor import DEFAULT_PROCESSED_STATUS


class Settings(BaseSettings):
    """Settings loaded from ``SHOPFLOW_*`` environment variables."""

    # Status text emitted once an order has been processed
    PROCESSED_STATUS: str = DEFAULT_PROCESSED_STATUS

    # Output
    REPORTER: Literal["console", "log"] = "console"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    @field_validator("PROCESSED_STATUS")
    @classmethod
    def validate_processed_status(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("PROCESSED_STATUS must not be empty")
        return v.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL {v!r}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="SHOPFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
