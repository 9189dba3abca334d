"""Configuration management for Vendor Barcodes."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict


class BarcodeRuleSettings(BaseSettings):
    """Limits applied by business-rule validation."""

    model_config = SettingsConfigDict(
        env_prefix="BARCODE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_prefix_length: int = 10
    max_name_length: int = 20
    max_price: float = 999999.99
    # Allowed drift between barcode price and catalog price
    price_tolerance: float = 0.01


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    @property
    def barcode(self) -> BarcodeRuleSettings:
        """Get barcode business-rule settings."""
        return BarcodeRuleSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def _stderr_logger(*args) -> structlog.PrintLogger:
    # Looked up per logger so a redirected sys.stderr is honoured
    return structlog.PrintLogger(sys.stderr)


def configure_logging(log_level: str | None = None) -> None:
    """Configure structlog to write to stderr, dropping events below the given level.

    Args:
        log_level: Level name such as ``"DEBUG"``. If None, uses LOG_LEVEL.
    """
    level_name = (log_level or get_settings().log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
