# cactus_core_api/config.py
"""
Cactus Core API Configuration — Single source of truth via Pydantic Settings.

Resolution order: CLI argument > env vars (CACTUS_CORE_API_*) > .env file > defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class CactusCoreApiConfig(BaseSettings):
    """Central configuration for the OpenAPI document exporter."""

    model_config = SettingsConfigDict(
        env_prefix="CACTUS_CORE_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Export ---
    output_dir: Path = Field(default_factory=lambda: PACKAGE_DIR / "json" / "generated")

    # --- Logging ---
    log_level: str = "INFO"
    # No log file unless a directory is configured.
    log_dir: Optional[Path] = None


@lru_cache(maxsize=1)
def get_config() -> CactusCoreApiConfig:
    """Return the global config singleton."""
    return CactusCoreApiConfig()
