# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for cache, extraction, context and logging settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Cache ===
    cache_ttl_seconds: float = 300.0

    # === Extraction ===
    content_algorithm: Literal["readability", "none"] = "readability"
    readability_min_text_length: int = 140

    # Dynamic content wait
    content_wait_timeout: float = 5.0
    content_wait_interval: float = 0.1
    content_min_text_length: int = 500
    content_min_paragraphs: int = 3

    # === Context ===
    context_mode: Literal["economic", "standard", "precise"] = "standard"
    sufficient_min_length: int = 100
    sufficient_min_paragraphs: int = 2

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("cache_ttl_seconds", "content_wait_timeout", "content_wait_interval")
    @classmethod
    def validate_positive(cls, v: float) -> float:  # noqa: N805
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    @field_validator(
        "readability_min_text_length",
        "content_min_text_length",
        "content_min_paragraphs",
        "sufficient_min_length",
        "sufficient_min_paragraphs",
    )
    @classmethod
    def validate_non_negative(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.content_wait_interval >= self.content_wait_timeout:
            errors.append("CONTENT_WAIT_INTERVAL must be < CONTENT_WAIT_TIMEOUT")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-call config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
