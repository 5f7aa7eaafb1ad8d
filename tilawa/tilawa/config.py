"""
Configuration management for Tilawa library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the TILAWA_ prefix.
"""

import logging
from typing import Literal
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TilawaSettings(BaseSettings):
    """
    Configuration settings for Tilawa library.

    The scoring formulas themselves are fixed; these settings only tune
    how the host-side session reports and looks things up.

    Example:
        export TILAWA_ACCURACY_TARGET="90"
        export TILAWA_VERSES_CSV="data/quran_abjad.csv"
    """

    model_config = SettingsConfigDict(
        env_prefix="TILAWA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Scoring Thresholds ============

    accuracy_target: int = Field(
        default=85,
        description="Accuracy percentage below which a recitation is reported as weak",
        ge=0,
        le=100,
    )

    abjad_tolerance: int = Field(
        default=5,
        description="Allowed difference between expected and recited Abjad values",
        ge=0,
    )

    # ============ Verse Data ============

    verses_csv: Path | None = Field(
        default=None,
        description="CSV file with verse texts (surah_number, ayah_number, arabic_text, ...)",
    )

    # ============ Session Settings ============

    recent_limit: int = Field(
        default=5,
        description="Number of recent recitations returned for a user",
        ge=1,
        le=100,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level used by configure_logging()",
    )

    # ============ Validators ============

    @field_validator("verses_csv", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects; empty strings mean unset."""
        if isinstance(v, str):
            return Path(v) if v else None
        return v


# Default settings instance
_default_settings: TilawaSettings | None = None


def get_settings() -> TilawaSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        TilawaSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = TilawaSettings()
    return _default_settings


def configure(**kwargs) -> TilawaSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        TilawaSettings: The new settings instance
    """
    global _default_settings
    _default_settings = TilawaSettings(**kwargs)
    return _default_settings


def configure_logging(settings: TilawaSettings | None = None) -> None:
    """
    Configure the ``tilawa`` logger hierarchy from settings.

    Library modules only create loggers; this is for scripts and hosts
    that want readable output without their own logging setup.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("tilawa").setLevel(settings.log_level)
