from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration for platformfit.

    All settings are loaded from environment variables with the
    `PLATFORMFIT_` prefix and optional `.env` support.

    The geometry engine itself takes explicit arguments; these settings
    only feed the CLI and `build_registry`.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLATFORMFIT_",
        env_file=".env",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Platform catalog
    # ------------------------------------------------------------------
    catalog_path: str | None = Field(
        default=None,
        description="Optional JSON catalog merged over the bundled platforms.",
    )

    # ------------------------------------------------------------------
    # Cropping / export
    # ------------------------------------------------------------------
    default_strategy: str = Field(
        default="smart",
        description="Crop strategy used when none is given: center, focus, or smart.",
    )
    default_quality: int = Field(
        default=90,
        ge=0,
        le=100,
        description="Encoder quality (0-100) recorded on export configs.",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    def to_public_dict(self) -> dict:
        """Return the resolved settings for CLI display."""
        return {
            "catalog_path": self.catalog_path,
            "default_strategy": self.default_strategy,
            "default_quality": self.default_quality,
            "log_level": self.log_level,
        }
