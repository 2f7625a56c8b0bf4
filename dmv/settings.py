"""
dmv.settings
============

Configuration settings for the dmv package.

Fee amounts, the antique-plate age threshold and the minimum age for the
written test live here so a facility's rules can be tuned without code
changes.  Every value can be overridden via an environment variable
carrying the ``DMV_`` prefix (e.g. ``DMV_EV_FEE=250``) or a ``.env`` file.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pydantic model for facility rules, loaded from environment variables."""

    # Plate classification
    antique_age_years: int = Field(
        25, ge=0, description="Minimum vehicle age in years for an antique plate"
    )

    # Registration fee schedule (whole dollars)
    antique_fee: int = Field(25, ge=0, description="Fee for an antique-plate vehicle")
    ev_fee: int = Field(200, ge=0, description="Fee for an electric vehicle")
    regular_fee: int = Field(100, ge=0, description="Fee for every other vehicle")

    # Licensing
    written_test_min_age: int = Field(
        16, ge=0, description="Minimum registrant age for the written test"
    )

    model_config = SettingsConfigDict(
        env_prefix="DMV_",
        env_file=".env",  # load from .env file if present
        case_sensitive=False,
    )


# Initialize settings
settings = Settings()
