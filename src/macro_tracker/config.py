"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    ``ENVIRONMENT`` is read without the prefix so it always agrees with the
    env file that was selected.
    """

    environment: str = Field(default=_ENVIRONMENT, validation_alias="ENVIRONMENT")
    log_level: str = "INFO"
    catalog_path: str | None = None
    default_protein_pct: float = 30
    default_carbs_pct: float = 40
    default_fat_pct: float = 30

    model_config = SettingsConfigDict(
        env_prefix="MACRO_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
