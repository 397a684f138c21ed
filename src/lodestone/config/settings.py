"""Pydantic Settings for Lodestone configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lodestone.loaders.fabric import FABRIC_META_URL


class Settings(BaseSettings):
    """Application settings with support for env vars and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, alias="DEBUG_MODE")
    fabric_meta_url: str = Field(
        default=FABRIC_META_URL,
        alias="FABRIC_META_URL",
        description="Where collaborators fetch the Fabric version catalog from",
    )


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
