"""Configuration for Lodestone."""

from lodestone.config.settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
