"""Configuration: process settings and parameter store hydration."""

from .settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
