"""Configuration for geolink."""

from geolink.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
