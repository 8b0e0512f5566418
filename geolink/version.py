"""Version information for geolink."""

__version__ = "0.3.0"
