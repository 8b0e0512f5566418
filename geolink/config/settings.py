"""
Application settings and configuration.

This module centralizes the few knobs geolink exposes: the log level, the
default transport for the GEO FTP site, and the hosts URLs are built on.
Values come from the environment, optionally populated from a ``.env`` file.
"""

import os
from typing import Any, Dict

from dotenv import load_dotenv

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """
    Application settings with environment variable support.

    Attributes are read once at construction; the instance is not mutated
    afterwards.
    """

    def __init__(self):
        """Initialize application settings."""
        load_dotenv()

        # Logging settings
        self.LOG_LEVEL = os.environ.get("GEOLINK_LOG_LEVEL", "WARNING").upper()

        # Plain FTP to ftp.ncbi.nlm.nih.gov is frequently blocked, so HTTPS is the default
        self.OVER_HTTPS = (
            os.environ.get("GEOLINK_OVER_HTTPS", "true").lower() == "true"
        )

        # Hosts
        self.WEB_BASE_URL = os.environ.get(
            "GEOLINK_WEB_BASE_URL", "https://www.ncbi.nlm.nih.gov"
        ).rstrip("/")
        self.FTP_HOST = os.environ.get("GEOLINK_FTP_HOST", "ftp.ncbi.nlm.nih.gov")

        # Store the error instead of raising so imports never fail on bad env
        is_valid, error_msg = self.validate_configuration()
        self._config_error = None if is_valid else error_msg

    def get_all_settings(self) -> Dict[str, Any]:
        """
        Get all settings as a dictionary.

        Returns:
            dict: All settings
        """
        settings_dict = {}
        for attr in dir(self):
            if not attr.startswith("_") and not callable(getattr(self, attr)):
                settings_dict[attr] = getattr(self, attr)
        return settings_dict

    def get_setting(self, name: str, default: Any = None) -> Any:
        """
        Get a specific setting.

        Args:
            name: Setting name
            default: Default value if setting doesn't exist

        Returns:
            Setting value or default
        """
        return getattr(self, name, default)

    def validate_configuration(self) -> tuple:
        """
        Validate the configured values.

        Returns:
            tuple: (is_valid: bool, error_message: str)
        """
        if self.LOG_LEVEL not in _LOG_LEVELS:
            return False, (
                f"GEOLINK_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                f"got '{self.LOG_LEVEL}'"
            )
        if not self.FTP_HOST:
            return False, "GEOLINK_FTP_HOST must not be empty"
        return True, ""

    @property
    def config_error(self):
        """Error message from validation, or None if the settings are usable."""
        return self._config_error


# Create singleton instance
settings = Settings()


def get_settings() -> Settings:
    """
    Get the application settings.

    Returns:
        Settings: Application settings
    """
    return settings
