"""
pytest configuration and fixtures for the geolink test suite.

Provides markers, accession fixtures covering every GEO type, and a fixture
for building settings from a controlled environment.
"""

from typing import Dict

import pytest

from geolink.config.settings import Settings
from geolink.core.identifiers import GEOType

# Environment variables read by Settings
GEOLINK_ENV_VARS = (
    "GEOLINK_LOG_LEVEL",
    "GEOLINK_OVER_HTTPS",
    "GEOLINK_WEB_BASE_URL",
    "GEOLINK_FTP_HOST",
)


# ==============================================================================
# Pytest Configuration Hooks
# ==============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# ==============================================================================
# Fixtures
# ==============================================================================


@pytest.fixture
def accession_by_type() -> Dict[GEOType, str]:
    """One lowercase accession per GEO type."""
    return {
        GEOType.DATASETS: "gds5",
        GEOType.SERIES: "gse1234",
        GEOType.PLATFORMS: "gpl9",
        GEOType.SAMPLES: "gsm10",
    }


@pytest.fixture
def clean_env(monkeypatch):
    """Remove geolink variables from the environment."""
    for name in GEOLINK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_settings(clean_env):
    """Build a fresh Settings object from the given environment variables."""

    def _make(**env: str) -> Settings:
        for name, value in env.items():
            clean_env.setenv(name, value)
        return Settings()

    return _make
