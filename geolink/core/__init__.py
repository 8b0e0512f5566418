"""
geolink core module with the exception hierarchy, identifiers and schemas.
"""

from geolink.core.exceptions import (
    GEOInputError,
    GEOLinkError,
    GEOParseError,
)

__all__ = ["GEOInputError", "GEOLinkError", "GEOParseError"]
