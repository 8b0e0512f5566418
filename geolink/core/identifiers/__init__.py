"""
GEO identifier parsing.

Example:
    >>> from geolink.core.identifiers import geo_gtype
    >>> geo_gtype("GSM1", abbreviated=True)
    'GSM'
"""

from geolink.core.identifiers.geo_identifier import (
    GEOIdentifier,
    GEOType,
    geo_gtype,
    parse_identifier,
)

__all__ = [
    "GEOIdentifier",
    "GEOType",
    "geo_gtype",
    "parse_identifier",
]
