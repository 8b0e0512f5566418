"""
geolink - resolve GEO accessions into download URLs.

Example:
    >>> import geolink
    >>> resolver = geolink.resolve("GDS5", "html")
    >>> resolver.url()
    'https://www.ncbi.nlm.nih.gov/sites/GDSbrowser?acc=GDS5'
    >>> resolver.entry() is None
    True
"""

from geolink.core.exceptions import GEOInputError, GEOLinkError, GEOParseError
from geolink.core.identifiers import GEOIdentifier, GEOType, geo_gtype, parse_identifier
from geolink.core.schemas import GEODirEntry, GEOFileEntry
from geolink.services.geo import (
    GEODownloadPlan,
    GEOResolver,
    geo_urls,
    resolve,
    resolve_many,
)
from geolink.version import __version__

__all__ = [
    "GEODirEntry",
    "GEODownloadPlan",
    "GEOFileEntry",
    "GEOIdentifier",
    "GEOInputError",
    "GEOLinkError",
    "GEOParseError",
    "GEOResolver",
    "GEOType",
    "__version__",
    "geo_gtype",
    "geo_urls",
    "parse_identifier",
    "resolve",
    "resolve_many",
]
