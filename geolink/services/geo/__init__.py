"""
GEO resolution strategies.

- adb: Accession Display Bar (web record viewer)
- ftp: FTP site (bulk files, over HTTPS or FTP)
- facade: strategy selection and option validation
- batch: vectorized resolution with option recycling
- download_plan: (url, filename) pairs for a downloader
"""

from geolink.services.geo.adb import GEOADBResolver
from geolink.services.geo.batch import geo_urls, recycle, resolve_many
from geolink.services.geo.constants import (
    GEOADBFormat,
    GEOAmount,
    GEOFTPFormat,
    GEOScope,
)
from geolink.services.geo.download_plan import GEODownloadPlan
from geolink.services.geo.facade import GEOResolver, ResolverDiagnostic, resolve
from geolink.services.geo.ftp import FTP_FORMATS_BY_TYPE, GEOFTPResolver, bucket_name

__all__ = [
    "FTP_FORMATS_BY_TYPE",
    "GEOADBFormat",
    "GEOADBResolver",
    "GEOAmount",
    "GEODownloadPlan",
    "GEOFTPFormat",
    "GEOFTPResolver",
    "GEOResolver",
    "GEOScope",
    "ResolverDiagnostic",
    "bucket_name",
    "geo_urls",
    "recycle",
    "resolve",
    "resolve_many",
]
