"""Schemas shared across geolink services."""

from geolink.core.schemas.download_file import DownloadFile
from geolink.core.schemas.geo_entry import GEODirEntry, GEOEntry, GEOFileEntry

__all__ = ["DownloadFile", "GEODirEntry", "GEOEntry", "GEOFileEntry"]
