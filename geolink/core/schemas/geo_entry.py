"""
Terminal entries of resolved GEO URLs.

A resolved URL either names a single file or points at a directory on the
GEO FTP site. Both are immutable once built.

Example:
    >>> entry = GEOFileEntry(
    ...     url="https://ftp.ncbi.nlm.nih.gov/geo/platforms/gplnnn/gpl9/annot/GPL9.annot.gz",
    ...     fname="GPL9.annot.gz",
    ... )
    >>> entry.is_dir
    False
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class GEOFileEntry(BaseModel):
    """A URL whose last path component is a concrete file."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Full URL of the file")
    fname: str = Field(..., description="File name, the last component of the URL")

    @property
    def is_dir(self) -> bool:
        return False


class GEODirEntry(BaseModel):
    """A URL that points at a directory (series matrix, supplementary files)."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Full URL of the directory, with trailing '/'")

    @property
    def is_dir(self) -> bool:
        return True


GEOEntry = Union[GEOFileEntry, GEODirEntry]
