"""
Download file schema handed to the downloader.

The downloader only ever sees ``(url, filename)`` pairs; it never inspects
resolver internals.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class DownloadFile(BaseModel):
    """
    Single downloadable file.

    This is the atomic unit of download - represents one file that can be
    fetched and stored under ``filename``.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Download URL (HTTPS or FTP)")
    filename: str = Field(..., description="Target filename for saving")
    accession: Optional[str] = Field(None, description="GEO accession it belongs to")

    def target_path(self, odir: Union[str, Path]) -> Path:
        """Path the file is written to inside ``odir``."""
        return Path(odir) / self.filename

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "url": self.url,
            "filename": self.filename,
            "accession": self.accession,
        }
