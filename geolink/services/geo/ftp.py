"""
GEO FTP site resolver.

Builds download URLs for the bulk-file archive at ftp.ncbi.nlm.nih.gov,
reached over HTTPS by default because direct FTP connections often fail.

File type reference table:

    |            type            | GDS | GSE | GPL | GSM |
    | :------------------------: | :-: | :-: | :-: | :-: |
    |        SOFT (soft)         |  o  |  o  |  o  |  x  |
    |    SOFTFULL (soft_full)    |  o  |  x  |  x  |  x  |
    |      MINiML (miniml)       |  x  |  o  |  o  |  x  |
    |      Matrix (matrix)       |  x  |  o  |  x  |  x  |
    |     Annotation (annot)     |  x  |  x  |  o  |  x  |
    | Supplementaryfiles (suppl) |  x  |  o  |  o  |  o  |
"""

import re
from typing import Optional, Union

from geolink.config.settings import get_settings
from geolink.core.exceptions import UnavailableFTPFormat
from geolink.core.identifiers import GEOIdentifier, GEOType
from geolink.core.schemas import GEODirEntry, GEOFileEntry
from geolink.services.geo.constants import ADB_QUERY_PATH, GDS_BROWSER_PATH, GEOFTPFormat
from geolink.utils.logger import get_logger

logger = get_logger(__name__)

# The archive shards accession folders by replacing the last 1-3 digits with "nnn"
_BUCKET_DIGITS = re.compile(r"\d{1,3}$")

FTP_FORMATS_BY_TYPE = {
    GEOType.DATASETS: frozenset({GEOFTPFormat.SOFT, GEOFTPFormat.SOFT_FULL}),
    GEOType.SERIES: frozenset(
        {GEOFTPFormat.SOFT, GEOFTPFormat.MINIML, GEOFTPFormat.MATRIX, GEOFTPFormat.SUPPL}
    ),
    GEOType.PLATFORMS: frozenset(
        {GEOFTPFormat.SOFT, GEOFTPFormat.MINIML, GEOFTPFormat.ANNOT, GEOFTPFormat.SUPPL}
    ),
    GEOType.SAMPLES: frozenset({GEOFTPFormat.SUPPL}),
}

# File name suffixes appended to the accession
_FILE_SUFFIXES = {
    (GEOType.DATASETS, GEOFTPFormat.SOFT): ".soft.gz",
    (GEOType.DATASETS, GEOFTPFormat.SOFT_FULL): "_full.soft.gz",
    (GEOType.SERIES, GEOFTPFormat.SOFT): "_family.soft.gz",
    (GEOType.SERIES, GEOFTPFormat.MINIML): "_family.xml.tgz",
    (GEOType.PLATFORMS, GEOFTPFormat.SOFT): "_family.soft.gz",
    (GEOType.PLATFORMS, GEOFTPFormat.MINIML): "_family.xml.tgz",
    (GEOType.PLATFORMS, GEOFTPFormat.ANNOT): ".annot.gz",
}

# Series matrices and supplementary files are always directories
_DIRECTORY_FORMATS = frozenset({GEOFTPFormat.MATRIX, GEOFTPFormat.SUPPL})


def bucket_name(accession: str) -> str:
    """
    Name of the shard directory holding an accession.

    Example:
        >>> bucket_name("gse1234")
        'gse1nnn'
        >>> bucket_name("gse12")
        'gsennn'
    """
    return _BUCKET_DIGITS.sub("nnn", accession, count=1)


def default_ftp_format(gtype: GEOType) -> GEOFTPFormat:
    """Samples never own SOFT records, so they default to supplementary files."""
    if gtype is GEOType.SAMPLES:
        return GEOFTPFormat.SUPPL
    return GEOFTPFormat.SOFT


class GEOFTPResolver:
    """Resolver for files and directories on the GEO FTP site."""

    def __init__(
        self,
        identifier: GEOIdentifier,
        over_https: Optional[bool] = None,
        ftp_host: Optional[str] = None,
        web_base_url: Optional[str] = None,
    ):
        settings = get_settings()
        self.id = identifier
        self.file = default_ftp_format(identifier.gtype)
        self.over_https = settings.OVER_HTTPS if over_https is None else over_https
        self._ftp_host = ftp_host or settings.FTP_HOST
        self._web_base_url = web_base_url or settings.WEB_BASE_URL
        logger.debug(
            f"FTP resolver for {identifier.accession} ({identifier.gtype}) created"
        )

    def accession(self) -> str:
        return self.id.accession

    def gtype(self) -> GEOType:
        return self.id.gtype

    def set_file(self, file: GEOFTPFormat) -> None:
        """
        Select the file format to resolve.

        Raises:
            UnavailableFTPFormat: The GEO type does not own this file format
        """
        if file not in FTP_FORMATS_BY_TYPE[self.id.gtype]:
            raise UnavailableFTPFormat(self.id.gtype, str(file))
        self.file = file

    def set_over_https(self, over_https: bool) -> None:
        self.over_https = bool(over_https)

    def _fname(self) -> Optional[str]:
        if self.file in _DIRECTORY_FORMATS:
            return None
        return f"{self.id.accession}{_FILE_SUFFIXES[(self.id.gtype, self.file)]}"

    def url(self) -> str:
        """
        Full download URL.

        Directories end with a trailing '/', files end with the file name.
        """
        scheme = "https" if self.over_https else "ftp"
        acc = self.id.accession.lower()
        return "/".join(
            [
                f"{scheme}://{self._ftp_host}/geo",
                self.id.gtype.value.lower(),
                bucket_name(acc),
                acc,
                self.file.directory,
                self._fname() or "",
            ]
        )

    def landing_page(self) -> str:
        """Web record page of the accession."""
        if self.id.gtype is GEOType.DATASETS:
            return f"{self._web_base_url}{GDS_BROWSER_PATH}?acc={self.id.accession}"
        return f"{self._web_base_url}{ADB_QUERY_PATH}?acc={self.id.accession}"

    def entry(self) -> Union[GEOFileEntry, GEODirEntry]:
        fname = self._fname()
        if fname is None:
            return GEODirEntry(url=self.url())
        return GEOFileEntry(url=self.url(), fname=fname)
