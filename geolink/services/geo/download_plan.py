"""
Download plan built from resolved GEO entries.

Collects the ``(url, filename)`` pairs a downloader needs. Nothing is
fetched here; directory entries (series matrices, supplementary files) have
no single file to fetch and are skipped.

Example:
    >>> from geolink import resolve
    >>> plan = GEODownloadPlan()
    >>> plan.collect(resolve("gpl9", "annot"))
    True
    >>> plan.filenames
    ['GPL9.annot.gz']
"""

from pathlib import Path
from typing import Iterable, List, Union

from geolink.core.exceptions import NoEntryError
from geolink.core.schemas import DownloadFile, GEODirEntry
from geolink.services.geo.facade import GEOResolver
from geolink.utils.logger import get_logger

logger = get_logger(__name__)


class GEODownloadPlan:
    """Ordered list of files to download."""

    def __init__(self):
        self.files: List[DownloadFile] = []

    def __len__(self):
        return len(self.files)

    def collect(self, resolver: GEOResolver) -> bool:
        """
        Add the file a resolver points at.

        Args:
            resolver: A built GEOResolver

        Returns:
            True if a file was added, False for a directory entry

        Raises:
            NoEntryError: The resolver points at a browser page
        """
        entry = resolver.entry()
        if entry is None:
            raise NoEntryError(resolver.accession(), resolver.url())
        if isinstance(entry, GEODirEntry):
            logger.debug(f"Skipping directory entry {entry.url}")
            return False

        self.files.append(
            DownloadFile(url=entry.url, filename=entry.fname, accession=resolver.accession())
        )
        return True

    def collect_all(self, resolvers: Iterable[GEOResolver]) -> int:
        """Collect every resolver; returns the number of files added."""
        return sum(1 for resolver in resolvers if self.collect(resolver))

    @property
    def urls(self) -> List[str]:
        return [f.url for f in self.files]

    @property
    def filenames(self) -> List[str]:
        return [f.filename for f in self.files]

    def target_paths(self, odir: Union[str, Path]) -> List[Path]:
        """Where each file would be written inside ``odir``."""
        return [f.target_path(odir) for f in self.files]
