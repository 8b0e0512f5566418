"""
Accession Display Bar (ADB) resolver.

Builds URLs for GEO's web record viewer
(https://www.ncbi.nlm.nih.gov/geo/info/download.html). Series, platforms and
samples are displayed through ``acc.cgi`` and need a scope and an amount;
datasets only have the GDS browser page, which takes neither.
"""

from typing import Optional

from geolink.config.settings import get_settings
from geolink.core.exceptions import (
    AccAmountOmitted,
    AccAmountRequired,
    AccFormatRequired,
    AccScopeOmitted,
    AccScopeRequired,
    UnavailableFormat,
)
from geolink.core.identifiers import GEOIdentifier, GEOType
from geolink.core.schemas import GEOFileEntry
from geolink.services.geo.constants import (
    ADB_QUERY_PATH,
    GDS_BROWSER_PATH,
    GEOADBFormat,
    GEOAmount,
    GEOScope,
)
from geolink.utils.logger import get_logger

logger = get_logger(__name__)


class GEOADBResolver:
    """
    Resolver for the Accession Display Bar.

    The constructor applies the per-type defaults: datasets start without
    scope and amount, every other type starts with ``self``/``data``. The
    setters enforce the type rules so an instance is always consistent.
    """

    def __init__(self, identifier: GEOIdentifier, web_base_url: Optional[str] = None):
        self.id = identifier
        self._base_url = web_base_url or get_settings().WEB_BASE_URL
        self.format = GEOADBFormat.HTML
        if self._is_datasets:
            self.scope: Optional[GEOScope] = None
            self.amount: Optional[GEOAmount] = None
        else:
            self.scope = GEOScope.SELF
            self.amount = GEOAmount.DATA
        logger.debug(
            f"ADB resolver for {identifier.accession} ({identifier.gtype}) created"
        )

    @property
    def _is_datasets(self) -> bool:
        return self.id.gtype is GEOType.DATASETS

    def accession(self) -> str:
        return self.id.accession

    def gtype(self) -> GEOType:
        return self.id.gtype

    def set_scope(self, scope: Optional[GEOScope]) -> None:
        """
        Set the scope.

        Raises:
            AccScopeOmitted: A scope was given for a Datasets accession
            AccScopeRequired: No scope was given for any other type
        """
        if self._is_datasets:
            if scope is not None:
                raise AccScopeOmitted(self.id.gtype)
        elif scope is None:
            raise AccScopeRequired(self.id.gtype)
        self.scope = scope

    def set_amount(self, amount: Optional[GEOAmount]) -> None:
        """
        Set the amount.

        Raises:
            AccAmountOmitted: An amount was given for a Datasets accession
            AccAmountRequired: No amount was given for any other type
        """
        if self._is_datasets:
            if amount is not None:
                raise AccAmountOmitted(self.id.gtype)
        elif amount is None:
            raise AccAmountRequired(self.id.gtype)
        self.amount = amount

    def set_format(self, format: Optional[GEOADBFormat]) -> None:
        """
        Set the page format.

        Raises:
            UnavailableFormat: text or xml was requested for a Datasets accession
            AccFormatRequired: No format was given for any other type
        """
        if self._is_datasets:
            if format not in (None, GEOADBFormat.HTML):
                raise UnavailableFormat(self.id.gtype, str(format))
            self.format = GEOADBFormat.HTML
            return
        if format is None:
            raise AccFormatRequired(self.id.gtype)
        self.format = format

    def _has_record_view(self) -> bool:
        return self.scope is not None and self.amount is not None

    def _build_url(self, format: GEOADBFormat) -> str:
        if self._has_record_view():
            return (
                f"{self._base_url}{ADB_QUERY_PATH}?acc={self.id.accession}"
                f"&targ={self.scope}&view={self.amount}&form={format}"
            )
        return f"{self._base_url}{GDS_BROWSER_PATH}?acc={self.id.accession}"

    def url(self) -> str:
        return self._build_url(self.format)

    def landing_page(self) -> str:
        """Same page as url(), always rendered as HTML."""
        return self._build_url(GEOADBFormat.HTML)

    def entry(self) -> Optional[GEOFileEntry]:
        """
        The file a download of url() would produce.

        Returns:
            GEOFileEntry named ``<ACCESSION>_<amount>.<ext>``, or None for the
            GDS browser page
        """
        if not self._has_record_view():
            return None
        fname = f"{self.id.accession}_{self.amount}.{self.format.ext}"
        return GEOFileEntry(url=self.url(), fname=fname)
