"""
GEO resolver facade.

Selects the resolution strategy from the ``format`` token, validates the
remaining options against the accession's GEO type and returns a
``GEOResolver`` exposing one query surface for both strategies.

Format tokens:
- ``none``, ``brief``, ``quick``, ``data``, ``full``: Accession Display Bar,
  the token is the amount (``none`` = no amount, only valid for datasets)
- ``text``, ``xml``, ``html``: Accession Display Bar, the token is the page format
- ``soft``, ``soft_full``, ``miniml``, ``matrix``, ``annot``, ``suppl``: FTP site

Example:
    >>> resolver = resolve("gse1234", "soft")
    >>> resolver.url()
    'https://ftp.ncbi.nlm.nih.gov/geo/series/gse1nnn/gse1234/soft/GSE1234_family.soft.gz'
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar, Union

from geolink.core.exceptions import InvalidFormat
from geolink.core.identifiers import GEOIdentifier, GEOType, parse_identifier
from geolink.core.schemas import GEODirEntry, GEOFileEntry
from geolink.services.geo.adb import GEOADBResolver
from geolink.services.geo.constants import (
    ADB_AMOUNT_TOKENS,
    ADB_FORMAT_TOKENS,
    FTP_FORMAT_TOKENS,
    NONE_TOKEN,
    GEOADBFormat,
    GEOAmount,
    GEOFTPFormat,
    GEOScope,
)
from geolink.services.geo.ftp import GEOFTPResolver
from geolink.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

ADB_STRATEGY = "adb"
FTP_STRATEGY = "ftp"


@dataclass(frozen=True)
class ResolverDiagnostic:
    """A parameter that was supplied but had no effect on the resolution."""

    parameter: str
    value: object
    message: str


class GEOResolver:
    """
    Resolver for a GEO resource.

    Wraps either an Accession Display Bar resolver or an FTP site resolver.
    Instances are built by ``resolve()`` and are read-only afterwards.

    Attributes:
        strategy: "adb" or "ftp"
        diagnostics: Parameters that were ignored while building this resolver
    """

    def __init__(
        self,
        resolver: Union[GEOADBResolver, GEOFTPResolver],
        diagnostics: Optional[List[ResolverDiagnostic]] = None,
    ):
        self._resolver = resolver
        self.strategy = (
            FTP_STRATEGY if isinstance(resolver, GEOFTPResolver) else ADB_STRATEGY
        )
        self.diagnostics = tuple(diagnostics or ())

    def __repr__(self):
        return f"GEOResolver(accession={self.accession()!r}, strategy={self.strategy!r})"

    @property
    def identifier(self) -> GEOIdentifier:
        return self._resolver.id

    def accession(self) -> str:
        """The normalized accession, e.g. "GSE12345"."""
        return self._resolver.accession()

    def gtype(self) -> GEOType:
        return self._resolver.gtype()

    def url(self) -> str:
        """Complete download or access URL of the resource."""
        return self._resolver.url()

    def landing_page(self) -> str:
        """URL of the GEO record page, suitable for a web browser."""
        return self._resolver.landing_page()

    def entry(self) -> Optional[Union[GEOFileEntry, GEODirEntry]]:
        """
        Terminal entry of the resource.

        Returns:
            GEOFileEntry or GEODirEntry, or None when the URL is a browser page
            with no concrete file
        """
        return self._resolver.entry()


def _optional(token: Optional[str], parse: Callable[[str], T]) -> Optional[T]:
    """Parse an option token, mapping "none" to an absent option."""
    if token == NONE_TOKEN:
        return None
    return parse(token)


def _ignore(
    diagnostics: List[ResolverDiagnostic], parameter: str, value: object, message: str
) -> None:
    logger.warning(message)
    diagnostics.append(ResolverDiagnostic(parameter=parameter, value=value, message=message))


def _build_adb(
    identifier: GEOIdentifier,
    format: str,
    amount: Optional[str],
    scope: Optional[str],
    over_https: Optional[bool],
) -> GEOResolver:
    diagnostics: List[ResolverDiagnostic] = []
    resolver = GEOADBResolver(identifier)

    format_amount = None
    if format in ADB_FORMAT_TOKENS:
        resolver.set_format(GEOADBFormat.parse(format))
    else:
        format_amount = format

    if amount is not None:
        if format_amount is not None:
            _ignore(
                diagnostics,
                "format",
                format,
                f"Warning: 'format' amount '{format}' is overridden by 'amount' '{amount}'",
            )
        resolver.set_amount(_optional(amount, GEOAmount.parse))
    elif format_amount is not None:
        resolver.set_amount(_optional(format_amount, GEOAmount.parse))

    if scope is not None:
        resolver.set_scope(_optional(scope, GEOScope.parse))

    if over_https is not None:
        _ignore(
            diagnostics,
            "over_https",
            over_https,
            f"Warning: 'over_https' will be ignored for '{format}' 'format'",
        )

    return GEOResolver(resolver, diagnostics)


def _build_ftp(
    identifier: GEOIdentifier,
    format: str,
    amount: Optional[str],
    scope: Optional[str],
    over_https: Optional[bool],
) -> GEOResolver:
    diagnostics: List[ResolverDiagnostic] = []
    resolver = GEOFTPResolver(identifier)
    resolver.set_file(GEOFTPFormat.parse(format))

    if over_https is not None:
        resolver.set_over_https(over_https)

    if amount is not None:
        _ignore(
            diagnostics,
            "amount",
            amount,
            f"Warning: 'amount' will be ignored for '{format}' 'format'",
        )
    if scope is not None:
        _ignore(
            diagnostics,
            "scope",
            scope,
            f"Warning: 'scope' will be ignored for '{format}' 'format'",
        )

    return GEOResolver(resolver, diagnostics)


def resolve(
    accession: str,
    format: str,
    amount: Optional[str] = None,
    scope: Optional[str] = None,
    over_https: Optional[bool] = None,
) -> GEOResolver:
    """
    Build a GEOResolver from an accession and options.

    Args:
        accession: GEO accession (GSE, GSM, GPL or GDS, any case)
        format: Strategy-selecting token, see the module docstring
        amount: "none", "brief", "quick", "data" or "full" (ADB only)
        scope: "none", "self", "gsm", "gpl", "gse" or "all" (ADB only)
        over_https: Reach the FTP site over HTTPS (FTP only, default True)

    Returns:
        GEOResolver for the requested resource

    Raises:
        GEOParseError: The accession or an option is invalid, or the options
            are incompatible with the accession's GEO type
    """
    identifier = parse_identifier(accession)

    if format in ADB_AMOUNT_TOKENS or format in ADB_FORMAT_TOKENS:
        return _build_adb(identifier, format, amount, scope, over_https)
    if format in FTP_FORMAT_TOKENS:
        return _build_ftp(identifier, format, amount, scope, over_https)

    raise InvalidFormat(format)
