"""
GEO accession parsing and type classification.

A GEO accession is classified solely by its three-letter prefix; the
numeric suffix is carried through untouched.

Example:
    >>> from geolink.core.identifiers import parse_identifier
    >>> parse_identifier("gse12345")
    GEOIdentifier(accession='GSE12345', gtype=<GEOType.SERIES: 'Series'>)
"""

from dataclasses import dataclass
from enum import Enum

from geolink.core.exceptions import InvalidAccession


class GEOType(Enum):
    """GEO record types, one per accession prefix."""

    DATASETS = "Datasets"  # GDS - Curated datasets
    SERIES = "Series"  # GSE - Series (experiments)
    PLATFORMS = "Platforms"  # GPL - Platforms
    SAMPLES = "Samples"  # GSM - Individual samples

    def __str__(self):
        return self.value

    @property
    def prefix(self) -> str:
        """Three-letter accession prefix, e.g. ``"GSE"``."""
        return _PREFIX_BY_TYPE[self]


_PREFIX_BY_TYPE = {
    GEOType.DATASETS: "GDS",
    GEOType.SERIES: "GSE",
    GEOType.PLATFORMS: "GPL",
    GEOType.SAMPLES: "GSM",
}

# Matching order for prefixes
_PREFIXES = (
    ("GDS", GEOType.DATASETS),
    ("GPL", GEOType.PLATFORMS),
    ("GSM", GEOType.SAMPLES),
    ("GSE", GEOType.SERIES),
)


@dataclass(frozen=True)
class GEOIdentifier:
    """A normalized GEO accession and its record type."""

    accession: str
    gtype: GEOType


def parse_identifier(raw: str) -> GEOIdentifier:
    """
    Normalize and classify a raw accession string.

    Args:
        raw: Accession as typed by the user (any case)

    Returns:
        GEOIdentifier with the uppercased accession

    Raises:
        InvalidAccession: If the accession does not start with GDS, GPL, GSM or GSE
    """
    if not isinstance(raw, str):
        raise InvalidAccession(raw)

    accession = raw.upper()
    for prefix, gtype in _PREFIXES:
        if accession.startswith(prefix):
            return GEOIdentifier(accession=accession, gtype=gtype)

    raise InvalidAccession(raw)


def geo_gtype(accession: str, abbreviated: bool = False) -> str:
    """
    Return the GEO type of an accession as text.

    Args:
        accession: GEO accession
        abbreviated: Return the prefix ("GSE") instead of the name ("Series")

    Returns:
        Type name or prefix
    """
    gtype = parse_identifier(accession).gtype
    return gtype.prefix if abbreviated else str(gtype)
