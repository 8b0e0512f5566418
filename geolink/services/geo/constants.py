"""
GEO resolver constants and option enums.

Contains the closed option sets of both resolution strategies:
- Accession Display Bar (ADB): scope, amount and page format
- FTP site: file format
plus the tokens the facade uses to route a request to one of them.
"""

from enum import Enum

from geolink.core.exceptions import (
    InvalidAccFormat,
    InvalidAmount,
    InvalidFTPFormat,
    InvalidScope,
)

# Token meaning "option absent" for amount and scope
NONE_TOKEN = "none"


class GEOScope(Enum):
    """
    Which GEO accession(s) to display.

    The accession itself ("self"), any of the related platforms, samples or
    series, or the whole family ("all").
    """

    SELF = "self"
    GSM = "gsm"
    GPL = "gpl"
    GSE = "gse"
    ALL = "all"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, token: str) -> "GEOScope":
        try:
            return cls(token)
        except ValueError:
            raise InvalidScope(token) from None


class GEOAmount(Enum):
    """
    Amount of data displayed for an accession.

    "brief" shows the attributes only, "quick" adds the first twenty rows of
    the data table, "full" shows the whole table, and "data" omits the
    attributes, keeping the links to other accessions and the full table.
    """

    BRIEF = "brief"
    QUICK = "quick"
    DATA = "data"
    FULL = "full"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, token: str) -> "GEOAmount":
        try:
            return cls(token)
        except ValueError:
            raise InvalidAmount(token) from None


class GEOADBFormat(Enum):
    """Serialization of the Accession Display Bar page."""

    TEXT = "text"
    XML = "xml"
    HTML = "html"

    def __str__(self):
        return self.value

    @property
    def ext(self) -> str:
        """File extension of a saved page; text pages are SOFT."""
        return _ADB_EXTENSIONS[self]

    @classmethod
    def parse(cls, token: str) -> "GEOADBFormat":
        if token == "txt":
            return cls.TEXT
        try:
            return cls(token)
        except ValueError:
            raise InvalidAccFormat(token) from None


_ADB_EXTENSIONS = {
    GEOADBFormat.TEXT: "soft",
    GEOADBFormat.XML: "xml",
    GEOADBFormat.HTML: "html",
}


class GEOFTPFormat(Enum):
    """Bulk file formats served from the GEO FTP site."""

    SOFT = "soft"
    SOFT_FULL = "soft_full"
    MINIML = "miniml"
    MATRIX = "matrix"
    ANNOT = "annot"
    SUPPL = "suppl"

    def __str__(self):
        return self.value

    @property
    def directory(self) -> str:
        """Directory under the accession folder; SOFT and SOFT_FULL share "soft"."""
        if self is GEOFTPFormat.SOFT_FULL:
            return "soft"
        return self.value

    @classmethod
    def parse(cls, token: str) -> "GEOFTPFormat":
        try:
            return cls(token)
        except ValueError:
            raise InvalidFTPFormat(token) from None


# Routing tokens for the `format` argument of resolve()
ADB_AMOUNT_TOKENS = frozenset({NONE_TOKEN} | {a.value for a in GEOAmount})
ADB_FORMAT_TOKENS = frozenset(f.value for f in GEOADBFormat)
FTP_FORMAT_TOKENS = frozenset(f.value for f in GEOFTPFormat)

# Accession Display Bar endpoints, relative to WEB_BASE_URL
ADB_QUERY_PATH = "/geo/query/acc.cgi"
GDS_BROWSER_PATH = "/sites/GDSbrowser"
