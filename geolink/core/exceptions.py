"""
Core exceptions for geolink.

This module provides the exception hierarchy for every failure the GEO
resolvers can signal. All of them are deterministic validation failures:
they are raised at the first violated rule and never retried.

Example:
    try:
        resolver = resolve("gsm1", "soft")
    except UnavailableFTPFormat as e:
        print(e.message)             # "Samples never own soft file."
        print(e.details["gtype"])    # GEOType.SAMPLES
"""

from typing import Any, Dict, Optional


class GEOLinkError(Exception):
    """Base exception for all geolink errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        return self.message


# ===============================================================================
# Parse / validation errors
# ===============================================================================


class GEOParseError(GEOLinkError):
    """Raised when an accession or an option cannot be accepted."""

    pass


class _InvalidValueError(GEOParseError):
    """An option token that is not in its closed set."""

    expected = ""

    def __init__(self, value: Any = None):
        self.value = value
        message = f"Expected {self.expected}"
        if value is not None:
            message = f"Invalid value '{value}': {message}"
        super().__init__(message, {"value": value})


class _GTypeError(GEOParseError):
    """An option that is required or forbidden for a GEO type."""

    template = ""

    def __init__(self, gtype: Any):
        self.gtype = gtype
        super().__init__(self.template.format(gtype=gtype), {"gtype": gtype})


class InvalidAccession(_InvalidValueError):
    """Accession does not start with a known GEO prefix."""

    expected = "one starting with 'GDS', 'GPL', 'GSM', or 'GSE', and followed by digits."


class InvalidAmount(_InvalidValueError):
    expected = "one of 'brief', 'quick', 'data', or 'full'."


class InvalidScope(_InvalidValueError):
    expected = "one of 'self', 'gsm', 'gpl', 'gse', or 'all'."


class InvalidAccFormat(_InvalidValueError):
    expected = "one of 'txt'/'text', 'xml', or 'html'."


class InvalidFTPFormat(_InvalidValueError):
    expected = "one of 'soft', 'soft_full', 'miniml', 'matrix', 'annot', or 'suppl'."


class InvalidFormat(_InvalidValueError):
    """The ``format`` token selects neither the ADB nor the FTP strategy."""

    expected = (
        "one of 'none', 'brief', 'quick', 'data', 'full', 'text', 'xml', "
        "'html', 'soft', 'soft_full', 'miniml', 'matrix', 'annot', or 'suppl'."
    )


class AccScopeOmitted(_GTypeError):
    template = "Expected 'none' scope for {gtype}"


class AccScopeRequired(_GTypeError):
    template = "Expected one of 'self', 'gsm', 'gpl', 'gse', or 'all' scope for {gtype}"


class AccAmountOmitted(_GTypeError):
    template = "Expected 'none' amount for {gtype}"


class AccAmountRequired(_GTypeError):
    template = "Expected one of 'brief', 'quick', 'data', or 'full' amount for {gtype}"


class AccFormatRequired(_GTypeError):
    template = "Expected one of 'txt'/'text', 'xml', or 'html' format for {gtype}"


class UnavailableFormat(GEOParseError):
    """A Datasets record is only displayed as an HTML browser page."""

    def __init__(self, gtype: Any, ftype: str):
        self.gtype = gtype
        self.ftype = ftype
        super().__init__(
            f"{gtype} are only available in 'html' format, not '{ftype}'.",
            {"gtype": gtype, "ftype": ftype},
        )


class UnavailableFTPFormat(GEOParseError):
    """The GEO type does not own that file format on the FTP site."""

    def __init__(self, gtype: Any, ftype: str):
        self.gtype = gtype
        self.ftype = ftype
        super().__init__(
            f"{gtype} never own {ftype} file.", {"gtype": gtype, "ftype": ftype}
        )


# ===============================================================================
# Input errors (batch resolution, download plans)
# ===============================================================================


class GEOInputError(GEOLinkError):
    """Raised when caller input cannot be turned into resolution requests."""

    pass


class InputLengthError(GEOInputError):
    """
    An option sequence cannot be recycled to the number of accessions.

    Attributes:
        details: Contains:
            - parameter: Name of the offending option
            - got: Length of the supplied sequence
            - expected: Number of accessions
    """

    def __init__(self, parameter: str, got: int, expected: int):
        super().__init__(
            f"Invalid '{parameter}': Length mismatch: got {got} element(s), "
            f"but expected {expected}",
            {"parameter": parameter, "got": got, "expected": expected},
        )


class InputValueError(GEOInputError):
    """An element of an option sequence is missing or of the wrong kind."""

    def __init__(self, parameter: str, reason: str):
        super().__init__(
            f"Invalid '{parameter}': {reason}",
            {"parameter": parameter, "reason": reason},
        )


class NoEntryError(GEOInputError):
    """The resolver points at a page, not at a file or directory."""

    def __init__(self, accession: str, url: str):
        super().__init__(
            f"No entry found for {accession} ({url})",
            {"accession": accession, "url": url},
        )
