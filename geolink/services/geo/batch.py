"""
Vectorized GEO resolution.

Accepts parallel sequences of accessions and options. An option given as a
scalar or as a one-element sequence is recycled to every accession; any
other length mismatch is an input error.

Example:
    >>> urls = geo_urls(["GSE1", "GSE2"], "matrix", over_https=[True, False])
    >>> urls[1]
    'ftp://ftp.ncbi.nlm.nih.gov/geo/series/gsennn/gse2/matrix/'
"""

from typing import List, Optional, Sequence, Union

from geolink.core.exceptions import InputLengthError, InputValueError
from geolink.services.geo.facade import GEOResolver, resolve
from geolink.utils.logger import get_logger

logger = get_logger(__name__)

OptionValue = Union[None, str, bool, Sequence[Optional[str]], Sequence[bool]]


def _as_list(parameter: str, value, kind: type) -> Optional[list]:
    if value is None:
        return None
    if isinstance(value, kind):
        return [value]
    if isinstance(value, (str, bytes)) or not hasattr(value, "__iter__"):
        raise InputValueError(parameter, f"Expected a {kind.__name__} or a sequence of them")
    return list(value)


def recycle(parameter: str, value: OptionValue, length: int, kind: type = str) -> Optional[list]:
    """
    Broadcast an option to ``length`` elements.

    Args:
        parameter: Option name, used in error messages
        value: None, a scalar, or a sequence
        length: Number of accessions
        kind: Expected element type

    Returns:
        None if the option was not given, else a list of ``length`` elements

    Raises:
        InputLengthError: A sequence has neither one nor ``length`` elements
        InputValueError: An element is not of ``kind``
    """
    values = _as_list(parameter, value, kind)
    if values is None:
        return None

    for item in values:
        if item is None and kind is bool:
            raise InputValueError(parameter, "missing value is not allowed")
        if item is not None and not isinstance(item, kind):
            raise InputValueError(
                parameter, f"Expected {kind.__name__} elements, got {type(item).__name__}"
            )

    if len(values) == 1:
        return values * length
    if len(values) != length:
        raise InputLengthError(parameter, len(values), length)
    return values


def resolve_many(
    accessions: Union[str, Sequence[str]],
    format: Union[str, Sequence[str]],
    amount: OptionValue = None,
    scope: OptionValue = None,
    over_https: OptionValue = None,
) -> List[GEOResolver]:
    """
    Build one GEOResolver per accession.

    Raises:
        GEOInputError: The option sequences cannot be aligned to the accessions
        GEOParseError: The first accession whose options are invalid
    """
    accessions = _as_list("accession", accessions, str)
    if accessions is None:
        raise InputValueError("accession", "Expected a string or a sequence of strings")
    n = len(accessions)
    formats = recycle("format", format, n)
    amounts = recycle("amount", amount, n)
    scopes = recycle("scope", scope, n)
    https = recycle("over_https", over_https, n, kind=bool)
    if formats is None:
        raise InputValueError("format", "a format is required")

    logger.debug(f"Resolving {n} GEO accession(s)")
    return [
        resolve(
            acc,
            formats[i],
            amount=amounts[i] if amounts is not None else None,
            scope=scopes[i] if scopes is not None else None,
            over_https=https[i] if https is not None else None,
        )
        for i, acc in enumerate(accessions)
    ]


def geo_urls(
    accessions: Union[str, Sequence[str]],
    format: Union[str, Sequence[str]],
    amount: OptionValue = None,
    scope: OptionValue = None,
    over_https: OptionValue = None,
) -> List[str]:
    """URLs of ``resolve_many()`` in accession order."""
    return [
        resolver.url()
        for resolver in resolve_many(accessions, format, amount, scope, over_https)
    ]
