"""
Unit tests for the geolink exception hierarchy.
"""

import pytest

from geolink.core.exceptions import (
    AccAmountRequired,
    AccScopeOmitted,
    GEOInputError,
    GEOLinkError,
    GEOParseError,
    InputLengthError,
    InvalidAmount,
    InvalidFormat,
    NoEntryError,
    UnavailableFormat,
    UnavailableFTPFormat,
)
from geolink.core.identifiers import GEOType


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test base classes and structured details."""

    def test_base_error_message_and_details(self):
        error = GEOLinkError("something failed", {"key": "value"})

        assert str(error) == "something failed"
        assert error.message == "something failed"
        assert error.details == {"key": "value"}

    def test_details_default_to_empty_dict(self):
        assert GEOLinkError("x").details == {}

    @pytest.mark.parametrize(
        "error",
        [
            InvalidAmount("huge"),
            InvalidFormat("csv"),
            AccScopeOmitted(GEOType.DATASETS),
            UnavailableFTPFormat(GEOType.SAMPLES, "soft"),
        ],
    )
    def test_validation_errors_are_parse_errors(self, error):
        assert isinstance(error, GEOParseError)
        assert isinstance(error, GEOLinkError)

    def test_input_errors_are_not_parse_errors(self):
        error = InputLengthError("scope", 2, 3)

        assert isinstance(error, GEOInputError)
        assert not isinstance(error, GEOParseError)


@pytest.mark.unit
class TestErrorMessages:
    """Test that each error names the offending value or type."""

    def test_invalid_value_message(self):
        error = InvalidAmount("huge")

        assert error.value == "huge"
        assert "'huge'" in str(error)
        assert "'brief', 'quick', 'data', or 'full'" in str(error)

    def test_gtype_message(self):
        error = AccAmountRequired(GEOType.SERIES)

        assert error.gtype is GEOType.SERIES
        assert str(error).endswith("for Series")

    def test_unavailable_ftp_format_message(self):
        error = UnavailableFTPFormat(GEOType.SAMPLES, "soft")

        assert str(error) == "Samples never own soft file."
        assert error.details == {"gtype": GEOType.SAMPLES, "ftype": "soft"}

    def test_unavailable_format_message(self):
        error = UnavailableFormat(GEOType.DATASETS, "xml")

        assert "Datasets" in str(error)
        assert "'xml'" in str(error)

    def test_length_error_message(self):
        error = InputLengthError("amount", 2, 3)

        assert str(error) == (
            "Invalid 'amount': Length mismatch: got 2 element(s), but expected 3"
        )

    def test_no_entry_error(self):
        error = NoEntryError("GDS5", "https://example.org")

        assert error.details["accession"] == "GDS5"
        assert "GDS5" in str(error)
