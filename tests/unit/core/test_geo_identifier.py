"""
Unit tests for GEO accession parsing and type classification.
"""

import pytest

from geolink.core.exceptions import GEOParseError, InvalidAccession
from geolink.core.identifiers import GEOIdentifier, GEOType, geo_gtype, parse_identifier


@pytest.mark.unit
class TestParseIdentifier:
    """Test prefix-based classification."""

    @pytest.mark.parametrize(
        "raw,gtype",
        [
            ("GDS5", GEOType.DATASETS),
            ("GSE12345", GEOType.SERIES),
            ("GPL570", GEOType.PLATFORMS),
            ("GSM1", GEOType.SAMPLES),
        ],
    )
    def test_known_prefixes(self, raw, gtype):
        assert parse_identifier(raw).gtype is gtype

    def test_accession_is_uppercased(self):
        identifier = parse_identifier("gSe1234")

        assert identifier == GEOIdentifier(accession="GSE1234", gtype=GEOType.SERIES)

    def test_type_depends_only_on_prefix(self):
        """Anything after the prefix is carried through unchecked."""
        identifier = parse_identifier("gsm_not_digits")

        assert identifier.gtype is GEOType.SAMPLES
        assert identifier.accession == "GSM_NOT_DIGITS"

    @pytest.mark.parametrize("raw", ["", "GS", "XYZ123", "SRP123", " GSE1", "PRJNA1"])
    def test_unknown_prefix_fails(self, raw):
        with pytest.raises(InvalidAccession) as exc_info:
            parse_identifier(raw)

        assert exc_info.value.details["value"] == raw
        assert "GDS" in str(exc_info.value)

    def test_non_string_fails(self):
        with pytest.raises(GEOParseError):
            parse_identifier(None)

    def test_identifier_is_immutable(self):
        identifier = parse_identifier("GSE1")

        with pytest.raises(AttributeError):
            identifier.accession = "GSE2"


@pytest.mark.unit
class TestGEOType:
    """Test GEOType names and prefixes."""

    def test_prefixes(self):
        assert GEOType.DATASETS.prefix == "GDS"
        assert GEOType.SERIES.prefix == "GSE"
        assert GEOType.PLATFORMS.prefix == "GPL"
        assert GEOType.SAMPLES.prefix == "GSM"

    def test_str_is_type_name(self):
        assert str(GEOType.PLATFORMS) == "Platforms"

    def test_geo_gtype_name(self):
        assert geo_gtype("gse1") == "Series"

    def test_geo_gtype_abbreviated(self):
        assert geo_gtype("gds5", abbreviated=True) == "GDS"

    def test_geo_gtype_invalid(self):
        with pytest.raises(InvalidAccession):
            geo_gtype("ABC1")
