"""
Unit tests for the Accession Display Bar resolver.
"""

import pytest

from geolink.core.exceptions import (
    AccAmountOmitted,
    AccAmountRequired,
    AccFormatRequired,
    AccScopeOmitted,
    AccScopeRequired,
    UnavailableFormat,
)
from geolink.core.identifiers import parse_identifier
from geolink.core.schemas import GEOFileEntry
from geolink.services.geo.adb import GEOADBResolver
from geolink.services.geo.constants import GEOADBFormat, GEOAmount, GEOScope

ACC_CGI = "https://www.ncbi.nlm.nih.gov/geo/query/acc.cgi"
GDS_BROWSER = "https://www.ncbi.nlm.nih.gov/sites/GDSbrowser"


@pytest.fixture
def series_resolver():
    return GEOADBResolver(parse_identifier("gse1234"))


@pytest.fixture
def datasets_resolver():
    return GEOADBResolver(parse_identifier("gds5"))


@pytest.mark.unit
class TestADBDefaults:
    """Test per-type defaults applied by the constructor."""

    def test_series_defaults(self, series_resolver):
        assert series_resolver.scope is GEOScope.SELF
        assert series_resolver.amount is GEOAmount.DATA
        assert series_resolver.format is GEOADBFormat.HTML

    def test_datasets_defaults(self, datasets_resolver):
        assert datasets_resolver.scope is None
        assert datasets_resolver.amount is None
        assert datasets_resolver.format is GEOADBFormat.HTML

    def test_custom_base_url(self):
        resolver = GEOADBResolver(parse_identifier("gds5"), web_base_url="https://mirror.test")

        assert resolver.url() == "https://mirror.test/sites/GDSbrowser?acc=GDS5"


@pytest.mark.unit
class TestADBSetters:
    """Test type-conditional option rules."""

    def test_datasets_reject_scope(self, datasets_resolver):
        with pytest.raises(AccScopeOmitted):
            datasets_resolver.set_scope(GEOScope.ALL)

    def test_datasets_reject_amount(self, datasets_resolver):
        with pytest.raises(AccAmountOmitted):
            datasets_resolver.set_amount(GEOAmount.FULL)

    @pytest.mark.parametrize("format", [GEOADBFormat.TEXT, GEOADBFormat.XML])
    def test_datasets_reject_text_and_xml(self, datasets_resolver, format):
        with pytest.raises(UnavailableFormat) as exc_info:
            datasets_resolver.set_format(format)

        assert exc_info.value.ftype == format.value

    def test_datasets_accept_absent_options(self, datasets_resolver):
        datasets_resolver.set_scope(None)
        datasets_resolver.set_amount(None)
        datasets_resolver.set_format(None)

        assert datasets_resolver.format is GEOADBFormat.HTML

    @pytest.mark.parametrize("accession", ["gse1", "gpl1", "gsm1"])
    def test_other_types_require_scope(self, accession):
        resolver = GEOADBResolver(parse_identifier(accession))

        with pytest.raises(AccScopeRequired):
            resolver.set_scope(None)

    @pytest.mark.parametrize("accession", ["gse1", "gpl1", "gsm1"])
    def test_other_types_require_amount(self, accession):
        resolver = GEOADBResolver(parse_identifier(accession))

        with pytest.raises(AccAmountRequired):
            resolver.set_amount(None)

    def test_other_types_require_format(self, series_resolver):
        with pytest.raises(AccFormatRequired):
            series_resolver.set_format(None)

    def test_failed_setter_keeps_state(self, series_resolver):
        with pytest.raises(AccScopeRequired):
            series_resolver.set_scope(None)

        assert series_resolver.scope is GEOScope.SELF


@pytest.mark.unit
class TestADBUrls:
    """Test URL, landing page and entry construction."""

    def test_record_url(self, series_resolver):
        series_resolver.set_scope(GEOScope.GSM)
        series_resolver.set_amount(GEOAmount.BRIEF)
        series_resolver.set_format(GEOADBFormat.TEXT)

        assert series_resolver.url() == (
            f"{ACC_CGI}?acc=GSE1234&targ=gsm&view=brief&form=text"
        )

    def test_landing_page_forces_html(self, series_resolver):
        series_resolver.set_format(GEOADBFormat.XML)

        assert series_resolver.landing_page() == (
            f"{ACC_CGI}?acc=GSE1234&targ=self&view=data&form=html"
        )
        assert series_resolver.url().endswith("form=xml")

    def test_datasets_url(self, datasets_resolver):
        assert datasets_resolver.url() == f"{GDS_BROWSER}?acc=GDS5"
        assert datasets_resolver.landing_page() == f"{GDS_BROWSER}?acc=GDS5"

    def test_datasets_entry_is_none(self, datasets_resolver):
        assert datasets_resolver.entry() is None

    @pytest.mark.parametrize(
        "format,fname",
        [
            (GEOADBFormat.TEXT, "GSE1234_full.soft"),
            (GEOADBFormat.XML, "GSE1234_full.xml"),
            (GEOADBFormat.HTML, "GSE1234_full.html"),
        ],
    )
    def test_entry_file_name(self, series_resolver, format, fname):
        series_resolver.set_amount(GEOAmount.FULL)
        series_resolver.set_format(format)

        entry = series_resolver.entry()

        assert entry == GEOFileEntry(url=series_resolver.url(), fname=fname)

    def test_queries_are_idempotent(self, series_resolver):
        assert series_resolver.url() == series_resolver.url()
        assert series_resolver.entry() == series_resolver.entry()
