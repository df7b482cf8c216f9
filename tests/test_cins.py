"""Tests for the CINS view of a CUSIP."""

from __future__ import annotations

import pytest
from hypothesis import given

from cusip.core.identifiers import CINS, CUSIP
from cusip.core.result import unwrap
from tests.strategies import cins_cusips, cusips


def _parse(raw: str) -> CUSIP:
    return unwrap(CUSIP.parse(raw))


class TestCINSView:
    def test_fields(self) -> None:
        cins = _parse("S08000AA9").as_cins()
        assert cins is not None
        assert cins.country_code() == "S"
        assert cins.issuer_num() == "08000"
        assert cins.issue_num() == "AA"
        assert str(cins) == "S08000AA9"

    def test_back_reference(self) -> None:
        cusip = _parse("S08000AA9")
        cins = CINS.new(cusip)
        assert cins is not None
        assert cins.as_cusip() is cusip

    def test_digit_first_is_not_cins(self) -> None:
        cusip = _parse("037833100")
        assert cusip.as_cins() is None
        assert CINS.new(cusip) is None
        assert cusip.cins_country_code() is None

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(TypeError, match="starting with a letter"):
            CINS(cusip=_parse("037833100"))

    def test_base_country(self) -> None:
        cusip = _parse("S08000AA9")
        cins = cusip.as_cins()
        assert cins is not None
        assert cins.is_base() and not cins.is_extended()
        assert cusip.is_cins_base() and not cusip.is_cins_extended()

    @pytest.mark.parametrize("country", ["I", "O", "Z"])
    def test_unassigned_countries_still_cins(self, country: str) -> None:
        cusip = unwrap(CUSIP.build_from_payload(country + "1234510"))
        assert cusip.is_cins()
        assert cusip.cins_country_code() == country
        cins = cusip.as_cins()
        assert cins is not None
        assert cins.is_extended() and not cins.is_base()

    @given(cins_cusips())
    def test_base_and_extended_partition_letters(self, cusip: CUSIP) -> None:
        cins = cusip.as_cins()
        assert cins is not None
        assert cins.is_base() != cins.is_extended()
        assert cins.country_code() == cusip.cins_country_code() == str(cusip)[0]
        assert cins.country_code() + cins.issuer_num() == cusip.issuer_num()
        assert cins.issue_num() == cusip.issue_num()

    @given(cusips())
    def test_as_cins_iff_is_cins(self, cusip: CUSIP) -> None:
        assert (cusip.as_cins() is not None) == cusip.is_cins()
        if not cusip.is_cins():
            assert not cusip.is_cins_base()
            assert not cusip.is_cins_extended()
