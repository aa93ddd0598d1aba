"""
Tests for the registry and properties shared by every routine.
"""

import pytest

from taxcheckdigit import get_check_digit, available_countries
from taxcheckdigit.exceptions import UnknownCountryError, ZeroSumError
from taxcheckdigit.tid_de import TidDECheckDigit
from taxcheckdigit.vat_el import VatELCheckDigit

# Structurally valid bodies per country (without check digits)
BODIES = {
    "DE": ["0247629135", "3657426180", "1121345678", "9876543219"],
    "EL": ["09425921", "12345678", "99999999", "00000001"],
    "FR": ["404833048", "732829320", "552100554", "404833022"],
    "HU": ["2137641", "1059719", "1289231", "0000001"],
    "PT": ["50196484", "12345678", "99999999", "00000006"],
}


def complete(country, body, check):
    return check + body if country == "FR" else body + check


class TestRegistry:

    def test_countries(self):
        assert available_countries() == ["DE", "EL", "FR", "HU", "PT"]

    def test_lookup_is_case_insensitive(self):
        assert get_check_digit(" de ") is TidDECheckDigit.get_instance()

    def test_greece_alias(self):
        assert get_check_digit("GR") is get_check_digit("EL")
        assert isinstance(get_check_digit("gr"), VatELCheckDigit)

    def test_unknown(self):
        with pytest.raises(UnknownCountryError):
            get_check_digit("XX")

    def test_singleton(self):
        assert TidDECheckDigit.get_instance() is TidDECheckDigit.get_instance()
        assert TidDECheckDigit.get_instance() is not VatELCheckDigit.get_instance()


@pytest.mark.parametrize("country", sorted(BODIES))
class TestCommonProperties:

    def test_round_trip(self, country):
        routine = get_check_digit(country)
        for body in BODIES[country]:
            check = routine.calculate(body)
            assert len(check) == routine.check_digit_length
            assert routine.is_valid(complete(country, body, check))

    def test_deterministic(self, country):
        routine = get_check_digit(country)
        body = BODIES[country][0]
        assert len({routine.calculate(body) for _ in range(5)}) == 1

    def test_all_zero_body(self, country):
        routine = get_check_digit(country)
        with pytest.raises(ZeroSumError):
            routine.calculate("000000000")
        with pytest.raises(ZeroSumError):
            routine.calculate("0" * routine.body_length)

    @pytest.mark.parametrize("code", [None, "", "   "])
    def test_blank_is_invalid(self, country, code):
        assert not get_check_digit(country).is_valid(code)

    def test_wrong_length_is_invalid(self, country):
        routine = get_check_digit(country)
        body = BODIES[country][0]
        code = complete(country, body, routine.calculate(body))
        assert not routine.is_valid(code[:-1])
        assert not routine.is_valid(code + "0")

    def test_out_of_alphabet_is_invalid(self, country):
        routine = get_check_digit(country)
        assert not routine.is_valid("#" * routine.length)
