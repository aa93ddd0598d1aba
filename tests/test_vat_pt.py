"""
Tests for the Portuguese VAT number.
"""

import pytest

from taxcheckdigit.exceptions import InvalidLengthError, ZeroSumError
from taxcheckdigit.vat_pt import VatPTCheckDigit


@pytest.fixture
def routine():
    return VatPTCheckDigit.get_instance()


class TestVatPT:

    @pytest.mark.parametrize("code", ["501964843", "123456789", "000000060"])
    def test_valid(self, routine, code):
        assert routine.is_valid(code)

    @pytest.mark.parametrize("body,expected", [
        ("50196484", "3"),
        ("12345678", "9"),
        ("00000006", "0"),   # remainder 1, 11 - 1 = 10
        ("00011000", "0"),   # remainder 0
    ])
    def test_calculate(self, routine, body, expected):
        assert routine.calculate(body) == expected

    @pytest.mark.parametrize("code", ["501964842", "50196484", "5019648431", "50196484X", ""])
    def test_invalid(self, routine, code):
        assert not routine.is_valid(code)

    def test_errors(self, routine):
        with pytest.raises(ZeroSumError):
            routine.calculate("000000000")
        with pytest.raises(InvalidLengthError):
            routine.calculate("5019648")
