"""
taxcheckdigit - Check digits of national tax and VAT identification numbers

Usage:
    from taxcheckdigit import get_check_digit

    de = get_check_digit("DE")
    de.calculate("0247629135")     # "8"
    de.is_valid("02476291358")     # True

    fr = get_check_digit("FR")
    fr.calculate("404833048")      # "83"
    fr.is_valid("83404833048")     # True
"""

__version__ = "1.0.0"

from .base import CheckDigit
from .exceptions import (
    AdjacentTripletError,
    CheckDigitError,
    DuplicationError,
    InvalidCharacterError,
    InvalidCheckDigitValueError,
    InvalidLengthError,
    InvalidSirenError,
    MissingCodeError,
    UnknownCountryError,
    ZeroSumError,
)
from .hybrid import Modulus11TenCheckDigit
from .modulus import ModulusCheckDigit
from .registry import available_countries, get_check_digit
from .tid_de import TidDECheckDigit
from .vat_el import VatELCheckDigit
from .vat_fr import VatFRCheckDigit
from .vat_hu import VatHUCheckDigit
from .vat_pt import VatPTCheckDigit

__all__ = [
    "CheckDigit",
    "ModulusCheckDigit",
    "Modulus11TenCheckDigit",
    "TidDECheckDigit",
    "VatELCheckDigit",
    "VatFRCheckDigit",
    "VatHUCheckDigit",
    "VatPTCheckDigit",
    "get_check_digit",
    "available_countries",
    "CheckDigitError",
    "MissingCodeError",
    "ZeroSumError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "InvalidCheckDigitValueError",
    "DuplicationError",
    "AdjacentTripletError",
    "InvalidSirenError",
    "UnknownCountryError",
]
