"""
Lookup of check digit routines by country code
"""

from typing import Dict, List

from .base import CheckDigit
from .exceptions import UnknownCountryError
from .tid_de import TidDECheckDigit
from .vat_el import VatELCheckDigit
from .vat_fr import VatFRCheckDigit
from .vat_hu import VatHUCheckDigit
from .vat_pt import VatPTCheckDigit

_ROUTINES: Dict[str, CheckDigit] = {
    routine.country: routine
    for routine in (
        TidDECheckDigit.get_instance(),
        VatELCheckDigit.get_instance(),
        VatFRCheckDigit.get_instance(),
        VatHUCheckDigit.get_instance(),
        VatPTCheckDigit.get_instance(),
    )
}

# ISO 3166 code for Greece, VAT numbers use EL
_ALIASES = {"GR": "EL"}


def get_check_digit(country: str) -> CheckDigit:
    """
    Get the shared check digit routine of a country

    Args:
        country: Country code such as "DE" or "EL" (case-insensitive)

    Returns:
        CheckDigit instance

    Raises:
        UnknownCountryError: no routine for this country
    """
    key = country.strip().upper()
    key = _ALIASES.get(key, key)
    try:
        return _ROUTINES[key]
    except KeyError:
        raise UnknownCountryError(country) from None


def available_countries() -> List[str]:
    """Sorted country codes with a registered routine"""
    return sorted(_ROUTINES)
