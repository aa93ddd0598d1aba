"""
French VAT identification number (numéro de TVA intracommunautaire)
"""

import logging
from typing import Optional

from .alphabet import alphanumeric_value, is_digit, is_letter
from .codec import from_check_digit, to_check_digit
from .exceptions import (
    CheckDigitError,
    InvalidLengthError,
    InvalidSirenError,
    MissingCodeError,
    ZeroSumError,
)
from .modulus import MODULUS_11, MODULUS_97, ModulusCheckDigit
from .siren import is_valid_siren
from .text import is_blank, parse_integer

logger = logging.getLogger(__name__)


class VatFRCheckDigit(ModulusCheckDigit):
    """
    French VAT number

    Format (11 characters): 2-character key + 9-digit SIREN

    The numeric key is (SIREN * 100 + 12) mod 97, written with two
    digits. New style keys mix a letter of the alphabet
    0-9A-Z (without I and O) with a digit and are checked modulo 11;
    they cannot be calculated since several keys fit one SIREN.

    Example: 83404833048
    """

    country = "FR"
    length = 11
    check_digit_length = 2

    def __init__(self):
        super().__init__(MODULUS_97)

    def weighted_value(self, char_value: int, left_pos: int, right_pos: int) -> int:
        # right_pos counts two trailing places for the appended "12"
        return char_value * 10 ** (right_pos - 1)

    def check_value(self, remainder: int) -> int:
        return (remainder + 12) % MODULUS_97

    def calculate(self, code: Optional[str]) -> str:
        """
        Calculate the numeric key of a SIREN

        Args:
            code: 9-digit SIREN

        Returns:
            Two-digit key

        Raises:
            MissingCodeError: code is blank
            ZeroSumError: code is all zeros
            InvalidLengthError: code is not 9 characters long
            InvalidSirenError: code is not a valid SIREN
        """
        if is_blank(code):
            raise MissingCodeError()
        if parse_integer(code) == 0:
            raise ZeroSumError()
        if len(code) != self.body_length:
            raise InvalidLengthError(code, self.body_length)
        if not is_valid_siren(code):
            raise InvalidSirenError(code)
        cd = self.compute_check_value(code, False)
        logger.debug("%s12 modulo 97 = %d", code, cd)
        return to_check_digit(cd, self.check_digit_length)

    def is_valid_old_style(self, code: str) -> bool:
        """
        Validate a code with a purely numeric key

        Raises:
            InvalidCheckDigitValueError: key or SIREN is not numeric
        """
        cd = from_check_digit(code[:self.check_digit_length])
        cde = from_check_digit((code + "12")[self.check_digit_length:])
        return cd == cde % MODULUS_97

    def is_valid(self, code: Optional[str]) -> bool:
        """
        Validate a French VAT number (key + SIREN)

        The key style is told apart by its two characters:
        1. letter + digit: new style, s = s0 * 34 + s1 - 100
        2. digit + letter: new style, s = s0 * 24 + s1 - 10
        3. digit + digit: old style numeric key
        Anything else is invalid.

        Args:
            code: 11-character VAT number without country prefix

        Returns:
            True if valid, False otherwise
        """
        if is_blank(code) or len(code) != self.length:
            return False
        siren = code[self.check_digit_length:]
        siren_value = parse_integer(siren)
        if not siren_value or not is_valid_siren(siren):
            return False

        c0, c1 = code[0], code[1]
        try:
            if is_letter(c0) and is_digit(c1):
                s = alphanumeric_value(c0, 1) * 34 + alphanumeric_value(c1, 2) - 100
            elif is_digit(c0) and is_letter(c1):
                s = alphanumeric_value(c0, 1) * 24 + alphanumeric_value(c1, 2) - 10
            elif is_digit(c0) and is_digit(c1):
                return self.is_valid_old_style(code)
            else:
                logger.debug("%s: invalid key %r", code, code[:self.check_digit_length])
                return False
        except CheckDigitError as e:
            logger.debug("%s rejected: %s", code, e)
            return False

        p = s // MODULUS_11 + 1
        return s % MODULUS_11 == (siren_value + p) % MODULUS_11
