"""
Hybrid MOD 11,10 check digit engine (ISO 7064)
"""

from typing import List

from .alphabet import digit_value
from .base import CheckDigit
from .modulus import MODULUS_10, MODULUS_11


class Modulus11TenCheckDigit(CheckDigit):
    """
    Hybrid MOD 11,10 check digit routine

    Digits are not weighted by position. Each digit is folded into a
    running product that alternates between modulus 10 and 11:

        s = (digit + product) mod 10
        product = 2 * (s or 10) mod 11

    starting with product = 10. The check digit is 11 - product, where
    10 is written as 0.
    """

    def digits(self, code: str, includes_check_digit: bool) -> List[int]:
        """Values of the digits that take part in the calculation"""
        body = code[:-1] if includes_check_digit else code
        return [digit_value(c, i + 1) for i, c in enumerate(body)]

    def calculate_modulus(self, code: str, includes_check_digit: bool) -> int:
        """
        Fold the digits of a code and return its check value

        Args:
            code: Code with or without its check digit
            includes_check_digit: Whether code carries its check digit

        Returns:
            Check value 0-9

        Raises:
            InvalidCharacterError: code contains a non digit
        """
        digits = self.digits(code, includes_check_digit)
        self.validate_digits(code, digits)
        product = MODULUS_10
        for digit in digits:
            s = (digit + product) % MODULUS_10
            product = 2 * (s or MODULUS_10) % MODULUS_11
        check = MODULUS_11 - product
        return 0 if check == MODULUS_10 else check

    def validate_digits(self, code: str, digits: List[int]) -> None:
        """Hook for structural rules on the digits, nothing by default"""

    def compute_check_value(self, code: str, includes_check_digit: bool) -> int:
        return self.calculate_modulus(code, includes_check_digit)
