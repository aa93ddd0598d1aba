"""
Greek VAT identification number (Arithmos Forologikou Mitroou, AFM)
"""

from .modulus import MODULUS_11, ModulusCheckDigit


class VatELCheckDigit(ModulusCheckDigit):
    """
    Greek VAT number

    Format (9 digits): 8 digits + 1 check digit

    Digits are weighted by powers of two from right to left, the
    digit next to the check digit having weight 2. The check digit is
    the weighted sum modulo 11, where 10 is written as 0.
    """

    country = "EL"
    length = 9

    def __init__(self):
        super().__init__(MODULUS_11)

    def weighted_value(self, char_value: int, left_pos: int, right_pos: int) -> int:
        if left_pos >= self.length:
            return 0
        return char_value * 2 ** (right_pos - 1)

    def check_value(self, remainder: int) -> int:
        return 0 if remainder > 9 else remainder
