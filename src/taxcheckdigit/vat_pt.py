"""
Portuguese VAT identification number (NIPC / NIF)
"""

from .modulus import MODULUS_10, MODULUS_11, ModulusCheckDigit


class VatPTCheckDigit(ModulusCheckDigit):
    """
    Portuguese VAT number

    Format (9 digits): 8 digits + 1 check digit

    Weights 9..2 from left to right. The check digit is
    11 - (sum mod 11), where 10 and 11 are written as 0.
    """

    country = "PT"
    length = 9

    def __init__(self):
        super().__init__(MODULUS_11)

    def weighted_value(self, char_value: int, left_pos: int, right_pos: int) -> int:
        if left_pos < self.length:
            return char_value * (1 + self.length - left_pos)
        return 0

    def check_value(self, remainder: int) -> int:
        return super().check_value(remainder) % MODULUS_10
