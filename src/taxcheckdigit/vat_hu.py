"""
Hungarian VAT identification number (közösségi adószám)
"""

from .modulus import MODULUS_10, ModulusCheckDigit


class VatHUCheckDigit(ModulusCheckDigit):
    """
    Hungarian VAT number

    Format (8 digits): 7 digits + 1 check digit
    Weights 9, 7, 3, 1, 9, 7, 3 from left to right, modulus 10.
    """

    country = "HU"
    length = 8

    POSITION_WEIGHT = (9, 7, 3, 1)

    def __init__(self):
        super().__init__(MODULUS_10)

    def weighted_value(self, char_value: int, left_pos: int, right_pos: int) -> int:
        if left_pos >= self.length:
            return 0
        return char_value * self.POSITION_WEIGHT[(left_pos - 1) % len(self.POSITION_WEIGHT)]
