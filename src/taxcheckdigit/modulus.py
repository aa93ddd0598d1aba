"""
Weighted modulus check digit engine
Shared by every routine whose digits carry a fixed positional weight
"""

from abc import abstractmethod

from .alphabet import digit_value
from .base import CheckDigit
from .exceptions import ZeroSumError

MODULUS_10 = 10
MODULUS_11 = 11
MODULUS_97 = 97


class ModulusCheckDigit(CheckDigit):
    """
    Weighted modulus check digit routine

    Every character is converted to a value, weighted by its position
    and summed. The sum modulo ``modulus`` is turned into the check
    value by ``check_value``.

    Positions are 1-based from both ends. The right-hand position
    always counts the first check digit as 1, whether or not the code
    passed in carries it, so a weight rule can mask the check digit
    by returning 0 for it.
    """

    def __init__(self, modulus: int):
        """
        Args:
            modulus: Base the weighted sum is reduced by
        """
        self.modulus = modulus

    def calculate_modulus(self, code: str, includes_check_digit: bool) -> int:
        """
        Calculate the weighted sum of a code modulo ``modulus``

        Args:
            code: Code with or without its check digits
            includes_check_digit: Whether code carries its check digits

        Returns:
            Remainder in [0, modulus)

        Raises:
            InvalidCharacterError: a character has no numeric value
            ZeroSumError: weighted sum is zero
        """
        lth = len(code) + (0 if includes_check_digit else self.check_digit_length)
        total = 0
        for i, character in enumerate(code):
            left_pos = i + 1
            right_pos = lth - i
            char_value = self.to_int(character, left_pos, right_pos)
            total += self.weighted_value(char_value, left_pos, right_pos)
        if total == 0:
            raise ZeroSumError()
        return total % self.modulus

    def to_int(self, character: str, left_pos: int, right_pos: int) -> int:
        """Numeric value of a character, digits only by default"""
        return digit_value(character, left_pos)

    @abstractmethod
    def weighted_value(self, char_value: int, left_pos: int, right_pos: int) -> int:
        """
        Weighted value of a character at a position

        Args:
            char_value: Numeric value of the character
            left_pos: Position counting from left to right
            right_pos: Position counting from right to left

        Returns:
            Contribution to the sum, 0 for unweighted positions
        """

    def check_value(self, remainder: int) -> int:
        """Map the remainder to the check value"""
        return (self.modulus - remainder) % self.modulus

    def compute_check_value(self, code: str, includes_check_digit: bool) -> int:
        return self.check_value(self.calculate_modulus(code, includes_check_digit))
