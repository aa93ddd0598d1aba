"""
Character to numeric value mapping
"""

from .exceptions import InvalidCharacterError

DIGITS = "0123456789"

# French VAT key alphabet: 0-9 then A-Z without I and O
ALPHABET = "0123456789ABCDEFGHJKLMNPQRSTUVWXYZ"


def digit_value(character: str, position: int = 0) -> int:
    """
    Convert a decimal digit character to its value

    Args:
        character: Single character
        position: 1-based position in the code, used in the error message

    Returns:
        Value 0-9

    Raises:
        InvalidCharacterError: character is not an ASCII digit
    """
    index = DIGITS.find(character) if len(character) == 1 else -1
    if index < 0:
        raise InvalidCharacterError(character, position)
    return index


def alphanumeric_value(character: str, position: int = 0) -> int:
    """
    Convert a character of the French alphabet to its value

    Important: I and O are not part of the alphabet, so
    - 0-9 → 0-9
    - A-H → 10-17
    - J-N → 18-22
    - P-Z → 23-33

    Args:
        character: Single character
        position: 1-based position in the code, used in the error message

    Returns:
        Index in the alphabet

    Raises:
        InvalidCharacterError: character is not in the alphabet
    """
    index = ALPHABET.find(character) if len(character) == 1 else -1
    if index < 0:
        raise InvalidCharacterError(character, position)
    return index


def is_digit(character: str) -> bool:
    return len(character) == 1 and character in DIGITS


def is_letter(character: str) -> bool:
    """True for any ASCII uppercase letter, including ones outside the alphabet"""
    return len(character) == 1 and "A" <= character <= "Z"
