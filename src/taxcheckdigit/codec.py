"""
Conversion between check values and their printable check digits
"""

from .exceptions import InvalidCheckDigitValueError
from .text import parse_integer


def to_check_digit(value: int, width: int = 1) -> str:
    """
    Render a check value as check digit(s)

    Args:
        value: Check value, 0-9 for single digit schemes, 0-99 for two digits
        width: Number of check digits (1 or 2)

    Returns:
        Zero-padded decimal string of the given width

    Raises:
        InvalidCheckDigitValueError: value does not fit in width digits
    """
    if not 0 <= value < 10 ** width:
        raise InvalidCheckDigitValueError(f"Invalid check digit value {value}")
    return str(value).zfill(width)


def from_check_digit(text: str) -> int:
    """
    Parse a check digit field back to its value

    Raises:
        InvalidCheckDigitValueError: text is not numeric
    """
    value = parse_integer(text)
    if value is None:
        raise InvalidCheckDigitValueError(f"Invalid check digit {text!r}")
    return value
