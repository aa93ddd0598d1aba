"""
String helpers shared by the check digit routines
"""

from typing import Optional


def is_blank(code: Optional[str]) -> bool:
    """Return True if code is None, empty or only whitespace"""
    return code is None or not code.strip()


def parse_integer(text: Optional[str]) -> Optional[int]:
    """
    Parse a string made only of ASCII digits

    Args:
        text: Numeric substring

    Returns:
        Integer value, or None if text is empty or contains anything else
    """
    if not text or not (text.isascii() and text.isdigit()):
        return None
    return int(text)
