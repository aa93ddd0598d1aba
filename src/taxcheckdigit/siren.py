"""
SIREN (French company registry number) validation, delegated to python-stdnum
"""

from typing import Optional

from stdnum.fr import siren


def is_valid_siren(code: Optional[str]) -> bool:
    """
    Check the format and Luhn checksum of a SIREN

    Args:
        code: 9-digit SIREN

    Returns:
        True if valid, False otherwise
    """
    if not code or len(code) != 9:
        return False
    return siren.is_valid(code)
