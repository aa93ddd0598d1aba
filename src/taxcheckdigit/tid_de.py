"""
German personal tax identification number (Steuerliche Identifikationsnummer)
"""

import logging
from collections import Counter
from typing import List

from pydantic import ValidationError

from .config import get_settings
from .exceptions import AdjacentTripletError, DuplicationError
from .hybrid import Modulus11TenCheckDigit

logger = logging.getLogger(__name__)


class TidDECheckDigit(Modulus11TenCheckDigit):
    """
    German Steuer-IdNr. (since 2008, natural persons)

    Format (11 digits): nnnnnnnnnnp
    - 10 digits
    - 1 check digit, hybrid MOD 11,10

    Among the first 10 digits exactly one value is repeated, either
    twice or three times. A value repeated three times must not occupy
    three consecutive positions.

    Example: 02476291358 (test number, leading zero)
    """

    country = "DE"
    length = 11

    def validate_digits(self, code: str, digits: List[int]) -> None:
        """
        Check the repetition rule on the first 10 digits

        Raises:
            DuplicationError: no repeated value, or more than one
            AdjacentTripletError: the triplicate digits are consecutive
        """
        counts = Counter(digits)
        doublets = [d for d, n in counts.items() if n == 2]
        triplets = [d for d, n in counts.items() if n == 3]

        if any(n > 3 for n in counts.values()):
            self._reject(code, DuplicationError("Invalid code, digit repeated more than three times"))
        if not doublets and not triplets:
            self._reject(code, DuplicationError("Invalid code, no digit repeated"))
        if len(doublets) > 1:
            self._reject(code, DuplicationError("Invalid code, more than one duplicate digit"))
        if len(triplets) > 1:
            self._reject(code, DuplicationError("Invalid code, more than one triplicate digit"))
        if doublets and triplets:
            self._reject(code, DuplicationError("Invalid code, both duplicate and triplicate digits"))

        if triplets:
            digit = triplets[0]
            i = digits.index(digit)
            if digits[i + 1:i + 3] == [digit, digit]:
                self._reject(
                    code,
                    AdjacentTripletError(f"Invalid code, triplicate digit {digit} in consecutive positions"),
                )

    def _reject(self, code: str, error: DuplicationError) -> None:
        try:
            log_rejections = get_settings().log_rejections
        except ValidationError as e:
            logger.debug("Invalid settings, rejection logged at DEBUG: %s", e)
            log_rejections = False
        if log_rejections:
            logger.warning("%s: %s", code, error)
        else:
            logger.debug("%s: %s", code, error)
        raise error
