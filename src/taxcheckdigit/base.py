"""
Common interface of all check digit routines
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .codec import to_check_digit
from .exceptions import CheckDigitError, InvalidLengthError, MissingCodeError, ZeroSumError
from .text import is_blank, parse_integer

logger = logging.getLogger(__name__)


class CheckDigit(ABC):
    """
    Base class for check digit routines

    Subclasses describe their code layout with ``length`` (including
    the check digits) and ``check_digit_length``, and implement
    ``compute_check_value``. Routines hold no state after construction,
    so one shared instance per class is enough (see ``get_instance``).
    """

    country: str = ""
    length: int = 0
    check_digit_length: int = 1

    @classmethod
    def get_instance(cls) -> "CheckDigit":
        """Get the shared instance of this routine"""
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = cls()
            cls._instance = instance
        return instance

    @property
    def body_length(self) -> int:
        """Length of a code without its check digits"""
        return self.length - self.check_digit_length

    @abstractmethod
    def compute_check_value(self, code: str, includes_check_digit: bool) -> int:
        """
        Compute the numeric check value of a code

        Args:
            code: Code with or without its check digits
            includes_check_digit: Whether code carries its check digits

        Returns:
            Check value ready to be rendered by the codec
        """

    def calculate(self, code: Optional[str]) -> str:
        """
        Calculate the check digit(s) for a code

        Args:
            code: Code without its check digits

        Returns:
            Check digit string

        Raises:
            MissingCodeError: code is blank
            ZeroSumError: code is all zeros
            InvalidLengthError: code has the wrong length
            CheckDigitError: algorithm specific failures
        """
        if is_blank(code):
            raise MissingCodeError()
        if parse_integer(code) == 0:
            raise ZeroSumError()
        if len(code) != self.body_length:
            raise InvalidLengthError(code, self.body_length)
        value = self.compute_check_value(code, False)
        return to_check_digit(value, self.check_digit_length)

    def is_valid(self, code: Optional[str]) -> bool:
        """
        Validate a code including its trailing check digit(s)

        Args:
            code: Complete code

        Returns:
            True if valid, False otherwise (never raises)
        """
        if is_blank(code) or len(code) != self.length:
            return False
        body = code[:self.body_length]
        check = code[self.body_length:]
        try:
            if parse_integer(body) == 0:
                raise ZeroSumError()
            value = self.compute_check_value(code, True)
            return to_check_digit(value, self.check_digit_length) == check
        except CheckDigitError as e:
            logger.debug("%s rejected: %s", code, e)
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(country={self.country!r}, length={self.length})"
