"""
Exceptions raised while calculating check digits
"""


class CheckDigitError(ValueError):
    """Base class for every check digit failure"""


class MissingCodeError(CheckDigitError):
    """Code is blank or absent"""

    def __init__(self, message: str = "Code is missing"):
        super().__init__(message)


class ZeroSumError(CheckDigitError):
    """An all-zero code can never be a valid identifier"""

    def __init__(self, message: str = "Invalid code, sum is zero"):
        super().__init__(message)


class InvalidCharacterError(CheckDigitError):
    """A character could not be mapped to a numeric value"""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character {character!r} at position {position}")


class InvalidLengthError(CheckDigitError):
    """Code does not have the length the algorithm expects"""

    def __init__(self, code: str, expected: int):
        self.expected = expected
        super().__init__(f"Invalid code length, expected {expected}, got {len(code)}")


class InvalidCheckDigitValueError(CheckDigitError):
    """A check value cannot be rendered as (or parsed from) check digits"""


class DuplicationError(CheckDigitError):
    """Digit repetition pattern of a German tax ID is not allowed"""


class AdjacentTripletError(DuplicationError):
    """A triplicate digit of a German tax ID occupies three consecutive positions"""


class InvalidSirenError(CheckDigitError):
    """French VAT number built on an invalid SIREN"""

    def __init__(self, code: str):
        super().__init__(f"Invalid code, {code} is not a valid SIREN")


class UnknownCountryError(KeyError):
    """No check digit routine is registered for a country code"""
