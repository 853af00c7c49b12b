from __future__ import annotations

from typing import Optional


class WarekiError(ValueError):
    """Base class for every conversion failure.

    ``code`` is the stable tag exposed to callers (and in HTTP responses),
    ``text`` is the offending fragment of the input when it is known.
    """

    code = "WarekiError"

    def __init__(self, message: str, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.text = text


class MalformedInputError(WarekiError):
    """The input does not follow any accepted notation."""


class InvalidDateError(WarekiError):
    """The notation is valid but the date it describes is not."""


class InvalidNumeralError(MalformedInputError):
    code = "InvalidNumeral"


class UnrecognizedFormatError(MalformedInputError):
    code = "UnrecognizedFormat"


class UnknownEraError(InvalidDateError):
    code = "UnknownEra"


class InvalidEraYearError(InvalidDateError):
    code = "InvalidEraYear"


class InvalidMonthError(InvalidDateError):
    code = "InvalidMonth"


class InvalidDayError(InvalidDateError):
    code = "InvalidDay"


class OutOfScopeError(WarekiError):
    """Resolved year lies before the Meiji era (JIS X 0301 leaves it undefined)."""

    code = "OutOfScope"
