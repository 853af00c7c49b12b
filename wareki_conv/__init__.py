"""Convert Japanese era (wareki) date strings into Gregorian dates."""

from .classifier import ClassifiedDate, DateType, RawDateFields, classify, find_type
from .converter import convert, convert_detailed
from .eras import ERAS, Era, EraTable
from .errors import (
    InvalidDateError,
    InvalidDayError,
    InvalidEraYearError,
    InvalidMonthError,
    InvalidNumeralError,
    MalformedInputError,
    OutOfScopeError,
    UnknownEraError,
    UnrecognizedFormatError,
    WarekiError,
)
from .numerals import parse_numeral, to_half_width
from .resolver import Conversion, ResolvedDate, resolve, resolve_era

__all__ = [
    # converter
    "convert",
    "convert_detailed",
    # classifier
    "ClassifiedDate",
    "DateType",
    "RawDateFields",
    "classify",
    "find_type",
    # eras
    "ERAS",
    "Era",
    "EraTable",
    # resolver
    "Conversion",
    "ResolvedDate",
    "resolve",
    "resolve_era",
    # numerals
    "parse_numeral",
    "to_half_width",
    # errors
    "WarekiError",
    "MalformedInputError",
    "InvalidDateError",
    "InvalidNumeralError",
    "UnrecognizedFormatError",
    "UnknownEraError",
    "InvalidEraYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "OutOfScopeError",
]
