from __future__ import annotations

import pytest

from .classifier import GANNEN, ClassifiedDate, DateType, RawDateFields
from .eras import ERAS
from .errors import (
    InvalidDayError,
    InvalidEraYearError,
    InvalidMonthError,
    InvalidNumeralError,
    OutOfScopeError,
)
from .resolver import ResolvedDate, resolve, resolve_era


def _classified(date_type: DateType, era: str | None, year: str, month: str = "1", day: str = "1") -> ClassifiedDate:
    return ClassifiedDate(date_type, RawDateFields(era_token=era, year=year, month=month, day=day))


@pytest.mark.parametrize(
    "date_type, token, expected",
    [
        (DateType.JIS_X0301_BASIC, None, "令和"),
        (DateType.JIS_X0301_EXTENDED, "T", "大正"),
        (DateType.JIS_X0301_EXTENDED_WITH_KANJI, "昭", "昭和"),
        (DateType.SEPARATED_WITH_KANJI, "明治", "明治"),
    ],
)
def test_resolve_era_uses_the_lookup_for_each_notation(date_type: DateType, token, expected: str) -> None:
    assert resolve_era(_classified(date_type, token, "1")).kanji_name == expected


def test_gannen_only_counts_in_separated_notation() -> None:
    separated = _classified(DateType.SEPARATED_WITH_KANJI, "令和", GANNEN, "5", "1")
    assert resolve(separated) == ResolvedDate(2019, 5, 1)

    extended = _classified(DateType.JIS_X0301_EXTENDED, "R", GANNEN)
    with pytest.raises(InvalidNumeralError):
        resolve(extended)


def test_era_year_zero_is_rejected() -> None:
    with pytest.raises(InvalidEraYearError):
        resolve(_classified(DateType.JIS_X0301_EXTENDED, "R", "00"))


def test_resolve_defaults_to_builtin_table() -> None:
    assert resolve(_classified(DateType.JIS_X0301_BASIC, None, "8", "12", "31"), ERAS) == ResolvedDate(2026, 12, 31)


@pytest.mark.parametrize(
    "fields, error",
    [
        ((1, 13, 40), OutOfScopeError),
        ((1867, 12, 31), OutOfScopeError),
        ((2019, 13, 1), InvalidMonthError),
        ((2019, 0, 1), InvalidMonthError),
        ((2023, 2, 29), InvalidDayError),
        ((2019, 4, 0), InvalidDayError),
    ],
)
def test_resolved_date_enforces_calendar_invariants(fields: tuple, error: type) -> None:
    with pytest.raises(error):
        ResolvedDate(*fields)


def test_resolved_date_accepts_leap_day() -> None:
    assert ResolvedDate(2024, 2, 29).isoformat() == "2024-02-29"
