from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date, datetime, timezone

from .classifier import GANNEN, ClassifiedDate, DateType
from .eras import ERAS, Era, EraTable
from .errors import InvalidDayError, InvalidEraYearError, InvalidMonthError, OutOfScopeError
from .numerals import parse_numeral

# JIS X 0301 は明治改暦より前の日付を定義しない
MIN_YEAR = 1868


@dataclass(frozen=True)
class ResolvedDate:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.year < MIN_YEAR:
            raise OutOfScopeError(f"year must be {MIN_YEAR} or later, got {self.year}")
        if not 1 <= self.month <= 12:
            raise InvalidMonthError(f"month must be within 1-12, got {self.month}")
        last_day = monthrange(self.year, self.month)[1]
        if not 1 <= self.day <= last_day:
            raise InvalidDayError(
                f"day must be within 1-{last_day} for {self.year:04d}-{self.month:02d}, got {self.day}"
            )

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        """Midnight UTC of the resolved day."""
        return datetime(self.year, self.month, self.day, tzinfo=timezone.utc)

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class Conversion:
    date_type: DateType
    era: Era
    era_year: int
    date: ResolvedDate


def resolve_era(classified: ClassifiedDate, eras: EraTable = ERAS) -> Era:
    token = classified.fields.era_token
    if classified.date_type is DateType.JIS_X0301_BASIC or token is None:
        return eras.default()
    if classified.date_type is DateType.JIS_X0301_EXTENDED:
        return eras.by_letter_code(token)
    if classified.date_type is DateType.JIS_X0301_EXTENDED_WITH_KANJI:
        return eras.by_short_name(token)
    return eras.by_kanji_name(token)


def _era_year(classified: ClassifiedDate) -> int:
    raw_year = classified.fields.year
    if raw_year == GANNEN and classified.date_type is DateType.SEPARATED_WITH_KANJI:
        return 1
    return parse_numeral(raw_year)


def resolve_detailed(classified: ClassifiedDate, eras: EraTable = ERAS) -> Conversion:
    era = resolve_era(classified, eras)

    era_year = _era_year(classified)
    if era_year < 1:
        raise InvalidEraYearError(
            f"{era.kanji_name} year must be 1 or later, got {era_year}",
            text=classified.fields.year,
        )

    year = era.to_gregorian(era_year)
    if year < MIN_YEAR:
        raise OutOfScopeError(
            f"{era.kanji_name}{era_year}年 resolves to {year}, before {MIN_YEAR}",
            text=classified.fields.year,
        )

    month = parse_numeral(classified.fields.month)
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"month must be within 1-12, got {month}", text=classified.fields.month)

    day = parse_numeral(classified.fields.day)
    last_day = monthrange(year, month)[1]
    if not 1 <= day <= last_day:
        raise InvalidDayError(
            f"day must be within 1-{last_day} for {year:04d}-{month:02d}, got {day}",
            text=classified.fields.day,
        )

    return Conversion(classified.date_type, era, era_year, ResolvedDate(year, month, day))


def resolve(classified: ClassifiedDate, eras: EraTable = ERAS) -> ResolvedDate:
    return resolve_detailed(classified, eras).date
