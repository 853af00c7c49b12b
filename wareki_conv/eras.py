from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple

from .errors import UnknownEraError

# 表記ごとに元号トークンが取りうる形 (classifier もこの形で照合する)
KANJI = "[一-鿿]"
LETTER_CODE_SHAPE = "[A-Z]"
SHORT_NAME_SHAPE = KANJI
KANJI_NAME_SHAPE = f"{KANJI}{{2,4}}"

TOKEN_SHAPES = {
    "kanji_name": re.compile(KANJI_NAME_SHAPE),
    "short_name": re.compile(SHORT_NAME_SHAPE),
    "letter_code": re.compile(LETTER_CODE_SHAPE),
}


@dataclass(frozen=True)
class Era:
    kanji_name: str
    short_name: str
    letter_code: str
    start_year: int
    name: str = ""

    def to_gregorian(self, era_year: int) -> int:
        return self.start_year + era_year - 1


class EraTable:
    """Read-only era list ordered from oldest to newest.

    The newest entry is the era assumed when an input has no era marker.
    Only the Gregorian year in which each era's year 1 falls is recorded;
    the exact first day of an era is intentionally not modelled.
    """

    def __init__(self, eras: Iterable[Era]) -> None:
        self._eras: Tuple[Era, ...] = tuple(eras)
        if not self._eras:
            raise ValueError("era table must not be empty")

        self._by_kanji_name = self._index("kanji_name")
        self._by_short_name = self._index("short_name")
        self._by_letter_code = self._index("letter_code")

        for older, newer in zip(self._eras, self._eras[1:]):
            if newer.start_year <= older.start_year:
                raise ValueError(
                    f"era start years must increase: {older.kanji_name}({older.start_year})"
                    f" -> {newer.kanji_name}({newer.start_year})"
                )

    def _index(self, attribute: str) -> Dict[str, Era]:
        index: Dict[str, Era] = {}
        for era in self._eras:
            key = getattr(era, attribute)
            if not TOKEN_SHAPES[attribute].fullmatch(key):
                raise ValueError(
                    f"era {attribute} '{key}' must match {TOKEN_SHAPES[attribute].pattern}"
                )
            if key in index:
                raise ValueError(f"duplicate era {attribute}: {key}")
            index[key] = era
        return index

    def __iter__(self) -> Iterator[Era]:
        return iter(self._eras)

    def __len__(self) -> int:
        return len(self._eras)

    def by_kanji_name(self, kanji_name: str) -> Era:
        try:
            return self._by_kanji_name[kanji_name]
        except KeyError:
            raise UnknownEraError(f"unknown era name '{kanji_name}'", text=kanji_name) from None

    def by_short_name(self, short_name: str) -> Era:
        try:
            return self._by_short_name[short_name]
        except KeyError:
            raise UnknownEraError(f"unknown era abbreviation '{short_name}'", text=short_name) from None

    def by_letter_code(self, letter_code: str) -> Era:
        try:
            return self._by_letter_code[letter_code]
        except KeyError:
            raise UnknownEraError(f"unknown era code '{letter_code}'", text=letter_code) from None

    def default(self) -> Era:
        return self._eras[-1]


ERAS = EraTable(
    (
        Era("明治", "明", "M", 1868, "Meiji"),
        Era("大正", "大", "T", 1912, "Taisho"),
        Era("昭和", "昭", "S", 1926, "Showa"),
        Era("平成", "平", "H", 1989, "Heisei"),
        Era("令和", "令", "R", 2019, "Reiwa"),
    )
)
