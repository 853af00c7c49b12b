"""Recognise which wareki notation an input uses and cut it into raw fields.

| DateType                         | Example          |
| -------------------------------- | ---------------- |
| ``JisX0301Basic``                | ``01.02.03``     |
| ``JisX0301Extended``             | ``R01.02.03``    |
| ``JisX0301ExtendedWithKanji``    | ``令01.02.03``   |
| ``SeparatedWithKanji``           | ``令和1年2月3日`` |

JIS X 0301 asks for zero padded two-digit fields, but official documents
often drop the padding, so one-digit fields are accepted as well.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Tuple

from .eras import KANJI_NAME_SHAPE, LETTER_CODE_SHAPE, SHORT_NAME_SHAPE
from .errors import UnrecognizedFormatError

GANNEN = "元年"

# 数字は numerals で幅を解決するため、ここでは記号と英字だけを半角に寄せる
_SEPARATOR_PATTERN = str.maketrans(
    {chr(code): chr(code - 0xFEE0) for code in range(0xFF01, 0xFF5F) if not "０" <= chr(code) <= "９"}
)

_NUM = "[0-9０-９]{1,2}"
_YMD = rf"(?P<year>{_NUM})\.(?P<month>{_NUM})\.(?P<day>{_NUM})"


class DateType(str, Enum):
    JIS_X0301_BASIC = "JisX0301Basic"
    JIS_X0301_EXTENDED = "JisX0301Extended"
    JIS_X0301_EXTENDED_WITH_KANJI = "JisX0301ExtendedWithKanji"
    SEPARATED_WITH_KANJI = "SeparatedWithKanji"


@dataclass(frozen=True)
class RawDateFields:
    era_token: Optional[str]
    year: str
    month: str
    day: str


@dataclass(frozen=True)
class ClassifiedDate:
    date_type: DateType
    fields: RawDateFields


SHAPE_RULES: Tuple[Tuple[DateType, Pattern[str]], ...] = (
    (DateType.JIS_X0301_BASIC, re.compile(_YMD)),
    (DateType.JIS_X0301_EXTENDED, re.compile(rf"(?P<era>{LETTER_CODE_SHAPE}){_YMD}")),
    (DateType.JIS_X0301_EXTENDED_WITH_KANJI, re.compile(rf"(?P<era>{SHORT_NAME_SHAPE}){_YMD}")),
    (
        DateType.SEPARATED_WITH_KANJI,
        re.compile(
            rf"(?P<era>{KANJI_NAME_SHAPE})(?:(?P<year>{_NUM})年|(?P<gannen>{GANNEN}))"
            rf"(?P<month>{_NUM})月(?P<day>{_NUM})日"
        ),
    ),
)


def classify(text: str) -> ClassifiedDate:
    folded = text.translate(_SEPARATOR_PATTERN)
    for date_type, pattern in SHAPE_RULES:
        match = pattern.fullmatch(folded)
        if match is None:
            continue
        groups = match.groupdict()
        fields = RawDateFields(
            era_token=groups.get("era"),
            year=GANNEN if groups.get("gannen") else groups["year"],
            month=groups["month"],
            day=groups["day"],
        )
        return ClassifiedDate(date_type, fields)
    raise UnrecognizedFormatError(f"'{text}' does not match any wareki notation", text=text)


def find_type(text: str) -> DateType:
    return classify(text).date_type
