from __future__ import annotations

import pytest

from .classifier import GANNEN, DateType, RawDateFields, classify, find_type
from .errors import UnrecognizedFormatError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("01.02.03", DateType.JIS_X0301_BASIC),
        ("1.2.3", DateType.JIS_X0301_BASIC),
        ("０１．０２．０３", DateType.JIS_X0301_BASIC),
        ("R01.02.03", DateType.JIS_X0301_EXTENDED),
        ("Ｈ１０．２．３", DateType.JIS_X0301_EXTENDED),
        ("令01.02.03", DateType.JIS_X0301_EXTENDED_WITH_KANJI),
        ("明1.2.3", DateType.JIS_X0301_EXTENDED_WITH_KANJI),
        ("令和1年2月3日", DateType.SEPARATED_WITH_KANJI),
        ("平成元年２月３日", DateType.SEPARATED_WITH_KANJI),
    ],
)
def test_find_type(text: str, expected: DateType) -> None:
    assert find_type(text) is expected


def test_basic_has_no_era_token() -> None:
    classified = classify("06.2.3")
    assert classified.fields == RawDateFields(era_token=None, year="06", month="2", day="3")


def test_extended_keeps_fullwidth_digits_for_numeral_parsing() -> None:
    classified = classify("Ｒ０１．０２．０３")
    assert classified.fields == RawDateFields(era_token="R", year="０１", month="０２", day="０３")


def test_separated_extracts_full_era_name() -> None:
    classified = classify("昭和64年1月7日")
    assert classified.fields == RawDateFields(era_token="昭和", year="64", month="1", day="7")


def test_gannen_is_kept_as_literal_year_token() -> None:
    classified = classify("令和元年5月1日")
    assert classified.fields.year == GANNEN
    assert classified.fields.era_token == "令和"


def test_unknown_era_tokens_still_classify() -> None:
    assert find_type("X01.02.03") is DateType.JIS_X0301_EXTENDED
    assert find_type("江01.02.03") is DateType.JIS_X0301_EXTENDED_WITH_KANJI
    assert find_type("慶応3年1月1日") is DateType.SEPARATED_WITH_KANJI


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2019-02-03",
        "R01/02/03",
        "R 01.02.03",
        "r01.02.03",
        "R001.02.03",
        "01.02",
        "01.02.03.04",
        "RH01.02.03",
        "令和1年2月3",
        "令和1年 2月3日",
        "令和年2月3日",
        "令1年2月3日",
        "令和1.2.3",
        "令和一年二月三日",
        "01.02.03日",
    ],
)
def test_unrecognised_shapes(text: str) -> None:
    with pytest.raises(UnrecognizedFormatError) as excinfo:
        classify(text)
    assert excinfo.value.code == "UnrecognizedFormat"
