from __future__ import annotations

from typing import Dict

from .errors import InvalidNumeralError

# 半角・全角どちらの数字も 1 文字ずつ値に変換する
DIGIT_VALUES: Dict[str, int] = {
    **{str(value): value for value in range(10)},
    **{chr(ord("０") + value): value for value in range(10)},
}

FULLWIDTH_ASCII_PATTERN = str.maketrans(
    {chr(code): chr(code - 0xFEE0) for code in range(0xFF01, 0xFF5F)} | {"　": " "}
)


def to_half_width(text: str) -> str:
    """Fold full-width ASCII (digits, letters, punctuation) and the ideographic space."""
    return text.translate(FULLWIDTH_ASCII_PATTERN)


def digit_value(ch: str) -> int:
    try:
        return DIGIT_VALUES[ch]
    except KeyError:
        raise InvalidNumeralError(f"'{ch}' is not a digit", text=ch) from None


def parse_numeral(text: str) -> int:
    """Convert a run of half/full-width digits to an integer.

    Each character is resolved on its own, so ``"０1"`` is accepted and
    leading zeros are simply part of the positional value.
    """
    if not text:
        raise InvalidNumeralError("numeral is empty", text=text)
    value = 0
    for ch in text:
        value = value * 10 + digit_value(ch)
    return value
