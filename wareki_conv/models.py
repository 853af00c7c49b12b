from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .eras import Era
from .resolver import Conversion

MAX_INPUT_LENGTH = 64


class ConvertRequest(BaseModel):
    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_INPUT_LENGTH,
        description="Wareki date string, e.g. 令和1年2月3日 or R01.02.03",
    )


class ConvertResponse(BaseModel):
    input: str
    date_type: str = Field(..., description="Notation the input was recognised as")
    era: str = Field(..., description="Era name in kanji")
    era_name: str = Field(..., description="Romanised era name")
    era_year: int = Field(..., ge=1)
    year: int
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    iso: str = Field(..., description="ISO-8601 extended date (YYYY-MM-DD)")

    @classmethod
    def from_conversion(cls, text: str, conversion: Conversion) -> "ConvertResponse":
        resolved = conversion.date
        return cls(
            input=text,
            date_type=conversion.date_type.value,
            era=conversion.era.kanji_name,
            era_name=conversion.era.name,
            era_year=conversion.era_year,
            year=resolved.year,
            month=resolved.month,
            day=resolved.day,
            iso=resolved.isoformat(),
        )


class ConversionError(BaseModel):
    code: str
    message: str


class BatchConvertRequest(BaseModel):
    texts: List[str] = Field(..., min_length=1, description="Wareki date strings to convert")

    @field_validator("texts")
    @classmethod
    def limit_item_length(cls, value: List[str]) -> List[str]:
        for text in value:
            if len(text) > MAX_INPUT_LENGTH:
                raise ValueError(f"各入力は {MAX_INPUT_LENGTH} 文字以内で指定してください。")
        return value


class BatchConvertItem(BaseModel):
    input: str
    result: Optional[ConvertResponse] = None
    error: Optional[ConversionError] = None


class BatchConvertResponse(BaseModel):
    items: List[BatchConvertItem]
    total: int
    succeeded: int
    failed: int


class EraInfo(BaseModel):
    kanji_name: str
    short_name: str
    letter_code: str
    name: str
    start_year: int

    @classmethod
    def from_era(cls, era: Era) -> "EraInfo":
        return cls(
            kanji_name=era.kanji_name,
            short_name=era.short_name,
            letter_code=era.letter_code,
            name=era.name,
            start_year=era.start_year,
        )
