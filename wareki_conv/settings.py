from __future__ import annotations

import logging
from typing import Annotated, List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WAREKI_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_title: str = Field(default="Wareki Converter API", description="FastAPI application title")
    app_description: str = Field(
        default="和暦の日付文字列を西暦 (ISO 8601) に変換するAPI",
        description="OpenAPI 用の説明文",
    )
    allowed_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="CORS で許可するオリジンの一覧",
    )
    log_level: str = Field(
        default="INFO",
        description="アプリケーションログのレベル (DEBUG/INFO/WARNING/ERROR/CRITICAL)",
    )
    enable_request_logging: bool = Field(
        default=True,
        description="各リクエストのログ出力を有効化",
    )
    max_batch_size: int = Field(
        default=1_000,
        description="一括変換で受け付ける最大件数",
        ge=1,
        le=10_000,
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Union[str, List[str]]) -> List[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        candidate = value.upper()
        if candidate not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            logging.getLogger("wareki_conv.settings").warning(
                "Unknown log level '%s', falling back to INFO.", value
            )
            return "INFO"
        return candidate


settings = Settings()
