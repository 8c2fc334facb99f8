"""News Service Configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """News API 설정."""

    app_name: str = "News API"
    environment: str = Field(
        "local",
        validation_alias=AliasChoices("ENVIRONMENT", "NEWS_ENVIRONMENT"),
    )
    debug: bool = False

    # CORS (production: 명시적 origins 필수)
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # /news 라우터 앞에 붙는 prefix (예: "/api/v1")
    api_prefix: str = ""

    # 페이지네이션
    default_page_limit: int = Field(10, ge=0, description="limit 미지정 시 기본값")
    max_page_limit: int = Field(100, ge=1, description="limit 최대값")

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="NEWS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤."""
    return Settings()
