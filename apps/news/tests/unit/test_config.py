"""Settings 테스트."""

from __future__ import annotations

import pytest

from news.setup.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.default_page_limit == 10
    assert settings.max_page_limit == 100
    assert settings.api_prefix == ""


def test_reads_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEWS_DEFAULT_PAGE_LIMIT", "25")
    monkeypatch.setenv("NEWS_API_PREFIX", "/api/v1")
    monkeypatch.setenv("ENVIRONMENT", "test")

    settings = Settings(_env_file=None)

    assert settings.default_page_limit == 25
    assert settings.api_prefix == "/api/v1"
    assert settings.environment == "test"
