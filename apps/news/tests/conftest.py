"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from news.application.dto import Pagination, RequestContext
from news.application.ports import NewsUseCase
from news.domain.entities import NewsRecord
from news.main import app
from news.setup.dependencies import get_news_use_case

# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def now() -> datetime:
    """현재 시간 (UTC)."""
    return datetime.now(timezone.utc)


@pytest.fixture
def ctx() -> RequestContext:
    return RequestContext(request_id="test-request", method="GET", path="/news")


@pytest.fixture
def sample_record(now: datetime) -> NewsRecord:
    """저장된 샘플 기사."""
    return NewsRecord(
        id=1,
        title="Election results announced",
        content="Final counts were published this morning.",
        status="published",
        topic_ids=[1, 2],
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def sample_records(now: datetime) -> list[NewsRecord]:
    """샘플 기사 목록 (ID 내림차순)."""
    return [
        NewsRecord(id=3, title="Third", status="draft", topic_ids=[3], created_at=now),
        NewsRecord(id=2, title="Second", status="published", topic_ids=[1], created_at=now),
        NewsRecord(id=1, title="First", status="published", topic_ids=[], created_at=now),
    ]


# ============================================================
# Mock Fixtures
# ============================================================


@pytest.fixture
def mock_use_case() -> AsyncMock:
    """Mock NewsUseCase.

    insert/update는 받은 record에 ID만 붙여 그대로 돌려준다.
    """
    mock = AsyncMock(spec=NewsUseCase)
    mock.fetch_news_by_params = AsyncMock(return_value=([], Pagination(limit=10, next_cursor="")))
    mock.insert_news = AsyncMock(side_effect=lambda ctx, record: replace(record, id=record.id or 100))
    mock.update_news = AsyncMock(side_effect=lambda ctx, record: replace(record))
    mock.delete_news = AsyncMock(return_value=True)
    return mock


# ============================================================
# HTTP Fixtures
# ============================================================


@pytest.fixture
def client(mock_use_case: AsyncMock) -> Generator[TestClient, None, None]:
    """UseCase가 mock으로 교체된 TestClient."""
    app.dependency_overrides[get_news_use_case] = lambda: mock_use_case
    yield TestClient(app)

    # Cleanup
    app.dependency_overrides.clear()
