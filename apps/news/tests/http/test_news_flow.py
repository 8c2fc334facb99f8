"""HTTP 흐름 테스트 (InMemoryNewsUseCase 사용)."""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from news.infrastructure.memory import InMemoryNewsUseCase
from news.main import app
from news.setup.dependencies import get_news_use_case


@pytest.fixture
def flow_client() -> Generator[TestClient, None, None]:
    use_case = InMemoryNewsUseCase()
    app.dependency_overrides[get_news_use_case] = lambda: use_case
    yield TestClient(app)

    # Cleanup
    app.dependency_overrides.clear()


def test_create_update_list_delete(flow_client: TestClient) -> None:
    created = flow_client.post(
        "/news",
        json={"news": {"title": "Budget vote", "content": "...", "status": "published"}, "newsTopic": [7]},
    ).json()["Data"]["news"]
    assert created["status"] == "draft"
    news_id = created["id"]

    updated = flow_client.put(
        f"/news/{news_id}",
        json={"news": {"title": "Budget vote passes", "status": "published"}, "newsTopic": [7, 8]},
    ).json()["Data"]["news"]
    assert updated["status"] == "published"
    assert updated["topicIds"] == [7, 8]

    listed = flow_client.get("/news", params={"status": "published", "topic": "8"}).json()["Data"]
    assert [n["id"] for n in listed["news"]] == [news_id]
    assert listed["pagination"]["nextCursor"] == ""

    assert flow_client.delete(f"/news/{news_id}").json()["Data"] == {"isSuccess": True}
    assert flow_client.delete(f"/news/{news_id}").json()["Data"] == {"isSuccess": False}


def test_update_missing_news_returns_500(flow_client: TestClient) -> None:
    response = flow_client.put("/news/77", json={"news": {"title": "ghost"}})

    assert response.status_code == 500
    assert response.json()["ErrorMessage"] == "News 77 not found"


def test_paginates_through_cursor(flow_client: TestClient) -> None:
    for i in range(3):
        flow_client.post("/news", json={"news": {"title": f"n{i}"}})

    first = flow_client.get("/news", params={"limit": 2}).json()["Data"]
    second = flow_client.get(
        "/news", params={"limit": 2, "nextCursor": first["pagination"]["nextCursor"]}
    ).json()["Data"]

    assert [n["title"] for n in first["news"]] == ["n2", "n1"]
    assert [n["title"] for n in second["news"]] == ["n0"]
    assert second["pagination"]["nextCursor"] == ""
