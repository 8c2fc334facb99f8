"""News Fetch DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Pagination:
    """커서 기반 페이지네이션 정보.

    next_cursor는 UseCase가 만드는 불투명 토큰이며,
    HTTP 계층은 해석하지 않고 그대로 전달한다.
    """

    limit: int = 0
    next_cursor: str = ""


@dataclass
class FetchCriteria:
    """뉴스 목록 조회 조건."""

    pagination: Pagination = field(default_factory=Pagination)
    status: str = ""
    topic_ids: list[int] = field(default_factory=list)
