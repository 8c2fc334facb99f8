"""In-Memory News UseCase.

로컬 실행/스모크 테스트용 NewsUseCase 구현체.
프로세스 메모리에만 저장하며 재시작 시 초기화된다.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import datetime, timezone

from news.application.dto import FetchCriteria, Pagination, RequestContext
from news.application.exceptions import CollaboratorError
from news.application.ports import NewsUseCase
from news.domain.constants import STATUS_DELETED
from news.domain.entities import NewsRecord

logger = logging.getLogger(__name__)


class InMemoryNewsUseCase(NewsUseCase):
    """메모리 기반 뉴스 UseCase.

    페이지네이션:
    - ID 내림차순 (최신 기사 먼저)
    - next_cursor = 마지막으로 반환한 기사 ID (더 없으면 "")
    """

    def __init__(self, default_limit: int = 10) -> None:
        self._default_limit = default_limit
        self._records: dict[int, NewsRecord] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def fetch_news_by_params(
        self,
        ctx: RequestContext,
        criteria: FetchCriteria,
    ) -> tuple[list[NewsRecord], Pagination]:
        limit = criteria.pagination.limit or self._default_limit
        cursor_id = self._decode_cursor(criteria.pagination.next_cursor)

        async with self._lock:
            candidates = sorted(self._records.values(), key=lambda r: r.id, reverse=True)

        matched = [
            replace(r, topic_ids=list(r.topic_ids))
            for r in candidates
            if self._matches(r, criteria) and (cursor_id is None or r.id < cursor_id)
        ]
        page = matched[:limit]
        has_more = len(matched) > limit
        next_cursor = str(page[-1].id) if has_more and page else ""

        logger.debug(
            "Fetched news page",
            extra={
                "request_id": ctx.request_id,
                "count": len(page),
                "has_more": has_more,
            },
        )
        return page, Pagination(limit=limit, next_cursor=next_cursor)

    async def insert_news(self, ctx: RequestContext, record: NewsRecord) -> NewsRecord:
        now = datetime.now(timezone.utc)
        async with self._lock:
            stored = replace(
                record,
                id=self._next_id,
                topic_ids=list(record.topic_ids),
                created_at=now,
                updated_at=now,
            )
            self._records[stored.id] = stored
            self._next_id += 1

        logger.info("News inserted", extra={"request_id": ctx.request_id, "news_id": stored.id})
        return replace(stored, topic_ids=list(stored.topic_ids))

    async def update_news(self, ctx: RequestContext, record: NewsRecord) -> NewsRecord:
        async with self._lock:
            current = self._records.get(record.id)
            if current is None or current.status == STATUS_DELETED:
                raise CollaboratorError(f"News {record.id} not found")

            stored = replace(
                record,
                status=record.status or current.status,
                topic_ids=list(record.topic_ids),
                created_at=current.created_at,
                updated_at=datetime.now(timezone.utc),
            )
            self._records[stored.id] = stored

        logger.info("News updated", extra={"request_id": ctx.request_id, "news_id": stored.id})
        return replace(stored, topic_ids=list(stored.topic_ids))

    async def delete_news(self, ctx: RequestContext, news_id: int) -> bool:
        async with self._lock:
            current = self._records.get(news_id)
            if current is None or current.status == STATUS_DELETED:
                return False
            self._records[news_id] = replace(
                current,
                status=STATUS_DELETED,
                updated_at=datetime.now(timezone.utc),
            )

        logger.info("News deleted", extra={"request_id": ctx.request_id, "news_id": news_id})
        return True

    @staticmethod
    def _decode_cursor(cursor: str) -> int | None:
        if not cursor:
            return None
        try:
            return int(cursor)
        except ValueError as e:
            raise CollaboratorError(f"Invalid cursor format: {cursor!r}") from e

    @staticmethod
    def _matches(record: NewsRecord, criteria: FetchCriteria) -> bool:
        if criteria.status:
            if record.status != criteria.status:
                return False
        elif record.status == STATUS_DELETED:
            return False

        if criteria.topic_ids and not record.has_any_topic(criteria.topic_ids):
            return False
        return True
