"""News Record Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class NewsRecord:
    """뉴스 기사 엔티티.

    HTTP 계층은 이 객체를 만들어 UseCase에 넘기기만 하고,
    저장/식별자 발급은 UseCase가 담당한다.

    Attributes:
        id: 기사 ID (저장 전에는 0)
        title: 제목
        content: 본문
        status: 상태 ("draft" | "published" | "deleted")
        topic_ids: 연결된 토픽 ID 목록 (입력 순서 유지)
        created_at: 생성 시각 (UseCase가 부여)
        updated_at: 수정 시각 (UseCase가 부여)
    """

    id: int = 0
    title: str = ""
    content: str = ""
    status: str = ""
    topic_ids: list[int] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_any_topic(self, topic_ids: list[int]) -> bool:
        """주어진 토픽 중 하나라도 연결되어 있는지."""
        return any(topic_id in self.topic_ids for topic_id in topic_ids)
