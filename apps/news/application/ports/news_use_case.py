"""News UseCase Port.

HTTP 계층이 의존하는 유일한 비즈니스 로직 인터페이스.
저장, 커서 생성, 상태 전이는 구현체가 담당한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from news.application.dto import FetchCriteria, Pagination, RequestContext
    from news.domain.entities import NewsRecord


class NewsUseCase(ABC):
    """뉴스 UseCase 포트.

    구현체는 실패를 반드시 ApplicationError 하위 예외(보통 CollaboratorError)로 보고한다.
    그 메시지는 ErrorMessage로 그대로 전달된다. 그 밖의 예외는 처리되지 않은 오류로
    간주되어 메시지 없이 "Internal server error" (500)로 응답한다.
    """

    @abstractmethod
    async def fetch_news_by_params(
        self,
        ctx: RequestContext,
        criteria: FetchCriteria,
    ) -> tuple[list[NewsRecord], Pagination]:
        """조건에 맞는 기사 한 페이지 조회.

        Args:
            ctx: 요청 컨텍스트
            criteria: 조회 조건 (페이지네이션, 상태, 토픽)

        Returns:
            (기사 목록, 다음 페이지 정보)
        """

    @abstractmethod
    async def insert_news(self, ctx: RequestContext, record: NewsRecord) -> NewsRecord:
        """기사 생성. 저장된 기사(ID 부여)를 반환한다."""

    @abstractmethod
    async def update_news(self, ctx: RequestContext, record: NewsRecord) -> NewsRecord:
        """기사 수정. record.id로 대상을 식별한다."""

    @abstractmethod
    async def delete_news(self, ctx: RequestContext, news_id: int) -> bool:
        """기사 삭제. 삭제 여부를 반환한다."""

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
