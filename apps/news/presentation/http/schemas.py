"""HTTP Schemas.

Pydantic 모델 기반 API 요청/응답 스키마.
요청 본문과 Data 내부 필드는 camelCase, 봉투(envelope)는 PascalCase.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, Strict, model_validator

from news.application.dto import Pagination
from news.domain.constants import ID_MAX, ID_MIN
from news.domain.entities import NewsRecord

MESSAGE_OK = "OK"
MESSAGE_FAIL = "Fail"

# JSON 숫자만 허용 ("1", 2.0, true 불가), signed 64-bit 범위
Int64 = Annotated[int, Strict(), Field(ge=ID_MIN, le=ID_MAX)]


class ResponseEnvelope(BaseModel):
    """모든 엔드포인트 공통 응답 봉투.

    Message == "OK"   <=> Data 존재, ErrorMessage == ""
    Message == "Fail" <=> Data 없음, ErrorMessage 비어있지 않음
    """

    data: dict[str, Any] | None = Field(None, alias="Data")
    error_message: str = Field("", alias="ErrorMessage")
    message: Literal["OK", "Fail"] = Field(..., alias="Message")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _check_invariant(self) -> ResponseEnvelope:
        if self.message == MESSAGE_OK:
            if self.data is None or self.error_message:
                raise ValueError("OK envelope requires Data and an empty ErrorMessage")
        elif self.data is not None or not self.error_message:
            raise ValueError("Fail envelope requires ErrorMessage and no Data")
        return self

    @classmethod
    def ok(cls, data: dict[str, Any]) -> ResponseEnvelope:
        return cls(data=data, error_message="", message=MESSAGE_OK)

    @classmethod
    def fail(cls, error_message: str) -> ResponseEnvelope:
        # 빈 메시지로는 실패 봉투를 만들 수 없다
        return cls(data=None, error_message=error_message or "Unknown error", message=MESSAGE_FAIL)


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NewsSchema(_CamelModel):
    """뉴스 기사 스키마."""

    id: Int64 = Field(0, description="기사 ID (저장 전 0)")
    title: str = Field("", description="제목")
    content: str = Field("", description="본문")
    status: str = Field("", description="상태 (draft, published, deleted)")
    topic_ids: list[Int64] = Field(default_factory=list, alias="topicIds", description="토픽 ID 목록")
    created_at: datetime | None = Field(None, alias="createdAt", description="생성 시각")
    updated_at: datetime | None = Field(None, alias="updatedAt", description="수정 시각")

    @classmethod
    def from_entity(cls, record: NewsRecord) -> NewsSchema:
        """Entity에서 스키마로 변환."""
        return cls(
            id=record.id,
            title=record.title,
            content=record.content,
            status=record.status,
            topic_ids=list(record.topic_ids),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_entity(self) -> NewsRecord:
        return NewsRecord(
            id=self.id,
            title=self.title,
            content=self.content,
            status=self.status,
            topic_ids=list(self.topic_ids),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class PaginationSchema(_CamelModel):
    """페이지네이션 스키마."""

    limit: int = Field(0, description="페이지 크기")
    next_cursor: str = Field("", alias="nextCursor", description="다음 페이지 커서")

    @classmethod
    def from_dto(cls, pagination: Pagination) -> PaginationSchema:
        return cls(limit=pagination.limit, next_cursor=pagination.next_cursor)


class MutateNewsRequest(_CamelModel):
    """생성/수정 요청 본문.

    예) {"news": {"title": "A"}, "newsTopic": [1, 2]}
    """

    news: NewsSchema = Field(..., description="기사 내용")
    news_topic: list[Int64] = Field(default_factory=list, alias="newsTopic", description="토픽 ID 목록")

    def to_entity(self) -> NewsRecord:
        """본문 기사에 토픽 목록을 붙인 엔티티 생성."""
        record = self.news.to_entity()
        record.topic_ids = list(self.news_topic)
        return record


class MutateNewsResponse(_CamelModel):
    news: NewsSchema


class NewsListResponse(_CamelModel):
    news: list[NewsSchema]
    pagination: PaginationSchema


class DeleteNewsResponse(_CamelModel):
    is_success: bool = Field(..., alias="isSuccess")


class HealthCheckResponseSchema(BaseModel):
    """헬스체크 응답 스키마."""

    status: str = Field(..., description="서비스 상태")
    service: str = Field(..., description="서비스 이름")
