"""Mutation Pipeline.

생성/수정 공통 흐름:
1. 요청 본문 바인딩 (실패 시 400, mutator 호출 안 함)
2. 본문 기사 + newsTopic → NewsRecord
3. mutator 실행 (ApplicationError → 500, 종류 구분 없음)
4. 결과를 성공 봉투로 렌더링
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from news.application.exceptions import ApplicationError
from news.application.services import parse_identifier
from news.domain.constants import DEFAULT_STATUS
from news.presentation.http.responses import (
    bad_request,
    describe_validation_errors,
    internal_error,
    success,
)
from news.presentation.http.schemas import (
    MutateNewsRequest,
    MutateNewsResponse,
    NewsSchema,
)

if TYPE_CHECKING:
    from news.application.dto import RequestContext
    from news.application.ports import NewsUseCase
    from news.domain.entities import NewsRecord

logger = logging.getLogger(__name__)

BIND_ERROR = "Request data invalid"
UPDATE_ID_ERROR = "id must integer"


class NewsMutator(Protocol):
    """생성/수정별로 달라지는 단계."""

    async def mutate(self, ctx: RequestContext, record: NewsRecord) -> NewsRecord: ...


class CreateNewsMutator:
    """기사 생성. 클라이언트가 보낸 상태와 무관하게 항상 draft로 생성한다."""

    def __init__(self, use_case: NewsUseCase) -> None:
        self._use_case = use_case

    async def mutate(self, ctx: RequestContext, record: NewsRecord) -> NewsRecord:
        record.status = DEFAULT_STATUS
        return await self._use_case.insert_news(ctx, record)


class UpdateNewsMutator:
    """기사 수정. 경로 ID를 파싱해 record.id에 붙인다.

    ID 파싱 실패는 mutator 오류로 전달되어 500이 된다 (DELETE는 400).
    """

    def __init__(self, use_case: NewsUseCase, raw_id: str) -> None:
        self._use_case = use_case
        self._raw_id = raw_id

    async def mutate(self, ctx: RequestContext, record: NewsRecord) -> NewsRecord:
        record.id = parse_identifier(self._raw_id, UPDATE_ID_ERROR)
        return await self._use_case.update_news(ctx, record)


async def bind_mutation_request(request: Request) -> MutateNewsRequest:
    body = await request.body()
    return MutateNewsRequest.model_validate_json(body or b"null")


async def run_mutation(
    request: Request,
    ctx: RequestContext,
    mutator: NewsMutator,
) -> JSONResponse:
    """본문 바인딩 → mutator 실행 → 봉투 렌더링."""
    try:
        payload = await bind_mutation_request(request)
    except PydanticValidationError as e:
        return bad_request(f"{BIND_ERROR}: {describe_validation_errors(e.errors())}")

    record = payload.to_entity()

    try:
        result = await mutator.mutate(ctx, record)
    except ApplicationError as e:
        logger.info(
            "News mutation failed",
            extra={
                "request_id": ctx.request_id,
                "mutator": type(mutator).__name__,
                "error": e.message,
            },
        )
        return internal_error(e.message)

    return success(MutateNewsResponse(news=NewsSchema.from_entity(result)))
