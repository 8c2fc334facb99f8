"""News Controller.

뉴스 목록/생성/수정/삭제 엔드포인트 핸들러.
모든 응답은 공통 봉투(Data, ErrorMessage, Message) 형식이다.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from news.application.dto import FetchCriteria, Pagination, RequestContext
from news.application.exceptions import ApplicationError, ValidationError, wrap_error
from news.application.ports import NewsUseCase
from news.application.services import parse_identifier, parse_topic_filter
from news.presentation.http.context import get_request_context
from news.presentation.http.pipeline import (
    CreateNewsMutator,
    UpdateNewsMutator,
    run_mutation,
)
from news.presentation.http.responses import bad_request, internal_error, success
from news.presentation.http.schemas import (
    DeleteNewsResponse,
    NewsListResponse,
    NewsSchema,
    PaginationSchema,
)
from news.setup.config import get_settings
from news.setup.dependencies import get_news_use_case

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["news"])

DELETE_ID_ERROR = "Topic ID must int"
DELETE_FAILED = "Delete topic failed"


@router.get("", summary="뉴스 목록 조회")
async def fetch_news(
    limit: Annotated[
        int | None,
        Query(ge=0, description="조회할 기사 수 (미지정 시 기본값)"),
    ] = None,
    next_cursor: Annotated[
        str,
        Query(alias="nextCursor", description="이전 응답의 pagination.nextCursor"),
    ] = "",
    status: Annotated[
        str,
        Query(description="상태 필터 (draft, published, ...)"),
    ] = "",
    topic: Annotated[
        str,
        Query(description="토픽 ID 필터 (콤마 구분, 예: 1,2,3)"),
    ] = "",
    ctx: RequestContext = Depends(get_request_context),
    use_case: NewsUseCase = Depends(get_news_use_case),
) -> JSONResponse:
    """뉴스 목록 조회.

    Cursor 기반 페이지네이션. 기사 순서는 UseCase가 반환한 그대로 유지한다.
    """
    settings = get_settings()
    if limit is None:
        limit = settings.default_page_limit
    limit = min(limit, settings.max_page_limit)

    try:
        topic_ids = parse_topic_filter(topic)
    except ValidationError as e:
        return bad_request(e.message)

    criteria = FetchCriteria(
        pagination=Pagination(limit=limit, next_cursor=next_cursor),
        status=status,
        topic_ids=topic_ids,
    )

    try:
        records, pagination = await use_case.fetch_news_by_params(ctx, criteria)
    except ApplicationError as e:
        return internal_error(e.message)

    return success(
        NewsListResponse(
            news=[NewsSchema.from_entity(r) for r in records],
            pagination=PaginationSchema.from_dto(pagination),
        )
    )


@router.post("", summary="뉴스 생성 (항상 draft)")
async def insert_news(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    use_case: NewsUseCase = Depends(get_news_use_case),
) -> JSONResponse:
    """뉴스 생성. 본문의 status는 무시되고 draft로 저장된다."""
    return await run_mutation(request, ctx, CreateNewsMutator(use_case))


@router.put("/{news_id}", summary="뉴스 수정")
async def update_news(
    request: Request,
    news_id: Annotated[str, Path(description="기사 ID (정수)")],
    ctx: RequestContext = Depends(get_request_context),
    use_case: NewsUseCase = Depends(get_news_use_case),
) -> JSONResponse:
    """뉴스 수정."""
    return await run_mutation(request, ctx, UpdateNewsMutator(use_case, news_id))


@router.delete("/{news_id}", summary="뉴스 삭제")
async def delete_news(
    news_id: Annotated[str, Path(description="기사 ID (정수)")],
    ctx: RequestContext = Depends(get_request_context),
    use_case: NewsUseCase = Depends(get_news_use_case),
) -> JSONResponse:
    """뉴스 삭제.

    UseCase가 False를 반환해도 오류가 아니면 200 (isSuccess: false).
    """
    try:
        parsed_id = parse_identifier(news_id, DELETE_ID_ERROR)
    except ValidationError as e:
        return bad_request(e.message)

    try:
        ok = await use_case.delete_news(ctx, parsed_id)
    except ApplicationError as e:
        return internal_error(wrap_error(DELETE_FAILED, e))

    logger.info(
        "News delete handled",
        extra={"request_id": ctx.request_id, "news_id": parsed_id, "is_success": ok},
    )
    return success(DeleteNewsResponse(is_success=ok))
