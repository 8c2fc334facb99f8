"""Response Renderer.

(결과, 오류)를 공통 봉투 응답으로 변환한다.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from news.presentation.http.schemas import ResponseEnvelope

logger = logging.getLogger(__name__)


def render(status_code: int, envelope: ResponseEnvelope) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
    )


def success(data: BaseModel) -> JSONResponse:
    """200 OK 봉투."""
    envelope = ResponseEnvelope.ok(data.model_dump(mode="json", by_alias=True))
    return render(status.HTTP_200_OK, envelope)


def fail(status_code: int, error_message: str) -> JSONResponse:
    """실패 봉투. 4xx는 warning, 5xx는 error로 기록."""
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "Request failed",
        extra={"status_code": status_code, "error_message": error_message},
    )
    return render(status_code, ResponseEnvelope.fail(error_message))


def bad_request(error_message: str) -> JSONResponse:
    return fail(status.HTTP_400_BAD_REQUEST, error_message)


def internal_error(error_message: str) -> JSONResponse:
    return fail(status.HTTP_500_INTERNAL_SERVER_ERROR, error_message)


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """pydantic 검증 오류 목록을 한 줄 메시지로."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)
