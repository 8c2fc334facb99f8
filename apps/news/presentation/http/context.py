"""Request Context Dependency."""

from __future__ import annotations

from typing import Annotated
from uuid import uuid4

from fastapi import Header, Request

from news.application.dto import RequestContext


def get_request_context(
    request: Request,
    x_request_id: Annotated[str | None, Header(alias="X-Request-Id")] = None,
) -> RequestContext:
    """요청 컨텍스트 생성. X-Request-Id가 없으면 새로 발급한다."""
    return RequestContext(
        request_id=x_request_id or uuid4().hex,
        method=request.method,
        path=request.url.path,
    )
