"""Request Context DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """요청 단위 컨텍스트.

    HTTP 요청마다 하나 생성되어 UseCase 호출에 그대로 전달된다.
    취소는 asyncio 태스크 취소로 전파된다.
    """

    request_id: str
    method: str = ""
    path: str = ""
