"""검증 관련 예외."""

from __future__ import annotations

from news.application.exceptions.base import ApplicationError


class ValidationError(ApplicationError):
    """요청 파라미터/본문 형식 오류.

    UseCase 호출 전에 감지되는 오류. HTTP 400으로 변환된다.
    """

    def __init__(self, message: str = "Request data invalid", segment: str | None = None) -> None:
        self.segment = segment
        super().__init__(message)
