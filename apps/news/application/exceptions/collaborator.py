"""UseCase 관련 예외."""

from __future__ import annotations

from news.application.exceptions.base import ApplicationError


class CollaboratorError(ApplicationError):
    """UseCase(비즈니스 로직)가 보고한 오류.

    HTTP 계층은 종류를 구분하지 않고 500으로 변환한다.
    """

    def __init__(self, message: str = "News use case failed") -> None:
        super().__init__(message)
