"""Base application exceptions."""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


def wrap_error(context: str, exc: BaseException) -> str:
    """예외 메시지 앞에 컨텍스트를 붙인다.

    >>> wrap_error("Delete topic failed", ApplicationError("db down"))
    'Delete topic failed: db down'
    """
    message = exc.message if isinstance(exc, ApplicationError) else str(exc)
    return f"{context}: {message}"
