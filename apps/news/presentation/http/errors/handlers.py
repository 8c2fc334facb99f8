"""Exception Handlers.

프레임워크/애플리케이션 예외도 공통 봉투로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from news.application.exceptions import ApplicationError, ValidationError
from news.presentation.http.pipeline import BIND_ERROR
from news.presentation.http.responses import (
    bad_request,
    describe_validation_errors,
    fail,
    internal_error,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return bad_request(f"{BIND_ERROR}: {describe_validation_errors(exc.errors())}")

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return bad_request(exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return internal_error(exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return fail(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return internal_error("Internal server error")
