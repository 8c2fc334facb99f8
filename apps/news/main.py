"""News API Application.

뉴스 콘텐츠 관리 API (목록/생성/수정/삭제).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from news.presentation.http import health_router, router
from news.presentation.http.errors import register_exception_handlers
from news.setup.config import get_settings
from news.setup.dependencies import cleanup
from news.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging(settings.log_level, service=settings.app_name)
    logger.info(
        "News service starting",
        extra={
            "environment": settings.environment,
            "api_prefix": settings.api_prefix,
            "default_page_limit": settings.default_page_limit,
        },
    )
    yield
    await cleanup()
    logger.info("News service shutting down")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="뉴스 콘텐츠 관리 API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록 (모든 오류를 공통 봉투로)
    register_exception_handlers(app)

    # Router
    app.include_router(health_router)
    app.include_router(router, prefix=settings.api_prefix)

    return app


# Uvicorn entrypoint
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "news.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().environment == "local",
    )
