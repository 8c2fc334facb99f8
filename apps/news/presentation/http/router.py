"""HTTP Router.

FastAPI 라우터 설정.
"""

from fastapi import APIRouter

from news.presentation.http.controllers import news_router
from news.presentation.http.schemas import HealthCheckResponseSchema

router = APIRouter()

# 뉴스 라우터 등록
router.include_router(news_router)

health_router = APIRouter()


@health_router.get(
    "/health",
    response_model=HealthCheckResponseSchema,
    tags=["health"],
    summary="헬스체크",
)
async def health_check() -> HealthCheckResponseSchema:
    """서비스 헬스체크."""
    return HealthCheckResponseSchema(status="ok", service="news")
