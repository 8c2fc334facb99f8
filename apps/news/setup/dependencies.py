"""Dependency Injection.

FastAPI 의존성 주입 팩토리.
"""

from __future__ import annotations

from news.application.ports import NewsUseCase
from news.infrastructure.memory import InMemoryNewsUseCase

# UseCase (싱글톤, 요청 간 공유되는 유일한 참조)
_use_case: NewsUseCase | None = None


def get_news_use_case() -> NewsUseCase:
    """NewsUseCase 의존성 주입.

    로컬 실행은 InMemoryNewsUseCase를 사용한다.
    실제 구현체는 app.dependency_overrides 로 교체한다.
    """
    global _use_case
    if _use_case is None:
        _use_case = InMemoryNewsUseCase()
    return _use_case


async def cleanup() -> None:
    """리소스 정리."""
    global _use_case

    if _use_case is not None:
        await _use_case.close()
        _use_case = None
