"""Application Ports (Interfaces)."""

from news.application.ports.news_use_case import NewsUseCase

__all__ = ["NewsUseCase"]
