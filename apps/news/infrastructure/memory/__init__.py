"""In-memory adapters."""

from news.infrastructure.memory.in_memory_news_use_case import InMemoryNewsUseCase

__all__ = ["InMemoryNewsUseCase"]
