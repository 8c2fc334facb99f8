"""Domain Entities."""

from news.domain.entities.news_record import NewsRecord

__all__ = ["NewsRecord"]
