"""News Service Domain Layer."""

from news.domain.constants import (
    DEFAULT_STATUS,
    STATUS_DELETED,
    STATUS_DRAFT,
)
from news.domain.entities import NewsRecord

__all__ = [
    "DEFAULT_STATUS",
    "NewsRecord",
    "STATUS_DELETED",
    "STATUS_DRAFT",
]
