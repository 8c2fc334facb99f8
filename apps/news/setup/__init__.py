"""News Service Setup."""

from news.setup.config import get_settings
from news.setup.dependencies import get_news_use_case

__all__ = [
    "get_settings",
    "get_news_use_case",
]
