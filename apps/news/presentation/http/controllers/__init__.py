"""HTTP controllers (routers)."""

from news.presentation.http.controllers.news_controller import router as news_router

__all__ = ["news_router"]
