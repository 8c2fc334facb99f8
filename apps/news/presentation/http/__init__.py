"""HTTP Presentation."""

from news.presentation.http.router import health_router, router

__all__ = ["health_router", "router"]
