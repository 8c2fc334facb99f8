"""Application DTOs."""

from news.application.dto.fetch_criteria import FetchCriteria, Pagination
from news.application.dto.request_context import RequestContext

__all__ = [
    "FetchCriteria",
    "Pagination",
    "RequestContext",
]
