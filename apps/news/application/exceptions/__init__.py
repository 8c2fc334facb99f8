"""Application Exceptions."""

from news.application.exceptions.base import ApplicationError, wrap_error
from news.application.exceptions.collaborator import CollaboratorError
from news.application.exceptions.validation import ValidationError

__all__ = [
    "ApplicationError",
    "CollaboratorError",
    "ValidationError",
    "wrap_error",
]
