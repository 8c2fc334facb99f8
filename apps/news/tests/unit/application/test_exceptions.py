"""Application Exception Unit Tests."""

from __future__ import annotations

from news.application.exceptions import CollaboratorError, wrap_error


def test_wrap_error_prefixes_context() -> None:
    assert wrap_error("Delete topic failed", CollaboratorError("db down")) == "Delete topic failed: db down"


def test_wrap_error_accepts_plain_exception() -> None:
    assert wrap_error("ctx", RuntimeError("boom")) == "ctx: boom"
