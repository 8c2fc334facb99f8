"""Logging 테스트."""

from __future__ import annotations

import logging
import sys

from news.setup.logging import setup_logging


def _service_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_news_service_handler", False)]


class TestSetupLogging:
    """setup_logging 함수 테스트."""

    def setup_method(self) -> None:
        """테스트 전 설정."""
        root_logger = logging.getLogger()
        self._level = root_logger.level
        self._handlers = list(root_logger.handlers)

    def teardown_method(self) -> None:
        """테스트 후 정리."""
        # 로깅 상태 복원
        root_logger = logging.getLogger()
        for handler in _service_handlers():
            root_logger.removeHandler(handler)
        root_logger.handlers[:] = self._handlers
        root_logger.setLevel(self._level)

    def test_setup_logging_configures_root_logger(self) -> None:
        """루트 로거 레벨과 stdout 핸들러 확인."""
        setup_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        handlers = _service_handlers()
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stdout

    def test_setup_logging_is_idempotent(self) -> None:
        """여러 번 호출해도 핸들러는 하나."""
        setup_logging("INFO")
        setup_logging("WARNING")

        assert len(_service_handlers()) == 1
        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_keeps_foreign_handlers(self) -> None:
        foreign = logging.NullHandler()
        logging.getLogger().addHandler(foreign)

        setup_logging("INFO")

        assert foreign in logging.getLogger().handlers

    def test_format_includes_service_name(self) -> None:
        setup_logging("INFO", service="News API")

        record = logging.LogRecord("news.test", logging.INFO, __file__, 1, "hello", None, None)
        formatted = _service_handlers()[0].format(record)

        assert " - News API - news.test - INFO - hello" in formatted

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("verbose")

        assert logging.getLogger().level == logging.INFO

    def test_quiets_uvicorn_access_log(self) -> None:
        setup_logging("DEBUG")

        assert logging.getLogger("uvicorn.access").level == logging.WARNING
