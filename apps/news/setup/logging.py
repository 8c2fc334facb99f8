"""Logging configuration."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - {service} - %(name)s - %(levelname)s - %(message)s"

# 이 모듈이 붙인 핸들러 표시 (재호출 시 중복 방지)
_HANDLER_MARKER = "_news_service_handler"


def setup_logging(level: str = "INFO", service: str = "news") -> None:
    """루트 로거에 stdout 핸들러를 설정합니다.

    여러 번 호출해도 핸들러는 하나만 유지되고, 다른 핸들러(pytest 캡처 등)는 건드리지 않는다.
    알 수 없는 level은 INFO로 처리.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT.format(service=service)))
    setattr(handler, _HANDLER_MARKER, True)
    root.addHandler(handler)

    # 요청 로그는 uvicorn access 로그와 중복되므로 낮춘다
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
