"""Kiosk logging configuration."""

from __future__ import annotations

import logging
import sys

from recycle.setup.logging import ECSJsonFormatter

SERVICE_NAME = "recycle-kiosk"

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio", "comtypes")


def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """키오스크 로깅 설정. 기본은 사람이 읽는 텍스트 포맷."""
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(ECSJsonFormatter(service_name=SERVICE_NAME))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
