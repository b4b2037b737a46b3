"""
logging_config.py — Centralized Logging Configuration for the GBL API

Sets up Loguru as the single logging backend. Intercepts Python's stdlib
logging module so uvicorn and SQLAlchemy records route through Loguru
with the same format and request context.

Business Rules:
- All logs go through Loguru (no direct print() or stdlib logging)
- JSON lines when LOG_JSON is set, human-readable otherwise
- Request ID from the access-log middleware is bound when available

Called by: gbl_api/main.py (lifespan)
Depends on: LOG_LEVEL, LOG_JSON environment variables
"""

import logging
import os
import sys

from loguru import logger

_TRUTHY = {"1", "true", "yes", "on"}


def setup_logging() -> None:
    """Configure Loguru and intercept stdlib logging.

    Safe to call more than once; each call replaces the previous sinks.
    """
    logger.remove()

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    as_json = os.getenv("LOG_JSON", "").strip().lower() in _TRUTHY

    if as_json:
        logger.add(
            sys.stdout,
            level=log_level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{extra[request_id]}</cyan> | "
                "{message}"
            ),
            colorize=True,
        )
    logger.configure(extra={"request_id": "-"})

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    for noisy in ("uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.info("Logging configured", level=log_level, json=as_json)


class _InterceptHandler(logging.Handler):
    """Route stdlib logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames from stdlib logging internals
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )
