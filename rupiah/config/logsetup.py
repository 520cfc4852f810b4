"""Structured logging configuration without shadowing the stdlib logging module."""
from __future__ import annotations

import json
import logging
import sys
import time
import traceback
from typing import Any, Dict, Optional

import structlog

from .settings import get_settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in ("request_id", "path"):
            if hasattr(record, attr):
                base[attr] = getattr(record, attr)
        if record.exc_info:
            base["exc_info"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(base, ensure_ascii=False)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog and the root stdlib logger.

    ``level`` overrides ``LOG_LEVEL`` from settings (the CLI uses this for --verbose).
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level or get_settings().LOG_LEVEL)


def bind_context(logger: logging.Logger, **kwargs: Any) -> logging.Logger | logging.LoggerAdapter:
    """Attach contextual attributes (e.g. request_id) picked up by JsonFormatter."""
    if not kwargs:
        return logger
    return logging.LoggerAdapter(logger, extra=kwargs)


__all__ = ["JsonFormatter", "configure_logging", "bind_context"]
