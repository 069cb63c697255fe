"""Logging setup."""

import json
import logging
import sys
from typing import Any

from smartpay.core.config import settings

STANDARD_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RECORD_ATTRS:
                continue
            payload.setdefault("extra", {})[key] = value
        return json.dumps(payload, default=str, ensure_ascii=False)


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Install a stdout handler on the root logger.

    Does nothing if the root logger already has handlers, so applications that
    configure logging themselves keep their setup.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = (level or settings.log_level).upper()
    handler = logging.StreamHandler(sys.stdout)
    if (log_format or settings.log_format) == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT))

    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
