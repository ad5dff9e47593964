"""Logging configuration for rentbook."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Loggers that stay at WARNING whatever LOG_LEVEL says; SQL echo has its own setting
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Send every log record to stdout, as plain text or as one JSON object per line.

    `level` is a level name; unknown names fall back to INFO.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if format_type == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers[:] = [handler]

    logging.getLogger("rentbook").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per log line.

    Records logged with `extra={"change": {...}}` (see crud.base.notify)
    carry that mapping under the "change" key.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        change = getattr(record, "change", None)
        if change:
            log_data["change"] = change

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
