"""Logging setup for the roster package."""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from .config import LoggingSettings, settings

ROOT_LOGGER = "roster"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = str(record.exc_info[1])
        return json.dumps(log_obj)


def setup_logging(config: LoggingSettings | None = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    config = config or settings.logging

    if config.file:
        handler: logging.Handler = logging.FileHandler(config.file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    if config.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )

    logger = logging.getLogger(ROOT_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
