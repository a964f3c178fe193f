"""Console and structured file logging for the title tool."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .errors import ConfigurationError


_LOGGER_NAME = "titletool"
_OWNED = "_titletool_handler"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        return json.dumps(payload, ensure_ascii=True)


def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _OWNED, True)
    logger.addHandler(handler)


def _level(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbose: bool = False, debug: bool = False, log_file: Path | None = None) -> logging.Logger:
    logger = get_logger()
    logger.setLevel(_level(verbose, debug))

    # One run, one set of handlers; a repeated call replaces the previous ones.
    for old in list(logger.handlers):
        if getattr(old, _OWNED, False):
            logger.removeHandler(old)
            old.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    _attach(logger, stream_handler)

    if log_file is not None:
        try:
            handler = logging.FileHandler(str(log_file), encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"could not open log file {log_file}: {exc.strerror or exc}") from exc
        handler.setFormatter(JsonFormatter())
        _attach(logger, handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
