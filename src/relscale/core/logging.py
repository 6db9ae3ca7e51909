"""
Relscale logging.

Scales log their construction at DEBUG level. Output goes to stderr as
``[RELSCALE LEVEL] [module] message`` lines, or one JSON object per line
when RELSCALE_LOG_JSON is set. The level comes from RELSCALE_LOG_LEVEL
(RELSCALE_DEBUG is honoured as a fallback).

Usage:
    from relscale.core.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Created scale", extra={"kind": "log"})
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Optional

from .config import get_settings, is_json_logging

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "taskName"}


class RelscaleFormatter(logging.Formatter):
    """Text or JSON formatter for relscale records."""

    def __init__(self, json_output: bool = False) -> None:
        super().__init__()
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        exc_text = None
        if record.exc_info:
            exc_text = "".join(traceback.format_exception(*record.exc_info))

        if not self.json_output:
            module = record.name.rsplit(".", 1)[-1]
            line = f"[RELSCALE {record.levelname}] [{module}] {record.getMessage()}"
            return f"{line}\n{exc_text}" if exc_text else line

        data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        data.update(
            (key, value) for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        )
        if exc_text:
            data["exception"] = exc_text
        return json.dumps(data, default=str)


_loggers: dict[str, logging.Logger] = {}
_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Get a relscale logger for a module name (typically ``__name__``).

    Loggers are created once, share a single stderr handler and do not
    propagate to the root logger.
    """
    global _handler

    logger = _loggers.get(name)
    if logger is not None:
        return logger

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(RelscaleFormatter(json_output=is_json_logging()))

    logger = logging.getLogger(name)
    logger.setLevel(get_settings().log_level_int)
    logger.addHandler(_handler)
    logger.propagate = False
    _loggers[name] = logger
    return logger


def reset_logging() -> None:
    """
    Detach the shared handler and restore default propagation.

    Cached loggers keep their identity, so module-level loggers start
    reaching caplog again. The next get_logger call for a new name
    rebuilds the handler from current settings.
    """
    global _handler

    for logger in _loggers.values():
        if _handler is not None:
            logger.removeHandler(_handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    _handler = None
