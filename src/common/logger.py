"""
Logging setup for the job board.

setup_logging() configures the root handler once at startup. Modules that
log on behalf of a board operation use get_logger(__name__, operation=...)
so every line carries the operation tag, e.g. "[job search] ...".
"""

import json
import logging
import sys
from typing import Any, MutableMapping, Optional, Tuple


class JsonFormatter(logging.Formatter):
    """One JSON object per line; the message is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


class BoardLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with the board operation."""

    def __init__(self, logger: logging.Logger, operation: Optional[str] = None):
        super().__init__(logger, {"operation": operation})
        self.operation = operation

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        if self.operation:
            return f"[{self.operation}] {msg}", kwargs
        return msg, kwargs


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Configure global logging settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Log format ("simple" or "json")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str, operation: Optional[str] = None) -> BoardLogger:
    """Logger for module ``name`` tagged with ``operation``."""
    return BoardLogger(logging.getLogger(name), operation)
