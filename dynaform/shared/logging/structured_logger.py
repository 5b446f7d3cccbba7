"""
JSON-lines logger.

Each entry is one JSON object with timestamp, level, logger name,
message and a context mapping built from the call's keyword arguments.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from .logger_interface import LoggerInterface, LogLevel


class JsonLineFormatter(logging.Formatter):
    """Render a record and its `context` attribute as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "context": getattr(record, "context", {})
        }
        return json.dumps(entry, default=str)


class StructuredLogger(LoggerInterface):
    """
    Logger writing JSON lines through a named `logging.Logger`.

    Args:
        name: Logger name
        level: Minimum level written
        output: Stream receiving the lines
    """

    def __init__(
        self,
        name: str,
        level: LogLevel = LogLevel.INFO,
        output: TextIO = sys.stderr
    ):
        self.name = name
        self.level = level

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.severity)
        self._logger.propagate = False

        # One handler per named logger; a reconfigured logger replaces it
        for existing in list(self._logger.handlers):
            self._logger.removeHandler(existing)
        handler = logging.StreamHandler(output)
        handler.setFormatter(JsonLineFormatter())
        self._logger.addHandler(handler)

    def _log(self, level: LogLevel, message: str, context: dict) -> None:
        self._logger.log(level.severity, message, extra={"context": context})

    def debug(self, message: str, **context: Any) -> None:
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(LogLevel.WARNING, message, context)


def configure_logging(name: str = "dynaform", level: LogLevel = LogLevel.INFO, output: TextIO = sys.stderr) -> StructuredLogger:
    """
    Configure and return a StructuredLogger instance.

    Args:
        name: Logger name
        level: Minimum level written
        output: Output stream for logs

    Returns:
        StructuredLogger: Configured logger instance
    """
    return StructuredLogger(name=name, level=level, output=output)
