"""
Logger interface used by form services and sinks.
"""

from abc import ABC, abstractmethod
from typing import Any
from enum import Enum
import logging


class LogLevel(Enum):
    """Log levels accepted in configuration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def severity(self) -> int:
        """Numeric severity as used by the logging module."""
        return getattr(logging, self.value)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """
        Resolve a level from its (case-insensitive) name.

        Args:
            name: Level name, e.g. "info"

        Returns:
            LogLevel: Matching level

        Raises:
            ValueError: If the name is not a known level
        """
        return cls(str(name).strip().upper())


class LoggerInterface(ABC):
    """
    Logging port for the application layer.

    Keyword arguments become the entry's context; they must never
    carry raw field values.
    """

    @abstractmethod
    def debug(self, message: str, **context: Any) -> None:
        """Log a per-change trace message."""

    @abstractmethod
    def info(self, message: str, **context: Any) -> None:
        """Log a form lifecycle event."""

    @abstractmethod
    def warning(self, message: str, **context: Any) -> None:
        """Log a rejected operation."""
