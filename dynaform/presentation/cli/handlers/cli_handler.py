"""
CLI handler base for command execution.

This module provides a base handler for CLI commands,
with support for command execution and error handling.
"""

from typing import Any, Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..formatters.output_formatter import OutputFormatter


@dataclass
class CommandResult:
    """Result of a command execution."""

    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[Exception] = None


class CommandHandler(ABC):
    """
    Base class for command handlers.

    This class provides a base implementation for command handlers,
    with support for command execution and error handling.
    """

    def __init__(self, formatter: OutputFormatter):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
        """
        self.formatter = formatter

    @abstractmethod
    def execute(self, **kwargs) -> CommandResult:
        """
        Execute the command.

        Args:
            **kwargs: Command arguments

        Returns:
            CommandResult: Command execution result
        """
        pass

    def handle_error(
        self,
        error: Optional[Exception],
        message: str = "An error occurred",
        data: Optional[Any] = None
    ) -> CommandResult:
        """
        Handle command execution error.

        Args:
            error: Exception that occurred, None for a plain failure
            message: Error message
            data: Optional result data

        Returns:
            CommandResult: Error result
        """
        self.formatter.print(
            self.formatter.format_error(message, str(error) if error else None)
        )

        return CommandResult(
            success=False,
            message=message,
            data=data,
            error=error
        )

    def handle_success(
        self,
        message: str,
        data: Optional[Any] = None,
        details: Optional[str] = None
    ) -> CommandResult:
        """
        Handle command execution success.

        Args:
            message: Success message
            data: Optional result data
            details: Optional success details

        Returns:
            CommandResult: Success result
        """
        self.formatter.print(
            self.formatter.format_success(message, details)
        )

        return CommandResult(
            success=True,
            message=message,
            data=data
        )
