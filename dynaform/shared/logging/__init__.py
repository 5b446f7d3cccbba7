"""
Structured logging for dynaform.
"""

from .logger_interface import LoggerInterface, LogLevel
from .structured_logger import JsonLineFormatter, StructuredLogger, configure_logging

__all__ = [
    'LoggerInterface',
    'LogLevel',
    'JsonLineFormatter',
    'StructuredLogger',
    'configure_logging'
]
