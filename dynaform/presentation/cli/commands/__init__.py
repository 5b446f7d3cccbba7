"""
CLI command handlers.
"""

from .form_commands import SchemaCommand, ValidateCommand, FillCommand

__all__ = [
    'SchemaCommand',
    'ValidateCommand',
    'FillCommand'
]
