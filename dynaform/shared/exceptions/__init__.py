"""
Shared exception types.
"""

from .form_exceptions import (
    DynaformError,
    SchemaError,
    UnknownFieldError,
    ConfigurationError
)

__all__ = [
    'DynaformError',
    'SchemaError',
    'UnknownFieldError',
    'ConfigurationError'
]
