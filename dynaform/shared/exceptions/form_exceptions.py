"""
Exception types for the form engine.

Field validation failures are never raised; they are reported as
messages in the error-set. The exceptions below cover faults at the
edges of the engine: malformed schemas, unknown field keys coming from
the presentation layer, and invalid configuration.
"""

from typing import Optional


class DynaformError(Exception):
    """Base class for all dynaform errors."""


class SchemaError(DynaformError):
    """
    Raised when a field schema violates its invariants.

    Examples are duplicate keys, a select field without options, or a
    YAML schema naming an unknown component or validator.
    """

    def __init__(self, message: str, key: Optional[str] = None):
        """
        Initialize schema error.

        Args:
            message: Error message
            key: Optional key of the offending field
        """
        super().__init__(message)
        self.key = key


class UnknownFieldError(DynaformError, KeyError):
    """Raised when a change event names a key that is not in the schema."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown field: {self.key}"


class ConfigurationError(DynaformError, ValueError):
    """Raised when loaded configuration is invalid."""
