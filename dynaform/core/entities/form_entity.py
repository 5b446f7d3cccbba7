"""
Data models for form state.

The value-set maps field keys to typed values and the error-set maps
field keys to a message, where an empty string means valid. Both are
replaced wholesale on every change and on submit, so a snapshot handed
to the presentation layer never changes underneath it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .field_entity import FieldDescriptor


class FormStatus(Enum):
    """Form state derived from the current error-set."""
    CLEAN = "clean"
    ERROR = "error"


@dataclass(frozen=True)
class FormSnapshot:
    """
    Value-set and error-set pair for rendering.

    The status is a function of the error-set contents and is not
    tracked separately.
    """
    values: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return any(self.errors.values())

    @property
    def status(self) -> FormStatus:
        return FormStatus.ERROR if self.has_errors else FormStatus.CLEAN

    @property
    def invalid_fields(self) -> List[str]:
        return [key for key, message in self.errors.items() if message]

    def error_for(self, key: str) -> str:
        """Message for a field, empty when valid or not yet validated."""
        return self.errors.get(key) or ""

    def value_for(self, descriptor: FieldDescriptor) -> Any:
        """Current value of a field, falling back to its kind default."""
        value = self.values.get(descriptor.key)
        return descriptor.default_value() if value is None else value

    def to_dict(self) -> Dict[str, Any]:
        """Convert snapshot to dictionary representation."""
        return {
            'status': self.status.value,
            'values': dict(self.values),
            'errors': dict(self.errors)
        }


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a submit attempt."""
    submitted: bool
    snapshot: FormSnapshot

    @property
    def errors(self) -> Dict[str, str]:
        return self.snapshot.errors
