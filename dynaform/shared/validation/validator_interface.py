"""
Validator interface for form validation.

This module defines the result types of a validation pass and the
interface that validation engines implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from ...core.entities import FieldDescriptor, FormSchema


@dataclass(frozen=True)
class ValidationIssue:
    """
    Validation issue information.

    This class represents a single failed field, in the order the
    field appears in the schema.
    """

    field: str
    message: str


@dataclass
class ValidationResult:
    """
    Result of a full revalidation pass.

    Holds a fresh error-set with one entry per schema field; an empty
    message means the field is valid.
    """

    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return any(self.errors.values())

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    @property
    def invalid_fields(self) -> List[str]:
        return [key for key, message in self.errors.items() if message]

    @property
    def issues(self) -> List[ValidationIssue]:
        return [
            ValidationIssue(field=key, message=message)
            for key, message in self.errors.items()
            if message
        ]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        return {
            "is_valid": self.is_valid,
            "errors": dict(self.errors),
            "issues": [
                {"field": issue.field, "message": issue.message}
                for issue in self.issues
            ]
        }


class ValidatorInterface(ABC):
    """
    Interface for validation implementations.

    Implementations must be pure: validating the same value-set twice
    yields identical results and has no side effects.
    """

    @abstractmethod
    def validate_field(
        self,
        descriptor: FieldDescriptor,
        value: Any,
        values: Mapping[str, Any]
    ) -> str:
        """
        Validate one field.

        Args:
            descriptor: Field descriptor
            value: Candidate value
            values: Complete value-set

        Returns:
            str: Error message, empty when valid
        """
        pass

    @abstractmethod
    def validate_all(
        self,
        schema: FormSchema,
        values: Mapping[str, Any]
    ) -> ValidationResult:
        """
        Validate every field of a schema.

        Args:
            schema: Form schema
            values: Complete value-set

        Returns:
            ValidationResult: Fresh error-set
        """
        pass
