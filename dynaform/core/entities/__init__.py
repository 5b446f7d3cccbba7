"""
Core entities module for dynaform.

This module provides access to all core entity classes used throughout
the application.
"""

from .field_entity import (
    CustomValidator,
    FieldKind,
    InputType,
    FieldRules,
    FieldDescriptor,
    FormSchema
)
from .form_entity import (
    FormStatus,
    FormSnapshot,
    SubmissionResult
)

__all__ = [
    'CustomValidator',
    'FieldKind',
    'InputType',
    'FieldRules',
    'FieldDescriptor',
    'FormSchema',
    'FormStatus',
    'FormSnapshot',
    'SubmissionResult'
]
