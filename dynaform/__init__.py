"""
dynaform: schema-driven forms with per-field validation.

A form is an ordered list of field descriptors. Every change to a
field re-validates the whole form, so fields that depend on other
fields (password confirmation, age from a birth date) stay current.
"""

from .core.entities import (
    FieldDescriptor,
    FieldKind,
    FieldRules,
    FormSchema,
    FormSnapshot,
    FormStatus,
    InputType,
    SubmissionResult
)
from .application.services import FormSession
from .domain.form import build_default_schema
from .shared.validation import ValidationEngine

__version__ = "1.0.0"

__all__ = [
    'FieldDescriptor',
    'FieldKind',
    'FieldRules',
    'FormSchema',
    'FormSnapshot',
    'FormStatus',
    'InputType',
    'SubmissionResult',
    'FormSession',
    'build_default_schema',
    'ValidationEngine'
]
