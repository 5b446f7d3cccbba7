"""
Field validation rules and engine.
"""

from .validator_interface import ValidationIssue, ValidationResult, ValidatorInterface
from .validation_rules import (
    ValidationRule,
    RequiredRule,
    MinLengthRule,
    MaxLengthRule,
    PatternRule,
    MinRule,
    MaxRule,
    CustomRule,
    is_empty,
    is_number
)
from .validation_engine import ValidationEngine

__all__ = [
    'ValidationIssue',
    'ValidationResult',
    'ValidatorInterface',
    'ValidationRule',
    'RequiredRule',
    'MinLengthRule',
    'MaxLengthRule',
    'PatternRule',
    'MinRule',
    'MaxRule',
    'CustomRule',
    'is_empty',
    'is_number',
    'ValidationEngine'
]
