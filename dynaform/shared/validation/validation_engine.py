"""
Validation engine for form fields.

This module turns a field descriptor into an ordered chain of rules and
runs full revalidation passes over a schema. Every pass recomputes the
whole error-set, because a custom validator may read any other field's
value.
"""

from typing import Any, List, Mapping

from ...core.entities import FieldDescriptor, FormSchema
from .validator_interface import ValidationResult, ValidatorInterface
from .validation_rules import (
    CustomRule,
    MaxLengthRule,
    MaxRule,
    MinLengthRule,
    MinRule,
    PatternRule,
    RequiredRule,
    ValidationRule,
    is_empty
)


class ValidationEngine(ValidatorInterface):
    """
    Engine for evaluating field rules.

    Evaluation order per field is required, string checks (min length,
    max length, pattern), numeric checks (min, max) and finally the
    custom validator. The first failing rule wins.
    """

    def build_rules(self, descriptor: FieldDescriptor) -> List[ValidationRule]:
        """
        Build the rule chain for a field.

        Args:
            descriptor: Field descriptor

        Returns:
            List[ValidationRule]: Rules in evaluation order, excluding
                the required check
        """
        rules = descriptor.rules
        chain: List[ValidationRule] = []

        # Zero length bounds are treated as unset
        if rules.min_length:
            chain.append(MinLengthRule(rules.min_length))
        if rules.max_length:
            chain.append(MaxLengthRule(rules.max_length))
        if rules.pattern is not None:
            chain.append(PatternRule(descriptor.label, rules.pattern))
        if rules.min is not None:
            chain.append(MinRule(rules.min))
        if rules.max is not None:
            chain.append(MaxRule(rules.max))
        if descriptor.custom_validator is not None:
            chain.append(CustomRule(descriptor.custom_validator))

        return chain

    def validate_field(
        self,
        descriptor: FieldDescriptor,
        value: Any,
        values: Mapping[str, Any]
    ) -> str:
        """
        Validate one field against the complete value-set.

        Args:
            descriptor: Field descriptor
            value: Candidate value
            values: Complete value-set, passed to custom validators

        Returns:
            str: First error message, empty when valid
        """
        if descriptor.rules.required and is_empty(value):
            return RequiredRule(descriptor.label).message

        for rule in self.build_rules(descriptor):
            message = rule.evaluate(value, values)
            if message:
                return message

        return ""

    def validate_all(
        self,
        schema: FormSchema,
        values: Mapping[str, Any]
    ) -> ValidationResult:
        """
        Run a revalidation pass over every field in schema order.

        Every field is evaluated regardless of earlier failures.

        Args:
            schema: Form schema
            values: Complete value-set

        Returns:
            ValidationResult: Fresh error-set keyed by field
        """
        errors = {
            descriptor.key: self.validate_field(
                descriptor,
                values.get(descriptor.key),
                values
            )
            for descriptor in schema
        }
        return ValidationResult(errors=errors)
