"""
Validation rules for form fields.

Each rule decides whether it applies to a value's shape and, if so,
whether the value passes. Rules are composed per field by the
validation engine in a fixed order; the first failing rule wins.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Pattern, Union
import math

from ...core.entities import CustomValidator

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """Whether value is a real, non-NaN number (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_blank_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() == ""


def is_empty(value: Any) -> bool:
    """
    Whether value counts as missing.

    None, the empty string, whitespace-only strings, NaN and False are
    all empty. Zero is not.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, bool):
        return not value
    if isinstance(value, float):
        return math.isnan(value)
    return False


def format_number(value: Number) -> str:
    """Render a bound the way a user typed it: 18, not 18.0."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ValidationRule(ABC):
    """
    Base class for validation rules.

    This abstract class defines the interface for validation
    rules and provides common functionality.
    """

    def __init__(self, message: str):
        """
        Initialize validation rule.

        Args:
            message: Error message reported when the rule fails
        """
        self.message = message

    def applies(self, value: Any) -> bool:
        """Whether the rule is meaningful for this value's shape."""
        return True

    @abstractmethod
    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """
        Validate value.

        Args:
            value: Value to validate
            context: Complete value-set

        Returns:
            bool: Whether value is valid
        """
        pass

    def evaluate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Evaluate the rule against a value.

        Args:
            value: Value to check
            context: Complete value-set

        Returns:
            str: Error message, empty when the rule passes or does not apply
        """
        if not self.applies(value) or self.validate(value, context):
            return ""
        return self.message


class RequiredRule(ValidationRule):
    """Rule that requires a value to be present."""

    def __init__(self, label: str):
        super().__init__(f"{label} is required")

    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """Check if value is present."""
        return not is_empty(value)


class StringRule(ValidationRule):
    """Base for rules evaluated on the trimmed text of non-blank strings."""

    def applies(self, value: Any) -> bool:
        return isinstance(value, str) and not is_blank_string(value)


class MinLengthRule(StringRule):
    """Rule that enforces a minimum trimmed length."""

    def __init__(self, min_length: int):
        super().__init__(f"Must be at least {min_length} characters")
        self.min_length = min_length

    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        return len(value.strip()) >= self.min_length


class MaxLengthRule(StringRule):
    """Rule that enforces a maximum trimmed length."""

    def __init__(self, max_length: int):
        super().__init__(f"Must be at most {max_length} characters")
        self.max_length = max_length

    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        return len(value.strip()) <= self.max_length


class PatternRule(StringRule):
    """Rule that validates the trimmed value against a pattern."""

    def __init__(self, label: str, pattern: Pattern):
        """
        Initialize pattern rule.

        Args:
            label: Field label used in the message
            pattern: Compiled regular expression, matched with search
                semantics so anchors must be part of the pattern
        """
        super().__init__(f"Invalid format for {label}")
        self.pattern = pattern

    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        return self.pattern.search(value.strip()) is not None


class NumberRule(ValidationRule):
    """Base for rules evaluated on real numbers only."""

    def applies(self, value: Any) -> bool:
        return is_number(value)


class MinRule(NumberRule):
    """Rule that enforces a lower numeric bound."""

    def __init__(self, minimum: Number):
        super().__init__(f"Must be at least {format_number(minimum)}")
        self.minimum = minimum

    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        return value >= self.minimum


class MaxRule(NumberRule):
    """Rule that enforces an upper numeric bound."""

    def __init__(self, maximum: Number):
        super().__init__(f"Must be at most {format_number(maximum)}")
        self.maximum = maximum

    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        return value <= self.maximum


class CustomRule(ValidationRule):
    """
    Rule that delegates to a field's custom validator.

    The validator returns its own message, so this rule reports that
    message rather than a fixed one. It runs for every value, blank
    input included; validators guard against blank input themselves.
    """

    def __init__(self, validator: CustomValidator):
        super().__init__("")
        self.validator = validator

    def validate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        return not self.evaluate(value, context)

    def evaluate(
        self,
        value: Any,
        context: Optional[Mapping[str, Any]] = None
    ) -> str:
        return self.validator(context or {}, value) or ""
