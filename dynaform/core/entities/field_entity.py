"""
Data models for form field schemas.

A form is described by an ordered list of field descriptors. Each
descriptor carries the field's identity, its kind, its built-in rules
and an optional custom validator closure. The list order is the render
order and the iteration order of every validation pass.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Pattern, Sequence, Tuple, Union

from ...shared.exceptions import SchemaError, UnknownFieldError

# (all_values, this_value) -> error message or None
CustomValidator = Callable[[Mapping[str, Any], Any], Optional[str]]


class FieldKind(Enum):
    """Component kind used to render a field."""
    INPUT = "input"
    SELECT = "select"
    CHECKBOX = "checkbox"
    TEXTAREA = "textarea"


class InputType(Enum):
    """Refinement of text-input fields."""
    TEXT = "text"
    EMAIL = "email"
    PHONE = "tel"
    NUMBER = "number"
    PASSWORD = "password"
    DATE = "date"


@dataclass(frozen=True)
class FieldRules:
    """
    Built-in constraints for a field.

    Length and pattern bounds apply to string values only; min and max
    apply to numeric values only. A string pattern is compiled on
    construction with `re.ASCII`, so digit and word classes match ASCII
    characters only, and is matched with search semantics.
    """
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[Union[str, Pattern]] = None
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern, re.ASCII))

    def to_dict(self) -> Dict[str, Any]:
        """Convert rules to dictionary representation, omitting unset bounds."""
        data: Dict[str, Any] = {"required": self.required}
        for name in ("min_length", "max_length", "min", "max"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        if self.pattern is not None:
            data["pattern"] = self.pattern.pattern
        return data


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Static schema entry describing one form field.

    Attributes:
        key: Unique identifier within the schema
        label: Display name, also used in generated error text
        kind: Component kind
        input_type: Text-input refinement (ignored for other kinds)
        rules: Built-in constraints
        custom_validator: Optional check run after the built-in rules
        options: Choice labels, select fields only
    """
    key: str
    label: str
    kind: FieldKind = FieldKind.INPUT
    input_type: InputType = InputType.TEXT
    rules: FieldRules = field(default_factory=FieldRules)
    custom_validator: Optional[CustomValidator] = field(default=None, compare=False)
    options: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        if self.options is not None and not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    @property
    def is_numeric(self) -> bool:
        """Whether the field holds a number."""
        return self.kind is FieldKind.INPUT and self.input_type is InputType.NUMBER

    @property
    def is_secret(self) -> bool:
        """Whether the field value must not be echoed."""
        return self.kind is FieldKind.INPUT and self.input_type is InputType.PASSWORD

    def default_value(self) -> Any:
        """Value an absent key stands for."""
        return False if self.kind is FieldKind.CHECKBOX else ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert descriptor to dictionary representation."""
        return {
            'key': self.key,
            'label': self.label,
            'component': self.kind.value,
            'type': self.input_type.value if self.kind is FieldKind.INPUT else None,
            'rules': self.rules.to_dict(),
            'custom_validator': self.custom_validator is not None,
            'options': list(self.options) if self.options is not None else None
        }


class FormSchema:
    """
    Ordered, immutable collection of field descriptors.

    Construction enforces the schema invariants: keys are unique,
    select fields carry a non-empty option list and no other kind
    carries options.
    """

    def __init__(self, fields: Sequence[FieldDescriptor]):
        """
        Initialize the schema.

        Args:
            fields: Field descriptors in render order

        Raises:
            SchemaError: If an invariant is violated
        """
        self._fields: Tuple[FieldDescriptor, ...] = tuple(fields)
        self._index: Dict[str, FieldDescriptor] = {}

        for descriptor in self._fields:
            if descriptor.key in self._index:
                raise SchemaError(f"Duplicate field key: {descriptor.key}", key=descriptor.key)
            if descriptor.kind is FieldKind.SELECT and not descriptor.options:
                raise SchemaError(f"Select field '{descriptor.key}' needs options", key=descriptor.key)
            if descriptor.kind is not FieldKind.SELECT and descriptor.options is not None:
                raise SchemaError(
                    f"Options are only meaningful for select fields: {descriptor.key}",
                    key=descriptor.key
                )
            self._index[descriptor.key] = descriptor

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def get(self, key: str) -> FieldDescriptor:
        """
        Get a descriptor by key.

        Args:
            key: Field key

        Returns:
            FieldDescriptor: Matching descriptor

        Raises:
            UnknownFieldError: If no field has this key
        """
        try:
            return self._index[key]
        except KeyError:
            raise UnknownFieldError(key) from None

    def keys(self) -> List[str]:
        """Field keys in schema order."""
        return [descriptor.key for descriptor in self._fields]
