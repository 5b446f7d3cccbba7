"""
YAML schema loader.

Reads form schemas from YAML documents of the form::

    fields:
      - key: confirmPassword
        label: Confirm Password
        component: input
        type: password
        rules: {required: true, minLength: 8}
        validator: {name: matches_field, other_key: password}

Custom validators are referenced by name and built through a factory
registry, so schema files stay plain data.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
import re
import yaml

from ...core.entities import (
    CustomValidator,
    FieldDescriptor,
    FieldKind,
    FieldRules,
    FormSchema,
    InputType
)
from ...domain.form import VALIDATOR_FACTORIES
from ...shared.exceptions import SchemaError

PACKAGED_SCHEMA_DIR = Path(__file__).resolve().parents[2] / "schemas"

# camelCase spellings accepted for compatibility with front-end schemas
RULE_ALIASES = {
    "minLength": "min_length",
    "maxLength": "max_length",
}
INT_RULES = ("min_length", "max_length")
NUMBER_RULES = ("min", "max")


class SchemaLoader:
    """
    Loader building FormSchema instances from YAML.

    This class validates the shape of every field entry and resolves
    validator references against a factory registry.
    """

    def __init__(
        self,
        validator_factories: Optional[Mapping[str, Callable[..., CustomValidator]]] = None
    ):
        """
        Initialize the loader.

        Args:
            validator_factories: Optional validator registry, defaults
                to the built-in factories
        """
        self.validator_factories = dict(
            VALIDATOR_FACTORIES if validator_factories is None else validator_factories
        )

    def load(self, path: Union[str, Path]) -> FormSchema:
        """
        Load a schema file.

        Args:
            path: Path to a YAML schema

        Returns:
            FormSchema: Parsed schema

        Raises:
            SchemaError: If the file is missing or malformed
        """
        file_path = Path(path)
        if not file_path.exists():
            raise SchemaError(f"Schema file not found: {file_path}")

        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaError(f"Invalid YAML in {file_path}: {e}") from e

        return self.load_dict(data)

    def load_packaged(self, name: str = "registration") -> FormSchema:
        """
        Load a schema shipped with the package.

        Args:
            name: Schema name without extension

        Returns:
            FormSchema: Parsed schema
        """
        return self.load(PACKAGED_SCHEMA_DIR / f"{name}.yaml")

    def load_dict(self, data: Any) -> FormSchema:
        """
        Build a schema from parsed YAML data.

        Args:
            data: Mapping with a ``fields`` list

        Returns:
            FormSchema: Parsed schema

        Raises:
            SchemaError: If the data is malformed
        """
        if not isinstance(data, dict) or not isinstance(data.get("fields"), list):
            raise SchemaError("Schema must be a mapping with a 'fields' list")

        fields: List[FieldDescriptor] = [
            self._parse_field(entry, index)
            for index, entry in enumerate(data["fields"])
        ]
        return FormSchema(fields)

    def _parse_field(self, entry: Any, index: int) -> FieldDescriptor:
        """
        Parse a single field entry.

        Args:
            entry: Raw field mapping
            index: Position in the fields list

        Returns:
            FieldDescriptor: Parsed descriptor
        """
        if not isinstance(entry, dict):
            raise SchemaError(f"Field #{index} must be a mapping")

        key = entry.get("key")
        if not isinstance(key, str) or not key:
            raise SchemaError(f"Field #{index} needs a non-empty 'key'")

        label = entry.get("label", key)
        if not isinstance(label, str):
            raise SchemaError(f"Field '{key}' label must be a string", key=key)

        try:
            kind = FieldKind(entry.get("component", FieldKind.INPUT.value))
        except ValueError:
            raise SchemaError(f"Unknown component for '{key}': {entry.get('component')}", key=key) from None

        try:
            input_type = InputType(entry.get("type") or InputType.TEXT.value)
        except ValueError:
            raise SchemaError(f"Unknown input type for '{key}': {entry.get('type')}", key=key) from None

        options = entry.get("options")
        if options is not None:
            if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
                raise SchemaError(f"Options for '{key}' must be a list of strings", key=key)
            options = tuple(options)

        return FieldDescriptor(
            key=key,
            label=label,
            kind=kind,
            input_type=input_type,
            rules=self._parse_rules(key, entry.get("rules") or {}),
            custom_validator=self._resolve_validator(key, entry.get("validator")),
            options=options
        )

    def _parse_rules(self, key: str, raw: Any) -> FieldRules:
        """
        Parse a rules mapping.

        Args:
            key: Field key, for error messages
            raw: Raw rules mapping

        Returns:
            FieldRules: Parsed rules
        """
        if not isinstance(raw, dict):
            raise SchemaError(f"Rules for '{key}' must be a mapping", key=key)

        rules: Dict[str, Any] = {}
        for name, value in raw.items():
            name = RULE_ALIASES.get(name, name)
            if name == "required":
                if not isinstance(value, bool):
                    raise SchemaError(f"Rule 'required' for '{key}' must be a boolean", key=key)
            elif name in INT_RULES:
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise SchemaError(f"Rule '{name}' for '{key}' must be a non-negative integer", key=key)
            elif name in NUMBER_RULES:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise SchemaError(f"Rule '{name}' for '{key}' must be a number", key=key)
            elif name == "pattern":
                if not isinstance(value, str):
                    raise SchemaError(f"Rule 'pattern' for '{key}' must be a string", key=key)
                try:
                    value = re.compile(value, re.ASCII)
                except re.error as e:
                    raise SchemaError(f"Invalid pattern for '{key}': {e}", key=key) from e
            else:
                raise SchemaError(f"Unknown rule for '{key}': {name}", key=key)
            rules[name] = value

        return FieldRules(**rules)

    def _resolve_validator(self, key: str, raw: Any) -> Optional[CustomValidator]:
        """
        Resolve a validator reference.

        Args:
            key: Field key, for error messages
            raw: Validator name, or mapping with ``name`` and factory
                keyword arguments

        Returns:
            Optional[CustomValidator]: Built validator, None when absent
        """
        if raw is None:
            return None

        if isinstance(raw, str):
            name, kwargs = raw, {}
        elif isinstance(raw, dict) and isinstance(raw.get("name"), str):
            kwargs = {k: v for k, v in raw.items() if k != "name"}
            name = raw["name"]
        else:
            raise SchemaError(f"Validator for '{key}' must be a name or a mapping with 'name'", key=key)

        factory = self.validator_factories.get(name)
        if factory is None:
            raise SchemaError(f"Unknown validator for '{key}': {name}", key=key)

        try:
            return factory(**kwargs)
        except TypeError as e:
            raise SchemaError(f"Bad arguments for validator '{name}' on '{key}': {e}", key=key) from e
