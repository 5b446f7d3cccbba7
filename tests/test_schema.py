"""
Tests for field descriptors, schema invariants and the default schema.
"""

import re
import pytest

from dynaform.core.entities import FieldDescriptor, FieldKind, FieldRules, FormSchema, InputType
from dynaform.shared.exceptions import SchemaError, UnknownFieldError


class TestFieldDescriptor:
    """Test descriptor helpers."""

    def test_pattern_is_compiled(self):
        """Test that string patterns are compiled once."""
        rules = FieldRules(pattern=r"^\d+$")
        assert isinstance(rules.pattern, re.Pattern)
        assert rules.to_dict() == {"required": False, "pattern": r"^\d+$"}

    def test_default_values(self):
        """Test kind defaults for absent keys."""
        assert FieldDescriptor("a", "A", kind=FieldKind.CHECKBOX).default_value() is False
        assert FieldDescriptor("b", "B").default_value() == ""
        assert FieldDescriptor("c", "C", input_type=InputType.NUMBER).default_value() == ""

    def test_kind_flags(self):
        """Test numeric and secret flags."""
        assert FieldDescriptor("a", "A", input_type=InputType.NUMBER).is_numeric
        assert FieldDescriptor("b", "B", input_type=InputType.PASSWORD).is_secret
        assert not FieldDescriptor("c", "C", kind=FieldKind.TEXTAREA).is_numeric

    def test_options_become_tuple(self):
        """Test that options are frozen."""
        descriptor = FieldDescriptor("s", "S", kind=FieldKind.SELECT, options=["x", "y"])
        assert descriptor.options == ("x", "y")

    def test_to_dict(self):
        """Test dictionary form."""
        descriptor = FieldDescriptor(
            "age", "Age",
            input_type=InputType.NUMBER,
            rules=FieldRules(required=True, min=18)
        )
        assert descriptor.to_dict() == {
            "key": "age",
            "label": "Age",
            "component": "input",
            "type": "number",
            "rules": {"required": True, "min": 18},
            "custom_validator": False,
            "options": None
        }


class TestFormSchema:
    """Test schema invariants."""

    def test_duplicate_keys(self):
        """Test that keys must be unique."""
        with pytest.raises(SchemaError) as exc_info:
            FormSchema([FieldDescriptor("a", "A"), FieldDescriptor("a", "Again")])
        assert exc_info.value.key == "a"

    def test_select_needs_options(self):
        """Test that select fields carry options."""
        with pytest.raises(SchemaError):
            FormSchema([FieldDescriptor("s", "S", kind=FieldKind.SELECT)])
        with pytest.raises(SchemaError):
            FormSchema([FieldDescriptor("s", "S", kind=FieldKind.SELECT, options=())])

    def test_options_only_on_select(self):
        """Test that other kinds reject options."""
        with pytest.raises(SchemaError):
            FormSchema([FieldDescriptor("t", "T", options=("x",))])

    def test_lookup_and_order(self):
        """Test key lookup and iteration order."""
        schema = FormSchema([FieldDescriptor("b", "B"), FieldDescriptor("a", "A")])
        assert schema.keys() == ["b", "a"]
        assert [d.key for d in schema] == ["b", "a"]
        assert len(schema) == 2
        assert "a" in schema
        assert schema.get("a").label == "A"
        with pytest.raises(UnknownFieldError):
            schema.get("c")


class TestDefaultSchema:
    """Test the registration schema."""

    def test_fields(self, schema):
        """Test field keys and order."""
        assert schema.keys() == [
            "firstName", "lastName", "email", "phone", "age", "address", "city",
            "state", "zip", "country", "username", "password", "confirmPassword",
            "dob", "gender", "subscribe", "comments", "emergencyContact",
            "relation", "salary"
        ]

    def test_kinds(self, schema):
        """Test that every field kind is represented."""
        assert schema.get("state").options == ("California", "New York", "Texas", "Florida", "Illinois")
        assert schema.get("gender").options == ("Male", "Female", "Other")
        assert schema.get("subscribe").kind is FieldKind.CHECKBOX
        assert schema.get("comments").kind is FieldKind.TEXTAREA
        assert schema.get("phone").input_type is InputType.PHONE

    def test_custom_validators(self, schema):
        """Test which fields carry custom validators."""
        with_validator = [d.key for d in schema if d.custom_validator is not None]
        assert with_validator == ["confirmPassword", "dob"]

    @pytest.mark.parametrize("key,value,message", [
        ("email", "ada@example", "Invalid format for Email"),
        ("phone", "555-123-4567", "Invalid format for Phone Number"),
        ("zip", "1234", "Invalid format for ZIP Code"),
        ("username", "ada lovelace", "Invalid format for Username"),
        ("username", "ab", "Must be at least 3 characters"),
        ("address", "1 Way", "Must be at least 10 characters"),
        ("comments", "x" * 501, "Must be at most 500 characters"),
        ("salary", 1000001, "Must be at most 1000000"),
        ("age", 101, "Must be at most 100"),
        ("state", "", "State is required"),
    ])
    def test_rule_messages(self, engine, schema, valid_values, key, value, message):
        """Test representative failures of the registration rules."""
        values = {**valid_values, key: value}
        assert engine.validate_field(schema.get(key), value, values) == message
