"""
Tests for loading schemas from YAML.
"""

import pytest

from dynaform.core.entities import FieldKind, InputType
from dynaform.domain.form import build_default_schema
from dynaform.infrastructure.schema import SchemaLoader
from dynaform.shared.exceptions import SchemaError


@pytest.fixture
def loader() -> SchemaLoader:
    return SchemaLoader()


class TestPackagedSchema:
    """Test the registration schema shipped as YAML."""

    def test_matches_default_schema(self, loader):
        """Test that the YAML mirrors the built-in schema."""
        loaded = list(loader.load_packaged("registration"))
        built = list(build_default_schema())

        assert [d.to_dict() for d in loaded] == [d.to_dict() for d in built]

    def test_validators_are_wired(self, loader, engine):
        """Test that named validators resolve to working closures."""
        schema = loader.load_packaged()
        confirm = schema.get("confirmPassword")
        values = {"password": "abc12345", "confirmPassword": "xyz12345"}
        assert engine.validate_field(confirm, "xyz12345", values) == "Passwords do not match"
        assert engine.validate_field(schema.get("dob"), "not a date", values) == "Invalid date"

    def test_patterns_accept_ascii_digits_only(self, loader, engine):
        """Test that loaded digit patterns reject other scripts' digits."""
        schema = loader.load_packaged()
        assert engine.validate_field(schema.get("zip"), "\u0661\u0662\u0663\u0664\u0665", {}) == "Invalid format for ZIP Code"
        assert engine.validate_field(schema.get("zip"), "12345", {}) == ""


class TestLoadDict:
    """Test building schemas from parsed data."""

    def test_minimal_field(self, loader):
        """Test defaults for omitted attributes."""
        schema = loader.load_dict({"fields": [{"key": "nickname"}]})
        descriptor = schema.get("nickname")
        assert descriptor.label == "nickname"
        assert descriptor.kind is FieldKind.INPUT
        assert descriptor.input_type is InputType.TEXT
        assert descriptor.rules.required is False

    def test_rule_aliases(self, loader):
        """Test that camelCase and snake_case rule names both work."""
        schema = loader.load_dict({"fields": [
            {"key": "a", "rules": {"minLength": 2, "maxLength": 4}},
            {"key": "b", "rules": {"min_length": 2, "max_length": 4}},
        ]})
        assert schema.get("a").rules == schema.get("b").rules

    def test_validator_with_arguments(self, loader, engine):
        """Test a validator mapping with factory arguments."""
        schema = loader.load_dict({"fields": [
            {"key": "email", "label": "Email"},
            {"key": "email2", "label": "Repeat", "validator": {
                "name": "matches_field", "other_key": "email", "message": "Emails differ"
            }},
        ]})
        values = {"email": "a@b.co", "email2": "c@d.co"}
        assert engine.validate_field(schema.get("email2"), "c@d.co", values) == "Emails differ"

    def test_custom_factory_registry(self, engine):
        """Test resolving validators from an injected registry."""
        loader = SchemaLoader({"never": lambda: (lambda values, value: "nope")})
        schema = loader.load_dict({"fields": [{"key": "x", "validator": "never"}]})
        assert engine.validate_field(schema.get("x"), "anything", {}) == "nope"

    @pytest.mark.parametrize("data", [
        None,
        [],
        {"fields": "nope"},
        {"fields": ["nope"]},
        {"fields": [{"label": "No key"}]},
        {"fields": [{"key": "a", "component": "slider"}]},
        {"fields": [{"key": "a", "type": "color"}]},
        {"fields": [{"key": "a", "rules": {"required": "yes"}}]},
        {"fields": [{"key": "a", "rules": {"minLength": -1}}]},
        {"fields": [{"key": "a", "rules": {"min": "5"}}]},
        {"fields": [{"key": "a", "rules": {"pattern": "("}}]},
        {"fields": [{"key": "a", "rules": {"unique": True}}]},
        {"fields": [{"key": "a", "validator": "no_such_validator"}]},
        {"fields": [{"key": "a", "validator": {"name": "minimum_age", "decades": 2}}]},
        {"fields": [{"key": "a", "validator": 42}]},
        {"fields": [{"key": "s", "component": "select"}]},
        {"fields": [{"key": "s", "component": "select", "options": [1, 2]}]},
        {"fields": [{"key": "a"}, {"key": "a"}]},
    ])
    def test_malformed_schemas(self, loader, data):
        """Test that malformed schemas raise SchemaError."""
        with pytest.raises(SchemaError):
            loader.load_dict(data)


class TestLoadFile:
    """Test reading schema files."""

    def test_load_file(self, loader, tmp_path):
        """Test loading a schema from disk."""
        path = tmp_path / "contact.yaml"
        path.write_text(
            "fields:\n"
            "  - key: topic\n"
            "    label: Topic\n"
            "    component: select\n"
            "    rules: {required: true}\n"
            "    options: [Billing, Support]\n"
            "  - key: message\n"
            "    label: Message\n"
            "    component: textarea\n"
            "    rules: {required: true, maxLength: 200}\n"
        )
        schema = loader.load(path)
        assert schema.keys() == ["topic", "message"]
        assert schema.get("topic").options == ("Billing", "Support")

    def test_missing_file(self, loader, tmp_path):
        """Test a missing schema file."""
        with pytest.raises(SchemaError):
            loader.load(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, loader, tmp_path):
        """Test a file that is not valid YAML."""
        path = tmp_path / "broken.yaml"
        path.write_text("fields: [\n")
        with pytest.raises(SchemaError):
            loader.load(path)
