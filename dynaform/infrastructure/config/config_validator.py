"""
Configuration validator for validating configuration values.

This module provides a validator for ensuring configuration values
meet the required format and constraints.
"""

from typing import Dict, Any, List

from ...shared.exceptions import ConfigurationError

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidator:
    """
    Validator for configuration values.

    This class validates configuration values to ensure they meet
    the required format and constraints.
    """

    def __init__(self):
        """Initialize the validator."""
        self.errors: List[str] = []

    def validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.errors = []

        for section in ("logging", "form", "output"):
            if section in config and not isinstance(config[section], dict):
                self.errors.append(f"Configuration section '{section}' must be a mapping")

        if isinstance(config.get("logging"), dict):
            self._validate_logging_config(config["logging"])

        if isinstance(config.get("form"), dict):
            self._validate_form_config(config["form"])

        if isinstance(config.get("output"), dict):
            self._validate_output_config(config["output"])

        if self.errors:
            raise ConfigurationError("\n".join(self.errors))

    def _validate_logging_config(self, config: Dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Args:
            config: Logging configuration
        """
        if "level" in config:
            level = config["level"]
            if not isinstance(level, str) or level.upper() not in VALID_LEVELS:
                self.errors.append(
                    f"Logging level must be one of: {', '.join(VALID_LEVELS)}"
                )

        if "name" in config:
            name = config["name"]
            if not isinstance(name, str) or not name:
                self.errors.append("Logger name must be a non-empty string")

    def _validate_form_config(self, config: Dict[str, Any]) -> None:
        """
        Validate form configuration.

        Args:
            config: Form configuration
        """
        schema_path = config.get("schema_path")
        if schema_path is not None and (not isinstance(schema_path, str) or not schema_path):
            self.errors.append("Form schema path must be a non-empty string or null")

    def _validate_output_config(self, config: Dict[str, Any]) -> None:
        """
        Validate output configuration.

        Args:
            config: Output configuration
        """
        if "use_rich" in config and not isinstance(config["use_rich"], bool):
            self.errors.append("Output use_rich must be a boolean")
