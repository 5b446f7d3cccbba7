"""
Configuration manager for centralized configuration handling.

This module provides a manager for loading and managing application
configurations, with support for different environments.
"""

from typing import Dict, Any, Mapping, Optional
import copy
import os
import yaml
from pathlib import Path

from ...shared.exceptions import ConfigurationError
from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "name": "dynaform",
    },
    "form": {
        "schema_path": None,
    },
    "output": {
        "use_rich": True,
    },
}


class ConfigManager:
    """
    Manager for application configurations.

    Configuration is layered: built-in defaults, then ``base.yaml``,
    then ``<environment>.yaml``, then environment variable overrides.
    Missing files are skipped.
    """

    def __init__(
        self,
        config_dir: str = "config",
        environment: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        """
        Initialize the manager.

        Args:
            config_dir: Configuration directory path
            environment: Optional environment name
            environ: Optional environment mapping, defaults to os.environ
        """
        self._environ = os.environ if environ is None else environ
        self.config_dir = Path(config_dir)
        self.environment = environment or self._environ.get("DYNAFORM_ENV", "development")
        self.validator = ConfigValidator()
        self._config: Optional[EnvironmentConfig] = None

    def load_config(self) -> EnvironmentConfig:
        """
        Load configuration from files.

        Returns:
            EnvironmentConfig: Loaded configuration

        Raises:
            ConfigurationError: If a file is malformed or the
                configuration is invalid
        """
        if self._config is not None:
            return self._config

        config = copy.deepcopy(DEFAULT_CONFIG)
        config = self._merge_configs(config, self._load_yaml("base.yaml"))
        config = self._merge_configs(config, self._load_yaml(f"{self.environment}.yaml"))

        env_config = EnvironmentConfig(config, environ=self._environ)
        self.validator.validate_config(env_config.config)

        self._config = env_config
        return self._config

    def get_config(self) -> EnvironmentConfig:
        """
        Get the current configuration.

        Returns:
            EnvironmentConfig: Current configuration
        """
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def _load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Args:
            filename: Configuration file name

        Returns:
            Dict[str, Any]: Loaded configuration, empty when the file
                does not exist

        Raises:
            ConfigurationError: If the file is not a YAML mapping
        """
        file_path = self.config_dir / filename
        if not file_path.exists():
            return {}

        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {file_path}")
        return data

    def _merge_configs(
        self,
        base: Dict[str, Any],
        override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge two configurations.

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Dict[str, Any]: Merged configuration
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
