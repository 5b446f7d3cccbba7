"""
Environment configuration for environment-specific settings.

This module applies environment variable overrides on top of the
file-based configuration and exposes typed accessors.
"""

from typing import Dict, Any, Mapping, Optional
import os

from ...shared.logging import LogLevel

TRUE_VALUES = ("1", "true", "yes", "on")


class EnvironmentConfig:
    """
    Environment-specific configuration.

    This class provides configuration settings with support for
    environment variable overrides.
    """

    def __init__(self, config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the configuration.

        Args:
            config: Merged file configuration
            environ: Optional environment mapping, defaults to os.environ
        """
        self.config = config
        self._environ = os.environ if environ is None else environ
        self._apply_environment_overrides()

    def _apply_environment_overrides(self) -> None:
        """Apply environment variable overrides to configuration."""
        env = self._environ

        if "DYNAFORM_LOG_LEVEL" in env:
            self.config.setdefault("logging", {})["level"] = env["DYNAFORM_LOG_LEVEL"]

        if "DYNAFORM_SCHEMA_PATH" in env:
            self.config.setdefault("form", {})["schema_path"] = env["DYNAFORM_SCHEMA_PATH"] or None

        if "DYNAFORM_USE_RICH" in env:
            self.config.setdefault("output", {})["use_rich"] = (
                env["DYNAFORM_USE_RICH"].strip().lower() in TRUE_VALUES
            )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level section."""
        return self.config.get(key, default)

    def get_log_level(self) -> LogLevel:
        """
        Get logging level.

        Returns:
            LogLevel: Configured level
        """
        return LogLevel.from_name(self.config.get("logging", {}).get("level", "INFO"))

    def get_logger_name(self) -> str:
        """
        Get root logger name.

        Returns:
            str: Logger name
        """
        return self.config.get("logging", {}).get("name", "dynaform")

    def get_schema_path(self) -> Optional[str]:
        """
        Get schema file path.

        Returns:
            Optional[str]: Path, or None for the built-in schema
        """
        return self.config.get("form", {}).get("schema_path")

    def use_rich(self) -> bool:
        """
        Whether output uses rich formatting.

        Returns:
            bool: True for rich tables and panels
        """
        return self.config.get("output", {}).get("use_rich", True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return dict(self.config)
