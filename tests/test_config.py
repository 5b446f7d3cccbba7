"""
Tests for configuration loading.
"""

import pytest

from dynaform.infrastructure.config import ConfigManager
from dynaform.shared.exceptions import ConfigurationError
from dynaform.shared.logging import LogLevel


def write(path, text):
    path.write_text(text)
    return path


class TestConfigManager:
    """Test layered configuration."""

    def test_defaults_without_files(self, tmp_path):
        """Test that a missing configuration directory yields defaults."""
        config = ConfigManager(config_dir=str(tmp_path / "none"), environ={}).load_config()
        assert config.get_log_level() == LogLevel.INFO
        assert config.get_logger_name() == "dynaform"
        assert config.get_schema_path() is None
        assert config.use_rich() is True

    def test_environment_file_overrides_base(self, tmp_path):
        """Test base and environment file merging."""
        write(tmp_path / "base.yaml", "logging:\n  level: INFO\n  name: forms\noutput:\n  use_rich: false\n")
        write(tmp_path / "staging.yaml", "logging:\n  level: WARNING\n")

        config = ConfigManager(str(tmp_path), environment="staging", environ={}).load_config()
        assert config.get_log_level() == LogLevel.WARNING
        assert config.get_logger_name() == "forms"
        assert config.use_rich() is False

    def test_environment_from_variable(self, tmp_path):
        """Test selecting the environment through DYNAFORM_ENV."""
        write(tmp_path / "ci.yaml", "logging:\n  level: ERROR\n")
        manager = ConfigManager(str(tmp_path), environ={"DYNAFORM_ENV": "ci"})
        assert manager.environment == "ci"
        assert manager.load_config().get_log_level() == LogLevel.ERROR

    def test_variable_overrides(self, tmp_path):
        """Test environment variable overrides."""
        environ = {
            "DYNAFORM_LOG_LEVEL": "debug",
            "DYNAFORM_SCHEMA_PATH": "forms/contact.yaml",
            "DYNAFORM_USE_RICH": "no",
        }
        config = ConfigManager(str(tmp_path), environ=environ).load_config()
        assert config.get_log_level() == LogLevel.DEBUG
        assert config.get_schema_path() == "forms/contact.yaml"
        assert config.use_rich() is False

    def test_config_is_cached(self, tmp_path):
        """Test that configuration is loaded once."""
        manager = ConfigManager(str(tmp_path), environ={})
        assert manager.get_config() is manager.load_config()

    @pytest.mark.parametrize("text", [
        "logging:\n  level: LOUD\n",
        "logging: verbose\n",
        "output:\n  use_rich: maybe\n",
        "form:\n  schema_path: 5\n",
        "- not\n- a mapping\n",
        "logging: [\n",
    ])
    def test_invalid_configuration(self, tmp_path, text):
        """Test that invalid configuration raises ConfigurationError."""
        write(tmp_path / "base.yaml", text)
        with pytest.raises(ConfigurationError):
            ConfigManager(str(tmp_path), environ={}).load_config()

    def test_invalid_override(self, tmp_path):
        """Test that overrides are validated too."""
        with pytest.raises(ConfigurationError):
            ConfigManager(str(tmp_path), environ={"DYNAFORM_LOG_LEVEL": "chatty"}).load_config()

    def test_empty_file(self, tmp_path):
        """Test that an empty file contributes nothing."""
        write(tmp_path / "base.yaml", "")
        config = ConfigManager(str(tmp_path), environ={}).load_config()
        assert config.get_log_level() == LogLevel.INFO
