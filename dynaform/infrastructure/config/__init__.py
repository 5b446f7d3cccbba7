"""
Configuration loading.
"""

from .config_manager import ConfigManager, DEFAULT_CONFIG
from .config_validator import ConfigValidator
from .environment_config import EnvironmentConfig

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'ConfigValidator',
    'EnvironmentConfig'
]
