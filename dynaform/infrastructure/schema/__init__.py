"""
Schema loading from YAML.
"""

from .schema_loader import SchemaLoader, PACKAGED_SCHEMA_DIR

__all__ = [
    'SchemaLoader',
    'PACKAGED_SCHEMA_DIR'
]
