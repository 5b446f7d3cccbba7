"""
Form domain: value coercion, custom validators and the default schema.
"""

from .coercion_domain_service import CoercionDomainService, coerce_checked, coerce_number
from .custom_validators import VALIDATOR_FACTORIES, age_on, matches_field, minimum_age
from .default_schema import build_default_schema

__all__ = [
    'CoercionDomainService',
    'coerce_checked',
    'coerce_number',
    'VALIDATOR_FACTORIES',
    'age_on',
    'matches_field',
    'minimum_age',
    'build_default_schema'
]
