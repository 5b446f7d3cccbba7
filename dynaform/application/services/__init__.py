"""
Application services.
"""

from .form_application_service import FormSession

__all__ = [
    'FormSession'
]
