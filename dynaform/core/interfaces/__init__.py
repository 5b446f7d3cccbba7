"""
Core interfaces module for dynaform.
"""

from .submission_interface import SubmissionSinkInterface

__all__ = [
    'SubmissionSinkInterface'
]
