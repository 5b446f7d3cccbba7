"""
Application handlers: form commands and submission sinks.
"""

from .form_handler import ChangeFieldCommand, SubmitFormCommand, FormHandler
from .submission_handler import LoggingSubmissionSink, CallbackSubmissionSink

__all__ = [
    'ChangeFieldCommand',
    'SubmitFormCommand',
    'FormHandler',
    'LoggingSubmissionSink',
    'CallbackSubmissionSink'
]
