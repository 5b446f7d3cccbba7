"""
Submission sinks.

Sinks receive the value-set of an error-free submit.
"""

from typing import Any, Callable, Dict, Optional

from ...core.entities import FormSchema
from ...core.interfaces import SubmissionSinkInterface
from ...shared.logging import LoggerInterface, configure_logging

MASK = "********"


class LoggingSubmissionSink(SubmissionSinkInterface):
    """
    Sink that logs the submitted form.

    Password fields are masked when a schema is supplied.
    """

    def __init__(
        self,
        schema: Optional[FormSchema] = None,
        logger: Optional[LoggerInterface] = None
    ):
        """
        Initialize the sink.

        Args:
            schema: Optional schema used to find secret fields
            logger: Optional logger
        """
        self.logger = logger or configure_logging("dynaform.submissions")
        self._secret_keys = frozenset(
            descriptor.key for descriptor in schema if descriptor.is_secret
        ) if schema is not None else frozenset()

    def mask(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Copy of values with secret fields masked."""
        return {
            key: MASK if key in self._secret_keys and value else value
            for key, value in values.items()
        }

    def submit(self, values: Dict[str, Any]) -> None:
        self.logger.info("Form submitted successfully", values=self.mask(values))


class CallbackSubmissionSink(SubmissionSinkInterface):
    """Sink adapting a plain callable."""

    def __init__(self, callback: Callable[[Dict[str, Any]], Any]):
        self.callback = callback

    def submit(self, values: Dict[str, Any]) -> None:
        self.callback(values)
