"""
Command handlers for form events.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...core.entities import FormSnapshot, SubmissionResult
from ..services.form_application_service import FormSession


@dataclass
class ChangeFieldCommand:
    """Raw input event for one field."""
    key: str
    raw_value: Any
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class SubmitFormCommand:
    """Submit trigger."""
    metadata: Optional[Dict[str, Any]] = None


class FormHandler:
    """
    Handler for form commands.

    This class processes inbound events by delegating to the
    form session.
    """

    def __init__(self, session: FormSession):
        """
        Initialize the handler.

        Args:
            session: Form session
        """
        self.session = session

    def handle_change(self, command: ChangeFieldCommand) -> FormSnapshot:
        """
        Handle a change event.

        Args:
            command: Change command

        Returns:
            FormSnapshot: Snapshot after revalidation
        """
        return self.session.change(command.key, command.raw_value)

    def handle_submit(self, command: SubmitFormCommand) -> SubmissionResult:
        """
        Handle a submit trigger.

        Args:
            command: Submit command

        Returns:
            SubmissionResult: Submission outcome
        """
        return self.session.submit()

    def apply_values(self, raw_values: Dict[str, Any]) -> FormSnapshot:
        """
        Feed a batch of raw values as change events in schema order.

        Keys not present in the schema raise UnknownFieldError before
        any change is applied.

        Args:
            raw_values: Raw values keyed by field

        Returns:
            FormSnapshot: Snapshot after the last change
        """
        for key in raw_values:
            self.session.schema.get(key)

        snapshot = self.session.snapshot()
        for key in self.session.schema.keys():
            if key in raw_values:
                snapshot = self.handle_change(ChangeFieldCommand(key, raw_values[key]))
        return snapshot
