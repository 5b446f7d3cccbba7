"""
Submission sink interface.

A sink receives the final value-set of an error-free submit. What it
does with it (logging, handing it to another service) is up to the
implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class SubmissionSinkInterface(ABC):
    """Interface for collaborators that accept submitted forms."""

    @abstractmethod
    def submit(self, values: Dict[str, Any]) -> None:
        """
        Accept a validated value-set.

        Args:
            values: Copy of the submitted value-set
        """
        pass
