"""
Application service for a live form instance.

A FormSession owns the value-set and error-set of one form. Every
change coerces the raw input, builds a new value-set and recomputes
the whole error-set; every submit runs the same pass and hands the
value-set to the submission sink only when no field reports an error.
Both mappings are replaced, never patched in place.
"""

from typing import Any, Dict, Optional

from ...core.entities import FormSchema, FormSnapshot, FormStatus, SubmissionResult
from ...core.interfaces import SubmissionSinkInterface
from ...domain.form import CoercionDomainService
from ...shared.logging import LoggerInterface, configure_logging
from ...shared.validation import ValidationEngine, ValidatorInterface


class FormSession:
    """
    Stateful orchestrator for one form.

    Change events are handled to completion one at a time; the session
    does no I/O of its own apart from logging and the sink call.
    """

    def __init__(
        self,
        schema: FormSchema,
        sink: Optional[SubmissionSinkInterface] = None,
        engine: Optional[ValidatorInterface] = None,
        coercion: Optional[CoercionDomainService] = None,
        logger: Optional[LoggerInterface] = None
    ):
        """
        Initialize the session.

        Args:
            schema: Form schema
            sink: Optional collaborator receiving submitted value-sets
            engine: Optional validation engine
            coercion: Optional coercion service
            logger: Optional logger
        """
        self.schema = schema
        self.sink = sink
        self.engine = engine or ValidationEngine()
        self.coercion = coercion or CoercionDomainService()
        self.logger = logger or configure_logging("dynaform.form")
        self._values: Dict[str, Any] = {}
        self._errors: Dict[str, str] = {}

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def status(self) -> FormStatus:
        return self.snapshot().status

    def snapshot(self) -> FormSnapshot:
        """
        Get the current value-set and error-set.

        Returns:
            FormSnapshot: Copies of both mappings
        """
        return FormSnapshot(values=dict(self._values), errors=dict(self._errors))

    def revalidate(self) -> FormSnapshot:
        """
        Recompute the error-set for the current value-set.

        Returns:
            FormSnapshot: Refreshed snapshot
        """
        self._errors = self.engine.validate_all(self.schema, self._values).errors
        return self.snapshot()

    def change(self, key: str, raw: Any) -> FormSnapshot:
        """
        Apply a change event.

        Args:
            key: Field key
            raw: Raw value from the presentation layer

        Returns:
            FormSnapshot: Snapshot after full revalidation

        Raises:
            UnknownFieldError: If the key is not in the schema
        """
        descriptor = self.schema.get(key)
        value = self.coercion.coerce(descriptor, raw)

        values = {**self._values, key: value}
        result = self.engine.validate_all(self.schema, values)

        self._values = values
        self._errors = result.errors

        self.logger.debug(
            "Field changed",
            field=key,
            field_error=bool(self._errors.get(key)),
            invalid_fields=result.invalid_fields
        )
        return self.snapshot()

    def submit(self) -> SubmissionResult:
        """
        Validate every field and submit when nothing fails.

        The error-set is replaced before the sink is called, so an
        exception raised by the sink leaves the refreshed errors in
        place.

        Returns:
            SubmissionResult: Whether the sink received the value-set
        """
        result = self.engine.validate_all(self.schema, self._values)
        self._errors = result.errors
        snapshot = self.snapshot()

        if result.has_errors:
            self.logger.warning(
                "Form submission rejected",
                invalid_fields=result.invalid_fields
            )
            return SubmissionResult(submitted=False, snapshot=snapshot)

        if self.sink is not None:
            self.sink.submit(dict(self._values))
        self.logger.info("Form submission accepted", fields=len(self.schema))
        return SubmissionResult(submitted=True, snapshot=snapshot)

    def reset(self) -> FormSnapshot:
        """
        Return the form to its initial empty state.

        Returns:
            FormSnapshot: Empty snapshot
        """
        self._values = {}
        self._errors = {}
        return self.snapshot()
