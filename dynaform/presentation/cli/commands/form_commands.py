"""
Form commands for CLI.

This module provides command handlers that render a schema, validate
a file of raw values and fill a form interactively. The commands are
the presentation adapter: they turn user input into change events and
render the resulting value-set and error-set.
"""

from typing import Any, Dict

import click

from ....application.handlers import ChangeFieldCommand, FormHandler, SubmitFormCommand
from ....application.services import FormSession
from ....core.entities import FieldDescriptor, FieldKind, FormSchema, FormSnapshot
from ....shared.exceptions import DynaformError
from ..formatters.output_formatter import OutputFormatter
from ..handlers.cli_handler import CommandHandler, CommandResult


def _labels(schema: FormSchema) -> Dict[str, str]:
    return {descriptor.key: descriptor.label for descriptor in schema}


class SchemaCommand(CommandHandler):
    """Show the fields of a form schema."""

    def __init__(self, formatter: OutputFormatter, schema: FormSchema):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
            schema: Schema to render
        """
        super().__init__(formatter)
        self.schema = schema

    def execute(self, as_json: bool = False, **kwargs) -> CommandResult:
        """
        Execute the schema command.

        Args:
            as_json: Print descriptors as JSON instead of a table

        Returns:
            CommandResult: Command execution result
        """
        fields = list(self.schema)
        if as_json:
            self.formatter.print(
                self.formatter.format_json([descriptor.to_dict() for descriptor in fields])
            )
        else:
            self.formatter.print(self.formatter.format_schema(fields))
        return CommandResult(success=True, message=f"{len(fields)} fields", data=fields)


class ValidateCommand(CommandHandler):
    """Validate a mapping of raw values and submit it."""

    def __init__(self, formatter: OutputFormatter, session: FormSession):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
            session: Form session receiving the values
        """
        super().__init__(formatter)
        self.session = session
        self.handler = FormHandler(session)

    def execute(self, raw_values: Dict[str, Any], **kwargs) -> CommandResult:
        """
        Execute the validate command.

        Args:
            raw_values: Raw field values keyed by field

        Returns:
            CommandResult: Success when the form was submitted
        """
        try:
            self.handler.apply_values(raw_values)
        except DynaformError as e:
            return self.handle_error(e, "Invalid input")

        result = self.handler.handle_submit(SubmitFormCommand())
        if not result.submitted:
            self.formatter.print(
                self.formatter.format_errors(result.snapshot, _labels(self.session.schema))
            )
            return self.handle_error(
                None,
                f"{len(result.snapshot.invalid_fields)} field(s) failed validation",
                data=result.snapshot
            )

        return self.handle_success(
            "Form submitted successfully",
            data=result.snapshot,
            details=f"{len(self.session.schema)} fields validated"
        )


class FillCommand(CommandHandler):
    """Fill a form interactively."""

    def __init__(self, formatter: OutputFormatter, session: FormSession):
        """
        Initialize the handler.

        Args:
            formatter: Output formatter
            session: Form session receiving the answers
        """
        super().__init__(formatter)
        self.session = session
        self.handler = FormHandler(session)

    def prompt_field(self, descriptor: FieldDescriptor, snapshot: FormSnapshot) -> Any:
        """
        Ask for one field's raw value.

        Args:
            descriptor: Field to prompt for
            snapshot: Current form snapshot, for defaults

        Returns:
            Any: Raw answer
        """
        current = snapshot.value_for(descriptor)
        label = f"{descriptor.label}{' *' if descriptor.rules.required else ''}"

        if descriptor.kind is FieldKind.CHECKBOX:
            return click.confirm(label, default=bool(current))

        if descriptor.kind is FieldKind.SELECT:
            choices = list(descriptor.options or ())
            if not descriptor.rules.required:
                choices.append("")
            return click.prompt(
                label,
                type=click.Choice(choices),
                default=current if current in choices else None,
                show_choices=True
            )

        return click.prompt(
            label,
            default="" if descriptor.is_secret else str(current),
            show_default=bool(current) and not descriptor.is_secret,
            hide_input=descriptor.is_secret
        )

    def ask(self, descriptor: FieldDescriptor) -> FormSnapshot:
        """
        Prompt for a field, apply the change and report its error.

        Args:
            descriptor: Field to prompt for

        Returns:
            FormSnapshot: Snapshot after the change
        """
        raw = self.prompt_field(descriptor, self.session.snapshot())
        snapshot = self.handler.handle_change(ChangeFieldCommand(descriptor.key, raw))
        message = snapshot.error_for(descriptor.key)
        if message:
            self.formatter.print(f"  {message}", style="red")
        return snapshot

    def execute(self, max_rounds: int = 3, **kwargs) -> CommandResult:
        """
        Execute the fill command.

        Args:
            max_rounds: Submit attempts before giving up

        Returns:
            CommandResult: Success when the form was submitted
        """
        for descriptor in self.session.schema:
            self.ask(descriptor)

        labels = _labels(self.session.schema)
        for attempt in range(1, max_rounds + 1):
            result = self.handler.handle_submit(SubmitFormCommand())
            if result.submitted:
                return self.handle_success(
                    "Form submitted successfully",
                    data=result.snapshot,
                    details=f"Submitted after {attempt} attempt(s)"
                )

            self.formatter.print(self.formatter.format_errors(result.snapshot, labels))
            if attempt == max_rounds:
                break
            for key in result.snapshot.invalid_fields:
                self.ask(self.session.schema.get(key))

        return self.handle_error(
            None,
            "Form was not submitted",
            data=self.session.snapshot()
        )
