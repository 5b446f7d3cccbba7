"""
Output formatter for CLI commands.

This module provides consistent formatting for CLI output,
including tables, JSON, and text formatting.
"""

from typing import Any, Dict, List, Optional, Union
import json
import click
from tabulate import tabulate
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ....core.entities import FieldDescriptor, FieldKind, FormSnapshot


class OutputFormatter:
    """
    Formatter for CLI command output.

    This class provides methods for formatting different types of output
    in a consistent and reusable way.
    """

    def __init__(self, use_rich: bool = True):
        """
        Initialize the formatter.

        Args:
            use_rich: Whether to use rich formatting
        """
        self.use_rich = use_rich
        self.console = Console() if use_rich else None

    def format_table(
        self,
        data: List[Dict[str, Any]],
        headers: Optional[List[str]] = None,
        title: Optional[str] = None
    ) -> Union[str, Table]:
        """
        Format data as a table.

        Args:
            data: List of dictionaries containing row data
            headers: Optional list of header names
            title: Optional table title

        Returns:
            Union[str, Table]: Rich table, or plain text table
        """
        if not data:
            return "No data to display"

        columns = headers or list(data[0].keys())

        if self.use_rich:
            table = Table(title=title) if title else Table()
            for column in columns:
                table.add_column(column)
            for row in data:
                table.add_row(*[str(row.get(column, "")) for column in columns])
            return table

        text = tabulate(
            [[row.get(column, "") for column in columns] for row in data],
            headers=columns,
            tablefmt="grid"
        )
        return f"{title}\n{text}" if title else text

    def format_schema(self, fields: List[FieldDescriptor]) -> Union[str, Table]:
        """
        Format field descriptors as a table.

        Args:
            fields: Descriptors in schema order

        Returns:
            Union[str, Table]: Formatted table
        """
        rows = []
        for descriptor in fields:
            rules = descriptor.rules.to_dict()
            required = rules.pop("required")
            if descriptor.options:
                rules["options"] = "|".join(descriptor.options)
            rows.append({
                "Key": descriptor.key,
                "Label": descriptor.label,
                "Component": descriptor.kind.value,
                "Type": descriptor.input_type.value if descriptor.kind is FieldKind.INPUT else "",
                "Required": "yes" if required else "no",
                "Constraints": ", ".join(f"{k}={v}" for k, v in rules.items()),
                "Custom": "yes" if descriptor.custom_validator else ""
            })
        return self.format_table(rows, title="Form Schema")

    def format_errors(self, snapshot: FormSnapshot, labels: Dict[str, str]) -> Union[str, Table]:
        """
        Format the failing fields of a snapshot.

        Args:
            snapshot: Form snapshot
            labels: Field labels keyed by field

        Returns:
            Union[str, Table]: Formatted table
        """
        rows = [
            {"Field": labels.get(key, key), "Error": snapshot.error_for(key)}
            for key in snapshot.invalid_fields
        ]
        return self.format_table(rows, title="Validation Errors")

    def format_json(
        self,
        data: Union[Dict[str, Any], List[Any]],
        pretty: bool = True
    ) -> str:
        """
        Format data as JSON.

        Args:
            data: Data to format
            pretty: Whether to pretty print

        Returns:
            str: Formatted JSON
        """
        if pretty:
            return json.dumps(data, indent=2, default=str)
        return json.dumps(data, default=str)

    def format_error(
        self,
        message: str,
        details: Optional[str] = None
    ) -> Union[str, Panel]:
        """
        Format error message.

        Args:
            message: Error message
            details: Optional error details

        Returns:
            Union[str, Panel]: Formatted error
        """
        if self.use_rich:
            error_text = Text(message, style="bold red")
            if details:
                error_text.append("\n" + details, style="red")
            return Panel(error_text, title="Error", border_style="red")
        if details:
            return f"Error: {message}\n{details}"
        return f"Error: {message}"

    def format_success(
        self,
        message: str,
        details: Optional[str] = None
    ) -> Union[str, Panel]:
        """
        Format success message.

        Args:
            message: Success message
            details: Optional success details

        Returns:
            Union[str, Panel]: Formatted success message
        """
        if self.use_rich:
            success_text = Text(message, style="bold green")
            if details:
                success_text.append("\n" + details, style="green")
            return Panel(success_text, title="Success", border_style="green")
        if details:
            return f"Success: {message}\n{details}"
        return f"Success: {message}"

    def print(
        self,
        content: Any,
        style: Optional[str] = None
    ) -> None:
        """
        Print content with optional styling.

        Args:
            content: Content to print
            style: Optional style
        """
        if self.use_rich:
            if style:
                self.console.print(content, style=style)
            else:
                self.console.print(content)
        else:
            click.echo(content)
