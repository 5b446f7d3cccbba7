"""
Command-line entry point for dynaform.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import click
import yaml

from ...application.handlers import LoggingSubmissionSink
from ...application.services import FormSession
from ...core.entities import FormSchema
from ...domain.form import build_default_schema
from ...infrastructure.config import ConfigManager, EnvironmentConfig
from ...infrastructure.schema import SchemaLoader
from ...shared.exceptions import DynaformError
from ...shared.logging import StructuredLogger, configure_logging
from .commands import FillCommand, SchemaCommand, ValidateCommand
from .formatters.output_formatter import OutputFormatter


@dataclass
class AppContext:
    """Objects shared by all commands of one invocation."""

    config: EnvironmentConfig
    logger: StructuredLogger
    schema: FormSchema
    formatter: OutputFormatter

    @classmethod
    def create(
        cls,
        config_dir: str,
        environment: Optional[str] = None,
        schema_path: Optional[str] = None,
        plain: bool = False
    ) -> "AppContext":
        """
        Build the application context.

        Args:
            config_dir: Configuration directory
            environment: Optional environment name
            schema_path: Optional schema file overriding configuration
            plain: Force plain-text output

        Returns:
            AppContext: Ready context

        Raises:
            DynaformError: If configuration or schema loading fails
        """
        config = ConfigManager(config_dir=config_dir, environment=environment).load_config()
        logger = configure_logging(
            name=config.get_logger_name(),
            level=config.get_log_level()
        )

        path = schema_path or config.get_schema_path()
        schema = SchemaLoader().load(path) if path else build_default_schema()
        logger.debug("Schema loaded", source=path or "built-in", fields=len(schema))

        formatter = OutputFormatter(use_rich=config.use_rich() and not plain)
        return cls(config=config, logger=logger, schema=schema, formatter=formatter)

    def create_session(self) -> FormSession:
        """Create a form session wired to the logging sink."""
        return FormSession(
            self.schema,
            sink=LoggingSubmissionSink(self.schema, logger=self.logger),
            logger=self.logger
        )


def load_values(path: str) -> Any:
    """
    Read raw values from a YAML or JSON file.

    Args:
        path: Values file

    Returns:
        Any: Parsed mapping of raw values

    Raises:
        click.ClickException: If the file is not a mapping
    """
    try:
        data = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as e:
        raise click.ClickException(f"Could not parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise click.ClickException(f"{path} must contain a mapping of field values")
    return data


@click.group()
@click.option("--config-dir", default="config", show_default=True,
              type=click.Path(file_okay=False), help="Configuration directory.")
@click.option("--env", "environment", default=None,
              help="Configuration environment (defaults to DYNAFORM_ENV).")
@click.option("--schema", "schema_path", default=None,
              type=click.Path(exists=True, dir_okay=False), help="YAML schema file.")
@click.option("--plain", is_flag=True, help="Plain-text output instead of rich tables.")
@click.pass_context
def cli(ctx: click.Context, config_dir: str, environment: Optional[str],
        schema_path: Optional[str], plain: bool) -> None:
    """Schema-driven form validation."""
    try:
        ctx.obj = AppContext.create(config_dir, environment, schema_path, plain)
    except DynaformError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print descriptors as JSON.")
@click.pass_obj
def schema(app: AppContext, as_json: bool) -> None:
    """Show the form fields."""
    SchemaCommand(app.formatter, app.schema).execute(as_json=as_json)


@cli.command()
@click.argument("values_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def validate(app: AppContext, values_file: str) -> None:
    """Validate and submit raw values from VALUES_FILE."""
    result = ValidateCommand(app.formatter, app.create_session()).execute(
        raw_values=load_values(values_file)
    )
    if not result.success:
        raise SystemExit(1)


@cli.command()
@click.option("--max-rounds", default=3, show_default=True, type=click.IntRange(min=1),
              help="Submit attempts before giving up.")
@click.pass_obj
def fill(app: AppContext, max_rounds: int) -> None:
    """Fill in the form interactively."""
    result = FillCommand(app.formatter, app.create_session()).execute(max_rounds=max_rounds)
    if not result.success:
        raise SystemExit(1)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="dynaform")


if __name__ == "__main__":
    main()
