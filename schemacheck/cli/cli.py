# schemacheck/cli/cli.py

"""Command-line interface for checking documents against a schema."""

import logging
import sys
from pathlib import Path
from typing import Tuple

import click
from dotenv import load_dotenv

from schemacheck import __version__
from schemacheck.cli.output import Style
from schemacheck.core import check_schema
from schemacheck.errors import DocumentLoadError
from schemacheck.formatter import format_output
from schemacheck.loader import load_document, load_schema

# Load environment from .env
load_dotenv()

logger = logging.getLogger(__name__)

EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


def set_debug_logging(debug: bool) -> None:
    """Set debug logging level."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if debug:
        logging.getLogger("schemacheck").setLevel(logging.DEBUG)
        click.echo(Style.info("Debug mode enabled - logging=DEBUG"))
    else:
        logging.getLogger("schemacheck").setLevel(logging.WARNING)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug mode")
def cli(debug: bool) -> None:
    """Validate JSON and HCL documents against schemacheck schemas."""
    set_debug_logging(debug)


@cli.command()
@click.argument(
    "documents",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--schema",
    "schema_ref",
    envvar="SCHEMACHECK_SCHEMA",
    required=True,
    help="Schema to check against, as 'package.module:attribute'",
)
@click.option(
    "--indent",
    envvar="SCHEMACHECK_INDENT",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Spaces per nesting level in error output",
)
def check(documents: Tuple[Path, ...], schema_ref: str, indent: int) -> None:
    """Check one or more documents against a schema."""
    logger.debug("Checking %d document(s) against %s", len(documents), schema_ref)

    try:
        schema = load_schema(schema_ref)
    except DocumentLoadError as e:
        click.echo(Style.error(f"Error: {e}"), err=True)
        raise SystemExit(EXIT_LOAD_ERROR)

    click.echo(Style.header(f"Checking against {schema_ref}..."))

    exit_code = 0
    for document in documents:
        try:
            data = load_document(document)
        except DocumentLoadError as e:
            click.echo(Style.error(f"{document}: {e}"))
            exit_code = max(exit_code, EXIT_LOAD_ERROR)
            continue

        errors = check_schema(data, schema)
        if not errors:
            click.echo(Style.success(f"{document} is valid."))
            continue

        click.echo(Style.error(f"{document} is invalid:"))
        click.echo(Style.error_tree(format_output(errors, indent=" " * indent)))
        exit_code = max(exit_code, EXIT_INVALID)

    click.echo()
    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    cli()
