"""Command-line entry point.

    schema-builder <library_path> <type_name> <target_path>

Exit codes are listed in the help screen shown when no arguments are given.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Annotated, Optional

import typer
from loguru import logger

from . import config
from .errors import ArgumentMissingError, ExitCode, root_message
from .pipeline import Invocation, build_schema
from .usage import render_help

app = typer.Typer(
    add_completion=False,
    help="Generate the JSON Schema of a type found in a library.",
)


def configure() -> None:
    """Install the stderr log sink and check the environment settings."""
    logger.remove()
    logger.add(sys.stderr, level=config.LOG_LEVEL)
    config.json_indent()


def show_help() -> None:
    typer.echo(render_help())
    typer.pause("Press any key...")


def execute(
    library_path: Optional[str],
    type_name: Optional[str],
    target_path: Optional[str],
    extra: Sequence[str] = (),
) -> ExitCode:
    try:
        configure()
        if extra:
            logger.debug(f"Ignoring extra arguments: {list(extra)}")
        arguments = (library_path, type_name, target_path)
        if not any(value and value.strip() for value in arguments):
            show_help()
            return ExitCode.OK

        try:
            invocation = Invocation.from_arguments(*arguments)
        except ArgumentMissingError as exc:
            typer.echo(str(exc))
            return exc.exit_code

        return build_schema(invocation)
    except Exception as exc:
        logger.opt(exception=exc).debug("Unhandled error")
        typer.echo(f"Application error: {root_message(exc)}")
        return ExitCode.GENERIC_ERROR


# Extra arguments are ignored and values starting with "-" stay positional
@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    library_path: Annotated[
        Optional[str], typer.Argument(help="Library file or package directory.")
    ] = None,
    type_name: Annotated[
        Optional[str], typer.Argument(help="Qualified name of the type in the library.")
    ] = None,
    target_path: Annotated[
        Optional[str], typer.Argument(help="Schema file to write.")
    ] = None,
) -> None:
    """Generate the JSON Schema of TYPE_NAME and write it to TARGET_PATH."""
    raise typer.Exit(int(execute(library_path, type_name, target_path, ctx.args)))
