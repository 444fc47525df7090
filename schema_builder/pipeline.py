"""Run one schema build: load, resolve, generate, save.

Each stage raises a SchemaBuilderError subclass on failure; build_schema
reports it as a single line and returns the matching exit code.
"""

from __future__ import annotations

from dataclasses import dataclass

import typer
from loguru import logger

from .errors import ArgumentMissingError, ExitCode, SchemaBuilderError
from .generation import generate_schema
from .loader import load_library
from .lookup import resolve_type
from .resolver import dependency_resolver
from .writer import save_schema


@dataclass(frozen=True)
class Invocation:
    library_path: str
    type_name: str
    target_path: str

    @classmethod
    def from_arguments(
        cls,
        library_path: str | None,
        type_name: str | None,
        target_path: str | None,
    ) -> Invocation:
        """Validate the three arguments, naming the first blank one."""
        for value, argument in (
            (library_path, "library path"),
            (type_name, "type name"),
            (target_path, "target path"),
        ):
            if not value or not value.strip():
                raise ArgumentMissingError(argument)
        return cls(library_path, type_name, target_path)  # type: ignore[arg-type]


def run(invocation: Invocation) -> None:
    with dependency_resolver() as finder:
        library = load_library(invocation.library_path, on_located=finder.capture)
        schema_type = resolve_type(library, invocation.type_name)
        logger.debug(f"Resolved schema type {schema_type!r}")
        schema = generate_schema(schema_type)
        save_schema(schema, invocation.target_path)


def build_schema(invocation: Invocation) -> ExitCode:
    try:
        run(invocation)
    except SchemaBuilderError as exc:
        typer.echo(str(exc))
        return exc.exit_code

    typer.echo(f"Schema generated: {invocation.target_path}")
    return ExitCode.OK
