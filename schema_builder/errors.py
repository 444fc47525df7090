"""Failure kinds and the process exit codes they map to.

Every stage raises one of the SchemaBuilderError subclasses below. The
exit code travels with the exception and is only turned into a process
status at the CLI boundary.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    GENERIC_ERROR = 1
    ASSEMBLY_ERROR = 2
    SCHEMA_TYPE_ERROR = 3
    SCHEMA_GENERATION_ERROR = 4
    SCHEMA_SAVE_ERROR = 5


# Descriptions shown in the help screen exit-code table
EXIT_CODE_DESCRIPTIONS: dict[ExitCode, str] = {
    ExitCode.OK: "Ok",
    ExitCode.GENERIC_ERROR: "Generic error or missing argument",
    ExitCode.ASSEMBLY_ERROR: "Library error",
    ExitCode.SCHEMA_TYPE_ERROR: "Schema type error",
    ExitCode.SCHEMA_GENERATION_ERROR: "Schema generation error",
    ExitCode.SCHEMA_SAVE_ERROR: "Schema save error",
}


class SchemaBuilderError(Exception):
    """Base class for failures that end a run with a known exit code."""

    exit_code: ExitCode = ExitCode.GENERIC_ERROR


class ArgumentMissingError(SchemaBuilderError):
    exit_code = ExitCode.GENERIC_ERROR

    def __init__(self, argument: str) -> None:
        super().__init__(f"Missing argument: {argument}")
        self.argument = argument


class AssemblyError(SchemaBuilderError):
    """The library file is missing or could not be loaded."""

    exit_code = ExitCode.ASSEMBLY_ERROR


class SchemaTypeError(SchemaBuilderError):
    exit_code = ExitCode.SCHEMA_TYPE_ERROR


class SchemaGenerationError(SchemaBuilderError):
    exit_code = ExitCode.SCHEMA_GENERATION_ERROR


class SchemaSaveError(SchemaBuilderError):
    exit_code = ExitCode.SCHEMA_SAVE_ERROR


def root_cause(exc: BaseException) -> BaseException:
    """Follow the cause/context chain down to the innermost exception."""
    seen = {id(exc)}
    while True:
        inner = exc.__cause__
        if inner is None and not exc.__suppress_context__:
            inner = exc.__context__
        if inner is None or id(inner) in seen:
            return exc
        seen.add(id(inner))
        exc = inner


def root_message(exc: BaseException) -> str:
    """Return the message of the innermost exception in the chain."""
    inner = root_cause(exc)
    return str(inner) or type(inner).__name__
