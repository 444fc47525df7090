"""Tests for failure kinds and root cause messages."""

from schema_builder.errors import (
    ArgumentMissingError,
    AssemblyError,
    ExitCode,
    SchemaGenerationError,
    SchemaSaveError,
    SchemaTypeError,
    root_message,
)


class TestExitCodes:
    """Each failure kind carries its exit code."""

    def test_codes(self):
        assert ArgumentMissingError("type name").exit_code == ExitCode.GENERIC_ERROR == 1
        assert AssemblyError().exit_code == 2
        assert SchemaTypeError().exit_code == 3
        assert SchemaGenerationError().exit_code == 4
        assert SchemaSaveError().exit_code == 5

    def test_missing_argument_message(self):
        assert str(ArgumentMissingError("type name")) == "Missing argument: type name"


class TestRootMessage:
    """Messages come from the innermost exception."""

    def test_single(self):
        assert root_message(ValueError("bad value")) == "bad value"

    def test_chained(self):
        try:
            try:
                raise OSError("disk full")
            except OSError as exc:
                raise RuntimeError("save failed") from exc
        except RuntimeError as outer:
            assert root_message(outer) == "disk full"

    def test_implicit_context(self):
        try:
            try:
                raise KeyError("x")
            except KeyError:
                raise ValueError("lookup failed")
        except ValueError as outer:
            assert root_message(outer) == "'x'"

    def test_empty_message(self):
        assert root_message(RuntimeError()) == "RuntimeError"

    def test_suppressed_context(self):
        try:
            try:
                int("x")
            except ValueError:
                raise ValueError("setting is not a number") from None
        except ValueError as outer:
            assert root_message(outer) == "setting is not a number"
