"""Runtime settings.

Read once from the environment at import time; values are checked when the
CLI starts so a bad setting is reported like any other failure.
"""

from __future__ import annotations

import os
from pathlib import Path

PROGRAM_NAME = "schema-builder"

TEMPLATE_DIR = Path(__file__).parent / "templates"

# loguru level for the stderr diagnostics sink
LOG_LEVEL = os.environ.get("SCHEMA_BUILDER_LOG_LEVEL", "WARNING").upper()

# Indentation of the written schema document
INDENT = os.environ.get("SCHEMA_BUILDER_INDENT", "2")


def json_indent() -> int:
    try:
        return int(INDENT)
    except (TypeError, ValueError):
        raise ValueError(
            f"SCHEMA_BUILDER_INDENT must be an integer, got {INDENT!r}"
        ) from None
