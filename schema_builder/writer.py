"""Write a schema document to disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from . import config
from .errors import SchemaSaveError, root_message


def render_schema(schema: dict[str, Any]) -> str:
    return json.dumps(schema, indent=config.json_indent(), ensure_ascii=False) + "\n"


def save_schema(schema: dict[str, Any], target_path: str | Path) -> Path:
    """Write ``schema`` to ``target_path``, replacing any existing file.

    Missing parent directories are created.
    """
    target = Path(target_path)
    try:
        text = render_schema(schema)
        target.parent.mkdir(parents=True, exist_ok=True)
        if target.exists():
            target.unlink()
        target.write_text(text, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        raise SchemaSaveError(
            f"Error while storing schema file {target}: {root_message(exc)}"
        ) from exc

    logger.debug(f"Wrote {len(text)} characters to {target}")
    return target
