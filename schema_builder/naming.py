"""Name conversions used when loading libraries and emitting schemas.

Property names are rendered in camel case whatever the source naming:
  first_name      -> firstName
  FirstName       -> firstName
  URLValue        -> urlValue
  ID              -> id
  alreadyCamel    -> alreadyCamel

Module names are derived from library file names by dropping the import
suffix:
  models.py                               -> models
  models.cpython-312-x86_64-linux-gnu.so  -> models
  payroll/ (package directory)            -> payroll
"""

from __future__ import annotations

import importlib.machinery
import re
from pathlib import Path

# Longest first, so "x.cpython-312-x86_64-linux-gnu.so" wins over "x.so"
MODULE_SUFFIXES: tuple[str, ...] = tuple(
    sorted(importlib.machinery.all_suffixes(), key=len, reverse=True)
)

_LEADING_CAPS = re.compile(r"[A-Z]+(?![a-z])")


def _lower_leading(word: str) -> str:
    """Lowercase the leading capital (or leading acronym) of a word."""
    run = _LEADING_CAPS.match(word)
    if run:
        return run.group().lower() + word[run.end():]
    return word[:1].lower() + word[1:]


def to_camel_case(name: str) -> str:
    """Convert snake_case or PascalCase to camelCase."""
    parts = [p for p in name.split("_") if p]
    if not parts:
        return name
    head, *tail = parts
    return _lower_leading(head) + "".join(p[:1].upper() + p[1:] for p in tail)


def module_suffix(file_name: str) -> str | None:
    """Return the import suffix a file name ends with, if any."""
    for suffix in MODULE_SUFFIXES:
        if file_name.endswith(suffix) and len(file_name) > len(suffix):
            return suffix
    return None


def module_name_from_path(path: Path) -> str:
    """Derive the importable module name for a library path."""
    if path.is_dir():
        return path.name
    suffix = module_suffix(path.name)
    if suffix is None:
        return path.stem
    return path.name[: -len(suffix)]
