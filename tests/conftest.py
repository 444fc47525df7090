"""Shared fixtures: a sample library written into a temporary directory.

The library imports a sibling module and a sibling package that are not on
sys.path, so loading it only works with the dependency resolver installed.
"""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Library sources
# ---------------------------------------------------------------------------

MODELS_SOURCE = '''
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypedDict

from payroll_helpers import Address
from payroll_units import Currency


class Employee(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str
    LastName: str
    URLValue: Optional[str] = None
    employee_id: int = 0
    address: Address
    salary_currency: Currency = Currency.EUR


class Payroll:
    class Period(BaseModel):
        start_day: int
        end_day: int = 31


@dataclass
class WageType:
    wage_type_number: int
    label: str = ""


class CaseValue(TypedDict):
    case_name: str
    value: str


class Unsupported:
    def __init__(self, handle):
        self.handle = handle


@dataclass
class Broken:
    handle: Unsupported


def not_a_type():
    return None


LOOKS_LIKE_A_TYPE = "Employee"
'''

HELPERS_SOURCE = '''
from __future__ import annotations

from pydantic import BaseModel


class Address(BaseModel):
    street_name: str
    zip_code: str | None = None
'''

UNITS_SOURCE = '''
from enum import Enum


class Currency(str, Enum):
    EUR = "EUR"
    USD = "USD"
'''

LIBRARY_MODULES = ("payroll_models", "payroll_helpers", "payroll_units")


def _write(path: Path, source: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_imports():
    """Drop modules loaded from temporary libraries and stray finders."""
    modules = set(sys.modules)
    meta_path = list(sys.meta_path)
    yield
    for name in set(sys.modules) - modules:
        if name.split(".")[0] in LIBRARY_MODULES or name == "broken_library":
            del sys.modules[name]
    sys.meta_path[:] = meta_path


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    """Directory holding payroll_models.py and its sibling dependencies."""
    directory = tmp_path / "lib"
    _write(directory / "payroll_models.py", MODELS_SOURCE)
    _write(directory / "payroll_helpers.py", HELPERS_SOURCE)
    _write(directory / "payroll_units" / "__init__.py", UNITS_SOURCE)
    _write(directory / "README.txt", "not a module\n")
    return directory


@pytest.fixture
def library_path(library_dir: Path) -> Path:
    return library_dir / "payroll_models.py"


@pytest.fixture
def broken_library(tmp_path: Path) -> Path:
    """A module that raises while it is being imported."""
    return _write(
        tmp_path / "broken_library.py",
        'raise RuntimeError("library is corrupt")\n',
    )


@pytest.fixture
def loaded_library(library_path: Path):
    """payroll_models loaded with its sibling dependencies resolved."""
    from schema_builder.loader import load_library
    from schema_builder.resolver import dependency_resolver

    with dependency_resolver() as finder:
        return load_library(library_path, on_located=finder.capture)
