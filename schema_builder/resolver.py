"""Resolve imports of modules that live next to the loaded library.

A library often imports helper modules from its own directory, which is
not on sys.path. SiblingFinder sits at the end of sys.meta_path, so it is
only asked for names the default finders could not resolve, and answers
from the files captured in the library's directory.
"""

from __future__ import annotations

import importlib.abc
import importlib.machinery
import importlib.util
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType

from loguru import logger

from .naming import module_suffix

# Preferred order when the requested name carries no suffix
_LOOKUP_SUFFIXES: tuple[str, ...] = tuple(importlib.machinery.all_suffixes())


def requested_file_names(name: str) -> list[str]:
    """File names that satisfy a lookup for ``name``.

    Anything after the first comma is a qualifier and is dropped. A name
    that already ends in a module suffix is looked up as-is; otherwise
    each standard suffix is tried, then the bare name as a package.
    """
    name = name.split(",", 1)[0].strip()
    if not name:
        return []
    if module_suffix(name) is not None:
        return [name]
    return [name + suffix for suffix in _LOOKUP_SUFFIXES] + [name]


@dataclass(frozen=True)
class SiblingModules:
    """Module files and package directories found in one directory."""

    directory: Path
    entries: dict[str, Path] = field(default_factory=dict)

    @classmethod
    def scan(cls, directory: Path) -> SiblingModules:
        entries: dict[str, Path] = {}
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                if (entry / "__init__.py").is_file():
                    entries[entry.name] = entry
            elif module_suffix(entry.name) is not None:
                entries[entry.name] = entry
        return cls(directory=directory, entries=entries)

    def find(self, name: str) -> Path | None:
        for file_name in requested_file_names(name):
            path = self.entries.get(file_name)
            if path is not None:
                return path
        return None

    def __len__(self) -> int:
        return len(self.entries)


class SiblingFinder(importlib.abc.MetaPathFinder):
    """Meta path finder backed by a captured SiblingModules set."""

    def __init__(self) -> None:
        self.siblings: SiblingModules | None = None

    def capture(self, directory: Path) -> SiblingModules:
        """Scan ``directory`` for sibling modules. Allowed once per finder."""
        if self.siblings is not None:
            raise RuntimeError(
                f"Sibling modules already captured from {self.siblings.directory}"
            )
        self.siblings = SiblingModules.scan(directory)
        logger.debug(f"Captured {len(self.siblings)} sibling modules in {directory}")
        return self.siblings

    def find_spec(
        self,
        fullname: str,
        path: Sequence[str] | None,
        target: ModuleType | None = None,
    ) -> importlib.machinery.ModuleSpec | None:
        # Submodules are found through their parent package's __path__
        if path is not None or self.siblings is None:
            return None

        location = self.siblings.find(fullname)
        if location is None:
            return None

        logger.debug(f"Resolved module {fullname!r} from {location}")
        if location.is_dir():
            return importlib.util.spec_from_file_location(
                fullname,
                location / "__init__.py",
                submodule_search_locations=[str(location)],
            )
        return importlib.util.spec_from_file_location(fullname, location)


@contextmanager
def dependency_resolver() -> Iterator[SiblingFinder]:
    """Install a SiblingFinder for the duration of the block."""
    finder = SiblingFinder()
    sys.meta_path.append(finder)
    try:
        yield finder
    finally:
        sys.meta_path.remove(finder)
