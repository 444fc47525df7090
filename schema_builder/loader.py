"""Load a library from disk and look up its containing directory.

A library is a module file (source, bytecode or compiled extension) or a
package directory holding an __init__.py.
"""

from __future__ import annotations

import importlib.util
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType

from loguru import logger

from .errors import AssemblyError, root_message
from .naming import module_name_from_path


@dataclass(frozen=True)
class LoadedLibrary:
    module: ModuleType
    path: Path
    directory: Path


def library_entry(path: Path) -> Path | None:
    """Return the file to execute for a library path, if there is one."""
    if path.is_file():
        return path
    init = path / "__init__.py"
    if path.is_dir() and init.is_file():
        return init
    return None


def load_library(
    library_path: str | Path,
    on_located: Callable[[Path], object] | None = None,
) -> LoadedLibrary:
    """Load the library at ``library_path``.

    ``on_located`` is called with the library's containing directory once
    the file is found and before any of its code runs.
    """
    path = Path(library_path).expanduser().resolve()
    entry = library_entry(path)
    if entry is None:
        raise AssemblyError(f"Library {path} is not available")

    name = module_name_from_path(path)
    if entry is path:
        spec = importlib.util.spec_from_file_location(name, entry)
    else:
        spec = importlib.util.spec_from_file_location(
            name, entry, submodule_search_locations=[str(path)]
        )
    if spec is None or spec.loader is None:
        raise AssemblyError(
            f"Error while loading library {library_path}: no loader for {path.name}"
        )

    directory = path.parent
    if on_located is not None:
        on_located(directory)

    previous = sys.modules.get(name)
    try:
        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        spec.loader.exec_module(module)
    except Exception as exc:
        if previous is None:
            sys.modules.pop(name, None)
        else:
            sys.modules[name] = previous
        raise AssemblyError(
            f"Error while loading library {library_path}: {root_message(exc)}"
        ) from exc

    logger.info(f"Loaded library {name} from {path}")
    return LoadedLibrary(module=module, path=path, directory=directory)
