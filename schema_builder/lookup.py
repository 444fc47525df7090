"""Find a type inside a loaded library by its qualified name."""

from __future__ import annotations

from .errors import SchemaTypeError
from .loader import LoadedLibrary


def resolve_type(library: LoadedLibrary, type_name: str) -> type:
    """Return the class named ``type_name`` (e.g. ``Model`` or ``Outer.Inner``).

    Exact attribute lookup only; the final object must be a class.
    """
    node: object = library.module
    for part in type_name.split("."):
        if not part.isidentifier():
            node = None
            break
        node = getattr(node, part, None)
        if node is None:
            break

    if not isinstance(node, type):
        raise SchemaTypeError(
            f"Schema type '{type_name}' is not available in library {library.path}"
        )
    return node
