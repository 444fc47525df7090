"""Entry point: python -m schema_builder

Loads a library, generates the JSON Schema of one of its types and writes it
to a file.
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    app(prog_name="schema-builder")


if __name__ == "__main__":
    main()
