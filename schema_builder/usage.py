"""Render the help screen from its template."""

from __future__ import annotations

import jinja2

from . import config
from .errors import EXIT_CODE_DESCRIPTIONS


def render_help(program: str = config.PROGRAM_NAME) -> str:
    """Render templates/help.txt.j2 with the exit-code table."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(config.TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("help.txt.j2")
    return template.render(
        program=program,
        exit_codes=[(int(code), text) for code, text in EXIT_CODE_DESCRIPTIONS.items()],
    )
