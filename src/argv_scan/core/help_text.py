"""Help-text substitution and diagnostic formatting.

Pure string helpers shared by the scanner and the CLI layer.
"""

from __future__ import annotations

PLACEHOLDER: str = "{name}"
"""Token replaced with the program's display name in help text."""


def program_name(path: str) -> str:
    """Return the display name for an invocation path.

    This is the text after the final ``/``, or *path* itself when it
    contains no separator.
    """
    return path.rsplit("/", 1)[-1]


def render_help(template: str, name: str) -> str:
    """Replace every :data:`PLACEHOLDER` in *template* with *name*."""
    return template.replace(PLACEHOLDER, name)


def try_help_hint(name: str) -> str:
    return f"Try '{name} --help' for more information."

