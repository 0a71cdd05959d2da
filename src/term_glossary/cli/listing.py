"""Rendering of command results on stdout.

A Rich table is used for ``--all`` when Rich is importable; otherwise
every path degrades to plain ``term: value`` lines.  Definitions that
are not strings (hand-edited files) are shown as JSON, so ``true`` and
``null`` read as they do on disk.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from term_glossary.cli.console import output, rich_available

UNDEFINED: str = "undefined"
"""Placeholder printed for a term that has no definition."""


def format_value(value: Any) -> str:
    """Return *value* verbatim if it is a string, else its JSON text."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def format_entry(term: str, value: Any, *, found: bool = True) -> str:
    """Return the ``term: value`` line for a single lookup."""
    return f"{term}: {format_value(value) if found else UNDEFINED}"


def render_entry(term: str, value: Any, *, found: bool = True) -> None:
    output.print(format_entry(term, value, found=found))


def render_glossary(glossary: Mapping[str, Any]) -> None:
    """Print an already-sorted glossary."""
    if not glossary:
        output.print("No terms defined yet.")
        return

    if not rich_available():
        for term, value in glossary.items():
            output.print(format_entry(term, value))
        return

    from rich.table import Table
    from rich.text import Text

    table = Table(
        title="Glossary",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Term", style="bold cyan", no_wrap=True)
    table.add_column("Definition")
    for term, value in glossary.items():
        table.add_row(Text(term), Text(format_value(value)))
    output.print(table)
