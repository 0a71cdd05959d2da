"""Process exit codes returned by the ``terms`` command.

Every branch of :func:`term_glossary.cli.app.cli` exits with one of
these values; tests assert against the names, never raw integers.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command finished; a missing term or an empty glossary still counts."""

GENERAL_ERROR: int = 1
"""A :class:`~term_glossary.exceptions.GlossaryError` reached the boundary
(unreadable, unwritable or malformed terms file, no value entered)."""

UNEXPECTED_ERROR: int = 2
"""Anything else escaped.  Shares its value with argparse usage errors."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C while waiting at the value prompt (128 + SIGINT)."""
