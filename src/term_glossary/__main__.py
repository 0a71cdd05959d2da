"""Allow ``python -m term_glossary`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m term_glossary`` behaves identically to the ``terms``
console script.
"""

from __future__ import annotations

from term_glossary.cli.app import cli

if __name__ == "__main__":
    cli()
