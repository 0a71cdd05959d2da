"""Runtime configuration for term-glossary.

The terms file location is resolved once, at start-up, and handed to
the store explicitly; nothing in the package reads it from a global.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

TERMS_FILENAME: str = ".terms.json"
"""File name of the glossary inside the user's home directory."""


def default_terms_path() -> Path:
    """Return ``~/.terms.json`` for the current user."""
    return Path.home() / TERMS_FILENAME


@dataclass(frozen=True, slots=True)
class GlossaryConfig:
    """Resolved settings for a single invocation."""

    terms_path: Path
    """JSON file holding the glossary document."""

    @classmethod
    def from_options(cls, file: str | Path | None = None) -> GlossaryConfig:
        """Build a config, preferring an explicit *file* over the default."""
        if file is None:
            return cls(terms_path=default_terms_path())
        return cls(terms_path=Path(file).expanduser())
