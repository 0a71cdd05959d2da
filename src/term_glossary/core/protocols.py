"""Protocols (interfaces) consumed by the core layer.

The glossary service depends only on :class:`TermStore`; the JSON file
implementation lives in ``infra`` and is injected at construction time.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import Protocol

ValuePrompt = Callable[[str], Awaitable[str]]
"""Coroutine function that asks for the value of a term and returns the raw line."""


class TermStore(Protocol):
    """Contract for glossary document storage.

    Every method takes an optional *path*; ``None`` means the store's
    configured default location.
    """

    def read(self, path: Path | None = None) -> str:
        """Return the raw document text, creating ``{}`` if it is missing.

        Raises
        ------
        StoreReadError
            When an existing file cannot be read.
        """
        ...  # pragma: no cover

    def write(self, content: str | Mapping[str, str], path: Path | None = None) -> None:
        """Replace the whole document with *content*.

        Raises
        ------
        StoreWriteError
            When the file cannot be written.
        """
        ...  # pragma: no cover

    def load(self, path: Path | None = None) -> dict[str, str]:
        """Read and parse the document.

        Raises
        ------
        MalformedDocumentError
            When the text is not a JSON object.
        """
        ...  # pragma: no cover
