"""Infrastructure: the glossary document as a JSON file on disk.

Rules
-----
* A missing file is not an error — it is created holding ``{}``.
* Writes replace the whole file via a temporary sibling and
  :func:`os.replace`, so a reader never sees half a document.
* ``OSError`` and ``json.JSONDecodeError`` are re-raised as
  :class:`~term_glossary.exceptions.StoreError` subclasses.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from term_glossary.exceptions import (
    MalformedDocumentError,
    StoreReadError,
    StoreWriteError,
)

EMPTY_DOCUMENT: str = "{}"


def serialize(glossary: Mapping[str, str]) -> str:
    """Return the canonical compact JSON text for *glossary*."""
    return json.dumps(dict(glossary), ensure_ascii=False, separators=(",", ":"))


class JsonFileStore:
    """Reads and writes one glossary document.

    Parameters
    ----------
    default_path:
        File used whenever an operation is called without a *path*.
    """

    def __init__(self, default_path: Path) -> None:
        self._default_path: Path = Path(default_path)

    def _resolve(self, path: Path | str | None) -> Path:
        return self._default_path if path is None else Path(path)

    # ------------------------------------------------------------------
    # Raw text
    # ------------------------------------------------------------------

    def read(self, path: Path | str | None = None) -> str:
        """Return the raw file text, creating the file with ``{}`` if absent."""
        target = self._resolve(path)
        try:
            return target.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.write(EMPTY_DOCUMENT, target)
            return EMPTY_DOCUMENT
        except OSError as exc:
            raise StoreReadError(
                f"Cannot read terms file {target}: {exc.strerror or exc}",
                hint="Check the file's permissions.",
            ) from exc

    def write(
        self,
        content: str | Mapping[str, str],
        path: Path | str | None = None,
    ) -> None:
        """Overwrite the file with *content* (raw text or a mapping)."""
        target = self._resolve(path)
        text = content if isinstance(content, str) else serialize(content)
        tmp_name: str | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as exc:
            raise StoreWriteError(
                f"Cannot write terms file {target}: {exc.strerror or exc}",
                hint="Check free disk space and the directory's permissions.",
            ) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    # ------------------------------------------------------------------
    # Parsed document
    # ------------------------------------------------------------------

    def load(self, path: Path | str | None = None) -> dict[str, str]:
        """Read and parse the document into a ``dict``.

        Only the top level is checked; definitions keep whatever JSON type
        they have on disk.
        """
        target = self._resolve(path)
        text = self.read(target)
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(
                f"Terms file {target} is not valid JSON: {exc.msg} "
                f"(line {exc.lineno}, column {exc.colno})",
                hint="Fix or remove the file; it will be recreated empty.",
            ) from exc
        if not isinstance(document, dict):
            raise MalformedDocumentError(
                f"Terms file {target} must hold a JSON object, "
                f"found {type(document).__name__}.",
                hint="Fix or remove the file; it will be recreated empty.",
            )
        return document
