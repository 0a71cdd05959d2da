"""Infrastructure layer — the terms file on local disk.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Raw ``OSError`` / JSON errors are re-raised as ``StoreError`` subclasses.
"""

from term_glossary.infra.json_store import EMPTY_DOCUMENT, JsonFileStore, serialize

__all__: list[str] = [
    "EMPTY_DOCUMENT",
    "JsonFileStore",
    "serialize",
]
