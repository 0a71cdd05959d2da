"""Custom exception hierarchy for term-glossary.

Every error that crosses a layer boundary inherits from
:class:`GlossaryError`.  Raw ``OSError`` and ``json.JSONDecodeError``
never leave the infrastructure layer — they are caught there and
re-raised as one of the typed subclasses below.

Hierarchy
---------
GlossaryError
├── StoreError
│   ├── StoreReadError
│   ├── StoreWriteError
│   └── MalformedDocumentError
├── ValueNotProvidedError
└── EnvironmentError
"""

from __future__ import annotations


class GlossaryError(Exception):
    """Base exception for all term-glossary errors.

    The CLI error boundary renders these as a one-line message plus an
    optional hint, and exits with ``GENERAL_ERROR``.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Terms file ------------------------------------------------------------

class StoreError(GlossaryError):
    """Raised when the terms file cannot be used."""


class StoreReadError(StoreError):
    """Raised when an existing terms file cannot be read."""


class StoreWriteError(StoreError):
    """Raised when the terms file cannot be (over)written."""


class MalformedDocumentError(StoreError):
    """Raised when the terms file is not valid JSON or its top level is not an object.

    Definitions are not type-checked; non-string values are shown as JSON.
    """


# --- Interactive input -----------------------------------------------------

class ValueNotProvidedError(GlossaryError):
    """Raised when input closes before a value for the term is entered."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(GlossaryError):
    """Raised when an optional UI dependency is needed but not installed."""
