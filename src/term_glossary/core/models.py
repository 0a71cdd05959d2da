"""Domain models for term-glossary.

Commands are **frozen** dataclasses forming a closed union
(:data:`Command`).  The CLI resolves raw flags into exactly one of them,
so dispatch can be written as an exhaustive ``isinstance`` chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Glossary = dict[str, str]
"""A glossary document: term → definition."""


# ---------------------------------------------------------------------------
# Lookup result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TermLookup:
    """Outcome of looking a term up.

    :attr:`found` separates a missing key from one bound to JSON ``null``.
    """

    term: str
    found: bool
    value: Any = None


# ---------------------------------------------------------------------------
# Raw parsed flags
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CliOptions:
    """Flags as supplied on the command line, before validation.

    ``None`` / ``False`` means the flag was not given.
    """

    get: str | None = None
    add: str | None = None
    value: str | None = None
    all: bool = False
    version: bool = False
    file: str | None = field(default=None, compare=False)
    """Terms file override; not part of the option set proper."""

    def as_dict(self) -> dict[str, Any]:
        """Return only the flags that were actually supplied.

        ``[--add, term, --value, value]`` → ``{"add": "term", "value": "value"}``.
        """
        supplied: dict[str, Any] = {}
        for name in ("get", "add", "value"):
            flag_value = getattr(self, name)
            if flag_value is not None:
                supplied[name] = flag_value
        if self.all:
            supplied["all"] = True
        if self.version:
            supplied["version"] = True
        return supplied


# ---------------------------------------------------------------------------
# Resolved commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GetTerm:
    """Print the definition bound to :attr:`term`."""

    term: str


@dataclass(frozen=True, slots=True)
class AddTerm:
    """Bind :attr:`term` to :attr:`value`, prompting when it is ``None``."""

    term: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class ShowAll:
    """List the whole glossary sorted by term."""


@dataclass(frozen=True, slots=True)
class ShowHelp:
    """No recognised flag was given; point the user at ``--help``."""


@dataclass(frozen=True, slots=True)
class ShowVersion:
    """Print the installed version."""


Command = Union[GetTerm, AddTerm, ShowAll, ShowHelp, ShowVersion]
