"""Core / service layer — glossary operations and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem access except through an injected ``TermStore``.
* No imports from ``cli`` or ``infra``.
"""

from term_glossary.core.glossary_service import GlossaryService
from term_glossary.core.models import (
    AddTerm,
    CliOptions,
    Command,
    GetTerm,
    Glossary,
    ShowAll,
    ShowHelp,
    ShowVersion,
    TermLookup,
)
from term_glossary.core.protocols import TermStore, ValuePrompt

__all__: list[str] = [
    "AddTerm",
    "CliOptions",
    "Command",
    "GetTerm",
    "Glossary",
    "GlossaryService",
    "ShowAll",
    "ShowHelp",
    "ShowVersion",
    "TermLookup",
    "TermStore",
    "ValuePrompt",
]
