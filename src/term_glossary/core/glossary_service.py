"""Core glossary service — get, add and list terms.

Depends on a :class:`~term_glossary.core.protocols.TermStore` injected
at construction time.  Every operation reloads the whole document and,
for mutations, writes the whole document back.

Guarantees
----------
* No ``print()`` — the CLI layer renders results.
* No direct filesystem access; all I/O goes through the store.
* Only :class:`~term_glossary.exceptions.GlossaryError` subclasses escape.
"""

from __future__ import annotations

from pathlib import Path

from term_glossary.core.models import Glossary, TermLookup
from term_glossary.core.protocols import TermStore, ValuePrompt


class GlossaryService:
    """Term operations over a single glossary document.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`TermStore` protocol.
    """

    def __init__(self, store: TermStore) -> None:
        self._store: TermStore = store

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_term(self, term: str, path: Path | None = None) -> str | None:
        """Return the definition of *term*, or ``None`` when it is absent."""
        return self.lookup(term, path).value

    def lookup(self, term: str, path: Path | None = None) -> TermLookup:
        """Return whether *term* is bound and, if so, to what."""
        glossary = self._store.load(path)
        if term not in glossary:
            return TermLookup(term=term, found=False)
        return TermLookup(term=term, found=True, value=glossary[term])

    def show_all_terms(self, path: Path | None = None) -> Glossary:
        """Return a copy of the glossary with keys in ascending code-point order."""
        glossary = self._store.load(path)
        return {term: glossary[term] for term in sorted(glossary)}

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_term(self, term: str, value: str, path: Path | None = None) -> Glossary:
        """Bind *term* to *value*, persist, and return the updated glossary."""
        glossary = self._store.load(path)
        glossary[term] = value
        self._store.write(glossary, path)
        return glossary

    async def add_term_interactive(
        self,
        term: str,
        prompt: ValuePrompt,
        path: Path | None = None,
    ) -> Glossary:
        """Ask for the value of *term* via *prompt*, then persist it.

        The document is loaded before prompting so a broken terms file
        fails fast instead of after the user has typed a definition.
        Surrounding whitespace is stripped from the entered line.

        Raises
        ------
        ValueNotProvidedError
            Propagated from *prompt* when input closes first.
        """
        glossary = self._store.load(path)
        raw = await prompt(term)
        glossary[term] = raw.strip()
        self._store.write(glossary, path)
        return glossary
