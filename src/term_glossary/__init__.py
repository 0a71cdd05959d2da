"""term-glossary — a personal glossary of terms kept in ``~/.terms.json``.

Built on a small layered architecture: a JSON file store, a glossary
service, and an argparse front-end.
"""

from term_glossary.version import __version__

__all__: list[str] = ["__version__"]
