"""Single source of truth for the term-glossary version string."""

__version__ = "1.0.0"
