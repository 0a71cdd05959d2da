"""Shared pytest fixtures and configuration for the term-glossary test suite.

Guidelines
----------
* Every test runs with ``HOME`` pointed at a temporary directory, so the
  real ``~/.terms.json`` is never touched.
* Terms files live under ``tmp_path``.
* Interactive input is fed through ``io.StringIO`` — never a terminal.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from term_glossary.core.glossary_service import GlossaryService
from term_glossary.infra.json_store import JsonFileStore


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def terms_file(tmp_path: Path) -> Path:
    """Path of a terms file that does not exist yet."""
    return tmp_path / "terms.json"


@pytest.fixture
def store(terms_file: Path) -> JsonFileStore:
    return JsonFileStore(terms_file)


@pytest.fixture
def service(store: JsonFileStore) -> GlossaryService:
    return GlossaryService(store)
