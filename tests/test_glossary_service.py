"""Tests for the glossary service (core/glossary_service.py).

The service runs against a real :class:`JsonFileStore` in ``tmp_path``;
the interactive path is driven with a stub prompt coroutine.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from term_glossary.core.glossary_service import GlossaryService
from term_glossary.core.models import TermLookup
from term_glossary.exceptions import MalformedDocumentError, ValueNotProvidedError
from term_glossary.infra.json_store import JsonFileStore


def _write(path: Path, glossary: dict[str, str]) -> None:
    path.write_text(json.dumps(glossary), encoding="utf-8")


def _read(path: Path) -> dict[str, str]:
    return json.loads(path.read_text(encoding="utf-8"))


def _answer(text: str):
    async def prompt(term: str) -> str:
        return text

    return prompt


# ---------------------------------------------------------------------------
# get_term
# ---------------------------------------------------------------------------

class TestGetTerm:
    @pytest.mark.parametrize("term", ["missing", "", "Perfect", "a b c"])
    def test_absent_term_on_empty_document(
        self, service: GlossaryService, terms_file: Path, term: str,
    ) -> None:
        assert service.get_term(term) is None
        assert terms_file.read_text(encoding="utf-8") == "{}"

    def test_present_term(self, service: GlossaryService, terms_file: Path) -> None:
        _write(terms_file, {"perfect": "yes, it's true"})
        assert service.get_term("perfect") == "yes, it's true"

    def test_lookup_is_case_sensitive(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        _write(terms_file, {"API": "interface"})
        assert service.get_term("api") is None

    def test_path_override(self, service: GlossaryService, tmp_path: Path) -> None:
        other = tmp_path / "other.json"
        _write(other, {"x": "from other"})
        assert service.get_term("x", other) == "from other"

    def test_malformed_document_propagates(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        terms_file.write_text("oops", encoding="utf-8")
        with pytest.raises(MalformedDocumentError):
            service.get_term("x")


class TestLookup:
    def test_missing_term(self, service: GlossaryService) -> None:
        result = service.lookup("x")
        assert result.found is False
        assert result.value is None

    def test_null_value_is_found(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        terms_file.write_text('{"x": null}', encoding="utf-8")
        result = service.lookup("x")
        assert result.found is True
        assert result.value is None

    def test_present_term(self, service: GlossaryService, terms_file: Path) -> None:
        _write(terms_file, {"x": "y"})
        assert service.lookup("x") == TermLookup(term="x", found=True, value="y")


# ---------------------------------------------------------------------------
# add_term
# ---------------------------------------------------------------------------

class TestAddTerm:
    def test_add_then_get(self, service: GlossaryService) -> None:
        service.add_term("x", "y")
        assert service.get_term("x") == "y"

    def test_add_persists(self, service: GlossaryService, terms_file: Path) -> None:
        service.add_term("x", "y")
        assert _read(terms_file) == {"x": "y"}

    def test_add_replaces_existing(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        _write(terms_file, {"x": "old", "z": "keep"})
        result = service.add_term("x", "new")
        assert result == {"x": "new", "z": "keep"}
        assert _read(terms_file) == {"x": "new", "z": "keep"}

    def test_value_is_stored_verbatim(self, service: GlossaryService) -> None:
        service.add_term("x", "  padded  ")
        assert service.get_term("x") == "  padded  "

    def test_path_override(
        self, service: GlossaryService, terms_file: Path, tmp_path: Path,
    ) -> None:
        other = tmp_path / "other.json"
        service.add_term("x", "y", other)
        assert _read(other) == {"x": "y"}
        assert not terms_file.exists()


# ---------------------------------------------------------------------------
# add_term_interactive
# ---------------------------------------------------------------------------

class TestAddTermInteractive:
    def test_answer_is_stripped_and_persisted(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        result = asyncio.run(service.add_term_interactive("x", _answer("  hello \n")))
        assert result == {"x": "hello"}
        assert _read(terms_file) == {"x": "hello"}

    def test_prompt_receives_term(self, service: GlossaryService) -> None:
        seen: list[str] = []

        async def prompt(term: str) -> str:
            seen.append(term)
            return "v"

        asyncio.run(service.add_term_interactive("latency", prompt))
        assert seen == ["latency"]

    def test_writes_to_path_that_was_read(
        self, service: GlossaryService, terms_file: Path, tmp_path: Path,
    ) -> None:
        other = tmp_path / "other.json"
        _write(other, {"a": "1"})
        asyncio.run(service.add_term_interactive("b", _answer("2\n"), other))
        assert _read(other) == {"a": "1", "b": "2"}
        assert not terms_file.exists()

    def test_closed_input_writes_nothing(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        _write(terms_file, {"a": "1"})

        async def prompt(term: str) -> str:
            raise ValueNotProvidedError("closed")

        with pytest.raises(ValueNotProvidedError):
            asyncio.run(service.add_term_interactive("b", prompt))
        assert _read(terms_file) == {"a": "1"}

    def test_broken_file_fails_before_prompting(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        terms_file.write_text("[]", encoding="utf-8")
        prompt = MagicMock()
        with pytest.raises(MalformedDocumentError):
            asyncio.run(service.add_term_interactive("x", prompt))
        prompt.assert_not_called()


# ---------------------------------------------------------------------------
# show_all_terms
# ---------------------------------------------------------------------------

class TestShowAllTerms:
    def test_empty_document(self, service: GlossaryService) -> None:
        assert service.show_all_terms() == {}

    def test_keys_sorted(self, service: GlossaryService, terms_file: Path) -> None:
        _write(terms_file, {"b": "2", "a": "1"})
        assert list(service.show_all_terms()) == ["a", "b"]

    def test_code_point_order(self, service: GlossaryService, terms_file: Path) -> None:
        _write(terms_file, {"b": "", "a": "", "B": "", "_": "", "A": ""})
        assert list(service.show_all_terms()) == ["A", "B", "_", "a", "b"]

    def test_does_not_rewrite_document(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        terms_file.write_text('{"b": "2", "a": "1"}', encoding="utf-8")
        service.show_all_terms()
        assert terms_file.read_text(encoding="utf-8") == '{"b": "2", "a": "1"}'

    def test_add_then_show_all_scenario(
        self, service: GlossaryService, terms_file: Path,
    ) -> None:
        _write(terms_file, {"perfect": "yes, it's true"})
        service.add_term("without", "me you're only you")
        result = service.show_all_terms()
        assert result == {
            "perfect": "yes, it's true",
            "without": "me you're only you",
        }
        assert list(result) == ["perfect", "without"]


class TestServiceWithMockStore:
    def test_uses_injected_store(self) -> None:
        fake_store = MagicMock(spec=JsonFileStore)
        fake_store.load.return_value = {"k": "v"}
        svc = GlossaryService(fake_store)

        assert svc.get_term("k") == "v"
        fake_store.load.assert_called_once_with(None)

    def test_add_writes_through_store(self) -> None:
        fake_store = MagicMock(spec=JsonFileStore)
        fake_store.load.return_value = {}
        GlossaryService(fake_store).add_term("k", "v", Path("/x.json"))

        fake_store.write.assert_called_once_with({"k": "v"}, Path("/x.json"))
