"""CLI application entry point and command routing for term-glossary.

This module is the **sole error boundary** for the entire application.
It catches :class:`~term_glossary.exceptions.GlossaryError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a
message on stderr and returns a well-defined exit code.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~term_glossary.core.glossary_service.GlossaryService`.
* Raw flags are first collected into :class:`CliOptions`, then resolved
  into exactly one :data:`~term_glossary.core.models.Command`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TextIO

from term_glossary.cli import exit_codes
from term_glossary.cli.console import console, output
from term_glossary.config import GlossaryConfig
from term_glossary.core.glossary_service import GlossaryService
from term_glossary.core.models import (
    AddTerm,
    CliOptions,
    Command,
    GetTerm,
    ShowAll,
    ShowHelp,
    ShowVersion,
)
from term_glossary.exceptions import GlossaryError
from term_glossary.infra.json_store import JsonFileStore
from term_glossary.version import __version__

PROG: str = "terms"
HELP_HINT: str = "For available options, please use the --help flag"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    ``--version`` is a plain flag rather than argparse's ``version``
    action so that it resolves to :class:`ShowVersion` like every other
    mode.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="A CLI for managing a glossary of terms.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Print the version and exit.",
    )
    parser.add_argument(
        "-g",
        "--get",
        metavar="TERM",
        help="Get the value of an existing term.",
    )
    parser.add_argument(
        "-a",
        "--add",
        metavar="TERM",
        help="Add a new term (or replace an existing one).",
    )
    parser.add_argument(
        "-v",
        "--value",
        metavar="VALUE",
        help="Value for the term given with --add; prompts if omitted.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Show the full glossary of terms and values, sorted alphabetically.",
    )
    parser.add_argument(
        "-f",
        "--file",
        metavar="PATH",
        default=None,
        help="Use PATH instead of ~/.terms.json.",
    )
    return parser


def parse_options(argv: list[str] | None = None) -> CliOptions:
    """Parse *argv* into raw :class:`CliOptions`.

    Raises ``SystemExit`` for ``--help`` and usage errors, as argparse does.
    """
    args = _build_parser().parse_args(argv)
    return CliOptions(
        get=args.get,
        add=args.add,
        value=args.value,
        all=args.all,
        version=args.version,
        file=args.file,
    )


def resolve_command(options: CliOptions) -> Command:
    """Pick the single command to run.

    Precedence is fixed: ``--version``, ``--all``, ``--add``, ``--get``.
    Anything else (including a lone ``--value``) yields :class:`ShowHelp`.
    """
    if options.version:
        return ShowVersion()
    if options.all:
        return ShowAll()
    if options.add is not None:
        return AddTerm(term=options.add, value=options.value)
    if options.get is not None:
        return GetTerm(term=options.get)
    return ShowHelp()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_get(service: GlossaryService, command: GetTerm) -> int:
    from term_glossary.cli.listing import render_entry

    result = service.lookup(command.term)
    render_entry(result.term, result.value, found=result.found)
    return exit_codes.SUCCESS


def _handle_add(
    service: GlossaryService,
    command: AddTerm,
    stdin: TextIO | None = None,
) -> int:
    """Store a term, prompting for its value when none was given."""
    from term_glossary.cli.listing import format_entry

    if command.value is not None:
        service.add_term(command.term, command.value)
        output.print(f"Added {format_entry(command.term, command.value)}")
        return exit_codes.SUCCESS

    from term_glossary.cli.value_prompt import make_value_prompt

    prompt = make_value_prompt(stdin=stdin)
    glossary = asyncio.run(service.add_term_interactive(command.term, prompt))
    output.print(f"Added {format_entry(command.term, glossary[command.term])}")
    return exit_codes.SUCCESS


def _handle_all(service: GlossaryService) -> int:
    from term_glossary.cli.listing import render_glossary

    render_glossary(service.show_all_terms())
    return exit_codes.SUCCESS


def dispatch(
    command: Command,
    service: GlossaryService,
    *,
    stdin: TextIO | None = None,
) -> int:
    """Run *command* against *service* and return the exit code."""
    if isinstance(command, ShowVersion):
        output.print(f"{PROG} {__version__}")
        return exit_codes.SUCCESS
    if isinstance(command, ShowAll):
        return _handle_all(service)
    if isinstance(command, AddTerm):
        return _handle_add(service, command, stdin)
    if isinstance(command, GetTerm):
        return _handle_get(service, command)
    if isinstance(command, ShowHelp):
        output.print(HELP_HINT)
        return exit_codes.SUCCESS
    raise TypeError(f"Unhandled command: {command!r}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, stdin: TextIO | None = None) -> int:
    """Run the terms CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin:
        Input stream for the value prompt.  ``None`` means the real
        standard input.

    Returns
    -------
    int
        OS process exit code.
    """
    options = parse_options(argv)
    command = resolve_command(options)

    config = GlossaryConfig.from_options(options.file)
    service = GlossaryService(JsonFileStore(config.terms_path))
    return dispatch(command, service, stdin=stdin)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GlossaryError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
