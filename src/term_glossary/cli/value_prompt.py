"""Interactive value prompt for ``terms --add TERM`` without ``--value``.

The prompt is a coroutine: it suspends until one line of input arrives
and is driven with :func:`asyncio.run` by the CLI.  Three input paths:

* An interactive terminal is served by ``questionary.text`` (imported
  lazily, like every optional UI dependency).
* A pipe or socket is watched by a reader registered on the event loop,
  so Ctrl+C ends the wait at once.
* Anything else — a regular file, or an ``io.StringIO`` in tests — is
  read with ``readline`` in the default executor.

There is no timeout.  Closing the input before a line arrives raises
:class:`~term_glossary.exceptions.ValueNotProvidedError`; Ctrl+C
propagates as ``KeyboardInterrupt``.
"""

from __future__ import annotations

import asyncio
import os
import stat
import sys
from typing import Any, TextIO

from term_glossary.core.protocols import ValuePrompt
from term_glossary.exceptions import EnvironmentError, ValueNotProvidedError

PROMPT_TEMPLATE: str = "Enter value for {term}: "


def _import_questionary() -> Any:
    """Import questionary lazily for terminal prompting."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass the definition directly with --value.",
        ) from exc
    return questionary


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _pipe_fd(stream: TextIO) -> int | None:
    """Return the descriptor of *stream* if the loop can watch it, else ``None``.

    Pipes, sockets and character devices qualify.  Regular files never
    block and in-memory streams have no descriptor.
    """
    if sys.platform == "win32":
        return None
    try:
        fd = stream.fileno()
        mode = os.fstat(fd).st_mode
    except (AttributeError, OSError, ValueError):
        return None
    if stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode) or stat.S_ISCHR(mode):
        return fd
    return None


def _closed_input() -> ValueNotProvidedError:
    return ValueNotProvidedError(
        "Input closed before a value was entered.",
        hint="Pass the definition with --value instead.",
    )


async def _read_line_from_pipe(fd: int, encoding: str) -> str:
    """Read one line from *fd* through a reader registered on the loop.

    Nothing blocks a thread, so cancelling the task (Ctrl+C under
    :func:`asyncio.run`) ends the wait immediately.
    """
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=1 << 20)
    # The transport owns and closes a duplicate, never the caller's stream.
    pipe = open(os.dup(fd), "rb", buffering=0)
    was_blocking = os.get_blocking(fd)
    transport, _ = await loop.connect_read_pipe(
        lambda: asyncio.StreamReaderProtocol(reader), pipe,
    )
    try:
        raw = await reader.readline()
    finally:
        transport.close()
        os.set_blocking(fd, was_blocking)
    return raw.decode(encoding, errors="replace")


async def read_line(stream: TextIO) -> str:
    """Wait for one line from *stream* without blocking the event loop.

    Pipes and terminals are watched by the event loop; anything else
    (regular files, ``io.StringIO``) is read in the default executor.
    """
    fd = _pipe_fd(stream)
    if fd is not None:
        encoding = getattr(stream, "encoding", None) or "utf-8"
        line = await _read_line_from_pipe(fd, encoding)
    else:
        loop = asyncio.get_running_loop()
        line = await loop.run_in_executor(None, stream.readline)
    if not line:
        raise _closed_input()
    return line


async def _ask_questionary(term: str) -> str:
    questionary = _import_questionary()
    # unsafe_ask_async lets Ctrl+C reach the CLI error boundary.
    answer: str | None = await questionary.text(
        PROMPT_TEMPLATE.format(term=term).rstrip(),
    ).unsafe_ask_async()
    if answer is None:
        raise ValueNotProvidedError(f"No value entered for {term!r}.")
    return answer


def make_value_prompt(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> ValuePrompt:
    """Build the prompt coroutine used by ``add_term_interactive``.

    Parameters
    ----------
    stdin:
        Stream to read the answer from.  ``None`` means the process's
        standard input, with questionary used when it is a terminal.
    stdout:
        Stream the plain prompt text is written to (defaults to stdout).
    """

    async def prompt(term: str) -> str:
        in_stream = stdin if stdin is not None else sys.stdin
        if stdin is None and _is_terminal(in_stream):
            return await _ask_questionary(term)

        out_stream = stdout if stdout is not None else sys.stdout
        out_stream.write(PROMPT_TEMPLATE.format(term=term))
        out_stream.flush()
        return await read_line(in_stream)

    return prompt
