"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) keep working when it is not installed.

Two proxies are exported:

* :data:`console` — diagnostics (errors, hints, notices) on stderr.
* :data:`output` — command results on stdout.  Markup is off by default
  so that user-entered terms such as ``[draft]`` print verbatim; plain
  strings skip Rich altogether and reach stdout byte for byte.
"""

from __future__ import annotations

import sys
from typing import Any

from term_glossary.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console bound to the current stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def rich_available() -> bool:
	"""Return ``True`` when Rich can be imported."""
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return False
	return True


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with a plain-text fallback."""

	def __init__(self, *, stderr: bool, markup: bool) -> None:
		self._stderr = stderr
		self._markup = markup

	def print(self, *objects: object, markup: bool | None = None) -> None:
		"""Render with Rich when available, else plain ``print``."""
		use_markup = self._markup if markup is None else markup
		stream = sys.stderr if self._stderr else sys.stdout
		# Plain text without markup bypasses Rich, which would expand tabs.
		if not use_markup and all(isinstance(obj, str) for obj in objects):
			print(*objects, file=stream)
			return
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=stream)
			return
		rich_console.print(
			*objects,
			markup=use_markup,
			highlight=use_markup,
			emoji=use_markup,
		)


console = _ConsoleProxy(stderr=True, markup=True)
output = _ConsoleProxy(stderr=False, markup=False)
