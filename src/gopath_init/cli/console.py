"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``-h``, ``--version``) remain functional even when Rich
is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from gopath_init.exceptions import EnvironmentError


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
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True) -> None:
		self._stderr = stderr

	def _stream(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print.

		*options* are forwarded to ``rich.console.Console.print`` and
		ignored by the plain fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects, **options)

	def out(self, text: str) -> None:
		"""Write *text* verbatim: no markup, no highlighting, no wrapping."""
		end = "" if text.endswith("\n") else "\n"
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(text, end=end, file=self._stream())
			return
		rich_console.out(text, end=end, highlight=False)


console = _ConsoleProxy()
stdout_console = _ConsoleProxy(stderr=False)


def configure_logging(verbose: bool) -> None:
	"""Attach a handler to the ``gopath_init`` logger.

	Uses ``rich.logging.RichHandler`` when Rich is installed.  Without
	``verbose`` only warnings are shown.
	"""
	logger = logging.getLogger("gopath_init")
	logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
	if logger.handlers:
		return
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
	else:
		handler = RichHandler(console=get_rich_console(), show_path=False)
	logger.addHandler(handler)
