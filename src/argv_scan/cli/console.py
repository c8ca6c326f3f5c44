"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so the help and error paths remain functional even when
Rich is not installed.

Two proxies are provided: :data:`console` writes to stderr and
:data:`stdout_console` to stdout.  :meth:`_ConsoleProxy.out` writes text
verbatim (no markup, no wrapping, no tab expansion), which is what help
text and diagnostics need; :meth:`_ConsoleProxy.print` renders Rich markup.
"""

from __future__ import annotations

import sys
from typing import Any

from argv_scan.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def _stream(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects)

	def out(self, text: str, *, end: str = "\n") -> None:
		"""Write *text* exactly as given, followed by *end*.

		Bypasses Rich rendering, which would expand tabs.
		"""
		try:
			stream = get_rich_console(stderr=self._stderr).file
		except MissingDependencyError:
			stream = self._stream()
		stream.write(text + end)
		stream.flush()


console = _ConsoleProxy(stderr=True)
stdout_console = _ConsoleProxy(stderr=False)


class ConsoleReporter:
	"""Diagnostic reporter writing each message verbatim to stderr."""

	def report(self, diagnostic: str) -> None:
		console.out(diagnostic)
