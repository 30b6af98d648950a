"""Terminal output for the ops-dispatch CLI.

Two channels:

* :data:`console`: diagnostics, tables and errors, on stderr.
* :data:`stdout`: evaluation results, so ``ops-dispatch eval`` can be piped.

Rich renders both when it is installed.  It is imported on first print,
never at module import, and each channel degrades to the builtin
``print`` on the same stream when Rich is missing.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from ops_dispatch.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
			hint="Tables fall back to plain text until Rich is installed.",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Build a Rich console bound to stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _Channel:
	"""One output stream, rendered through Rich when possible."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def _stream(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object, **rich_options: Any) -> None:
		"""Print *objects*; *rich_options* are ignored on the plain path."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except MissingDependencyError:
			print(*objects, file=self._stream())
			return
		rich_console.print(*objects, **rich_options)


console = _Channel(stderr=True)
stdout = _Channel(stderr=False)


def configure_logging(verbose: bool = False) -> None:
	"""Attach one handler to the ``ops_dispatch`` logger.

	Registrations and dispatch decisions are logged at ``DEBUG`` and only
	shown with ``-v``.  Conflicts are logged at ``WARNING`` and always
	shown.  Calling this again replaces the previous handler.
	"""
	level = logging.DEBUG if verbose else logging.WARNING
	handler: logging.Handler
	try:
		from rich.logging import RichHandler

		handler = RichHandler(console=get_rich_console(), show_path=False)
		handler.setFormatter(logging.Formatter("%(message)s"))
	except (ModuleNotFoundError, MissingDependencyError):
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(
			logging.Formatter("%(levelname)s %(name)s: %(message)s"),
		)

	package_logger = logging.getLogger("ops_dispatch")
	for existing in list(package_logger.handlers):
		package_logger.removeHandler(existing)
	package_logger.addHandler(handler)
	package_logger.setLevel(level)
