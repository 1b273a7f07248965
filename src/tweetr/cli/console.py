"""Diagnostic output for the CLI layer: the stderr console and logging.

Two consumers share one Rich stderr console:

* the error boundary in :mod:`tweetr.cli.app`, which prints ``Error:``
  and ``Hint:`` lines through :data:`console`;
* the root logger, which :func:`configure_logging` points at a
  ``RichHandler`` so prompt retries and parse rejections show up with
  ``-v``.

Prompts and command output never go through here; they are written to
the caller's stdout stream.  Rich is imported lazily, and both consumers
degrade to plain stderr when it is missing, so ``--help``, ``--version``
and ``when`` keep working without it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from tweetr.exceptions import EnvironmentError

_LOG_FORMAT = "%(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create the Rich console used for diagnostics (always stderr)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Error-boundary printer: Rich markup on stderr, raw text without Rich.

	A fresh console is resolved on every call so output follows whatever
	``sys.stderr`` currently is.
	"""

	def print(self, *objects: object) -> None:
		"""Print *objects* to stderr, rendering markup only when Rich is present."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def _build_log_handler() -> logging.Handler:
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		return logging.StreamHandler(sys.stderr)
	return RichHandler(
		console=get_rich_console(),
		rich_tracebacks=True,
		show_path=False,
		markup=False,
	)


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> int:
	"""Install a single stderr handler on the root logger and return the level.

	``verbose`` selects DEBUG, ``quiet`` selects ERROR, otherwise WARNING.
	Calling it again only adjusts the level.
	"""
	if verbose:
		level = logging.DEBUG
	elif quiet:
		level = logging.ERROR
	else:
		level = logging.WARNING

	root = logging.getLogger()
	if getattr(configure_logging, "_configured", False):
		root.setLevel(level)
		for handler in root.handlers:
			handler.setLevel(level)
		return level

	handler = _build_log_handler()
	handler.setLevel(level)
	handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

	root.handlers.clear()
	root.addHandler(handler)
	root.setLevel(level)

	configure_logging._configured = True  # type: ignore[attr-defined]
	return level
