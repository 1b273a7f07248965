"""Shared pytest fixtures and configuration for the tweetr test suite.

Guidelines
----------
* No internet access in any test.
* No real terminal: prompts read from and write to ``io.StringIO``.
* Core tests must be pure: no side effects.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest

from tweetr.cli import console as console_module


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so every test starts from pytest's own handlers."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    if hasattr(console_module.configure_logging, "_configured"):
        del console_module.configure_logging._configured


@pytest.fixture
def output() -> io.StringIO:
    """Writer that collects everything a prompt prints."""
    return io.StringIO()
