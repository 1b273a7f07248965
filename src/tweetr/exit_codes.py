"""Exit-code constants shared by the outcome taxonomy and the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: command completed without error."""

OVERRIDE_NO_FORCE: int = 1
"""An existing file would have been overwritten without ``--force``."""

SUBSYSTEM_PREREQUISITE: int = 2
"""Another subsystem has to run first to produce a file or data."""

TWITTER_API_ERROR: int = 3
"""The remote Twitter API reported an error."""

FILE_PARSING_FAILED: int = 4
"""A file or user-supplied expression could not be parsed."""

GENERAL_ERROR: int = 5
"""A known TweetrError outside the outcome taxonomy was caught."""

UNEXPECTED_ERROR: int = 6
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
