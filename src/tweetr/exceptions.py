"""Custom exception hierarchy for tweetr.

Every error that leaves the layer it was raised in inherits from
:class:`TweetrError`, so the CLI error boundary can render a clean
message without leaking a stack trace.

Hierarchy
---------
TweetrError
├── UnexpectedEndOfInputError
├── RelativeTimeParseError
│   └── RelativeTimeRangeError
├── OutcomeError
└── EnvironmentError
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tweetr.core.outcome import Outcome


class TweetrError(Exception):
    """Base exception for all tweetr errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Prompting -------------------------------------------------------------

class UnexpectedEndOfInputError(TweetrError):
    """Raised when input ends while a prompt still requires a line."""


# --- Parsing ---------------------------------------------------------------

class RelativeTimeParseError(TweetrError):
    """Raised when a relative time expression does not match the grammar.

    Carries no diagnostic detail beyond the rejected text; callers
    annotate it with their own context.
    """

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Invalid relative time expression: {text!r}",
            hint='Use "now" or "in <N> <second|minute|hour|day|week>[s]".',
        )
        self.text: str = text


class RelativeTimeRangeError(RelativeTimeParseError):
    """Raised when a well-formed relative time lies outside the datetime range."""

    def __init__(self, text: str) -> None:
        TweetrError.__init__(
            self,
            f"Relative time expression out of range: {text!r}",
            hint=f"Offsets must end before the year {datetime.max.year + 1}.",
        )
        self.text: str = text


# --- Termination -----------------------------------------------------------

class OutcomeError(TweetrError):
    """Carries a terminal :class:`~tweetr.core.outcome.Outcome` to the CLI boundary."""

    def __init__(self, outcome: Outcome) -> None:
        super().__init__(outcome.render().rstrip("\n"))
        self.outcome: Outcome = outcome


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TweetrError):
    """Raised when a required runtime dependency is not available."""
