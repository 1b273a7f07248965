"""Termination-outcome taxonomy for tweetr.

An :class:`Outcome` describes why the application is about to stop.
It is created at the failure site, rendered exactly once by the CLI
error boundary and then turned into the process exit code.

The taxonomy is closed: every variant is a frozen dataclass deriving
from :class:`Outcome`, and both :meth:`Outcome.exit_code` and
:meth:`Outcome._lines` are abstract, so a new variant cannot be
instantiated until it defines its message *and* its exit code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from tweetr import exit_codes


class Outcome(ABC):
    """Base class of the closed set of termination causes."""

    __slots__ = ()

    @abstractmethod
    def exit_code(self) -> int:
        """Return the process exit value associated with this outcome."""

    @abstractmethod
    def _lines(self) -> Sequence[str]:
        """Return the message lines, without line terminators."""

    @property
    def is_success(self) -> bool:
        return self.exit_code() == exit_codes.SUCCESS

    def render(self) -> str:
        """Return the full message exactly as :meth:`print` writes it."""
        return "".join(f"{line}\n" for line in self._lines())

    def print(self, writer: TextIO) -> None:
        """Write the user-facing message to *writer*.

        Never fails on account of the outcome itself; :class:`NoError`
        writes nothing.
        """
        text = self.render()
        if text:
            writer.write(text)


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NoError(Outcome):
    """No errors occurred, everything executed correctly."""

    def exit_code(self) -> int:
        return exit_codes.SUCCESS

    def _lines(self) -> Sequence[str]:
        return ()


@dataclass(frozen=True, slots=True)
class OverrideNoForce(Outcome):
    """The specified file would need to be overridden but was not allowed to."""

    fname: str

    def exit_code(self) -> int:
        return exit_codes.OVERRIDE_NO_FORCE

    def _lines(self) -> Sequence[str]:
        return (
            f'File "{self.fname}" was not overriden to prevent data loss.',
            "Pass --force to override it.",
        )


@dataclass(frozen=True, slots=True)
class RequiredFileFromSubsystemNonexistant(Outcome):
    """The subsystem *subsys* must run first to produce the file *fname*."""

    subsys: str
    fname: str

    def exit_code(self) -> int:
        return exit_codes.SUBSYSTEM_PREREQUISITE

    def _lines(self) -> Sequence[str]:
        return (f'Run the {self.subsys} subsystem first to produce "{self.fname}".',)


@dataclass(frozen=True, slots=True)
class RequiredDataFromSubsystemNonexistant(Outcome):
    """The subsystem *subsys* must run first to produce the data in *desc*."""

    subsys: str
    desc: str

    def exit_code(self) -> int:
        return exit_codes.SUBSYSTEM_PREREQUISITE

    def _lines(self) -> Sequence[str]:
        return (f"Run the {self.subsys} subsystem first to {self.desc}.",)


@dataclass(frozen=True, slots=True)
class TwitterAPIError(Outcome):
    """The Twitter API returned an error."""

    message: str

    def exit_code(self) -> int:
        return exit_codes.TWITTER_API_ERROR

    def _lines(self) -> Sequence[str]:
        return (f"Twitter API error: {self.message}",)


@dataclass(frozen=True, slots=True)
class FileParsingFailed(Outcome):
    """Failed to parse *desc* because of the listed *errors*."""

    desc: str
    errors: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the value stays hashable.
        object.__setattr__(self, "errors", tuple(self.errors))

    def exit_code(self) -> int:
        return exit_codes.FILE_PARSING_FAILED

    def _lines(self) -> Sequence[str]:
        terminator = ":" if self.errors else "."
        return (
            f"Failed to parse {self.desc}{terminator}",
            *(f"  {error}" for error in self.errors),
        )


__all__: list[str] = [
    "FileParsingFailed",
    "NoError",
    "Outcome",
    "OverrideNoForce",
    "RequiredDataFromSubsystemNonexistant",
    "RequiredFileFromSubsystemNonexistant",
    "TwitterAPIError",
]
