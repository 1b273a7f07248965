"""Line-oriented prompting over caller-supplied text streams.

This module implements the retry-until-valid prompting protocol:

* :func:`read_line` performs a single write-then-read interaction and
  clears the answer when the validator rejects it;
* :func:`prompt_exact_len`, :func:`prompt_nonzero_len` and
  :func:`prompt_any_len` layer length policies on top of it;
* :func:`prompt_multiline` assembles a multi-line answer using
  backslash continuation.

Input and output are plain text streams so the same code drives the
real console and ``io.StringIO`` buffers in tests.  Validation failures
are recovered by re-prompting; running out of input is not, and raises
:class:`~tweetr.exceptions.UnexpectedEndOfInputError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO

from tweetr.exceptions import UnexpectedEndOfInputError
from tweetr.utils.text import repeat_str

logger = logging.getLogger(__name__)

Validator = Callable[[str], bool]
"""Predicate deciding whether a trimmed answer is acceptable."""

BACKSLASH: str = "\\"


def accept_any(_: str) -> bool:
    """Validator that accepts every answer."""
    return True


# ---------------------------------------------------------------------------
# Single interaction
# ---------------------------------------------------------------------------

def read_line(
    input: TextIO,
    output: TextIO,
    prompt: str,
    validator: Validator,
    *,
    allow_empty: bool = False,
    colon: bool = True,
) -> str:
    """Print *prompt*, read one line and return it trimmed.

    Parameters
    ----------
    input, output:
        Streams to read the answer from and write the prompt to.
    prompt:
        Prompt text; followed by ``": "`` when *colon* is set.
    validator:
        Called with the trimmed answer.  A rejected answer is returned
        as the empty string so that looping callers re-prompt.
    allow_empty:
        Whether reaching end of input is acceptable.  When it is, the
        result is simply the empty string.

    Raises
    ------
    UnexpectedEndOfInputError
        If input is exhausted and *allow_empty* is false.
    """
    output.write(f"{prompt}: " if colon else prompt)
    output.flush()

    raw = input.readline()
    if not raw and not allow_empty:
        raise UnexpectedEndOfInputError(
            "Input too short",
            hint=f"Input ended while waiting for {prompt.strip() or 'more input'!r}.",
        )

    answer = raw.strip()
    if not validator(answer):
        logger.debug("Rejected answer %r for prompt %r", answer, prompt)
        return ""
    return answer


# ---------------------------------------------------------------------------
# Length policies
# ---------------------------------------------------------------------------

def prompt_exact_len(
    input: TextIO,
    output: TextIO,
    prompt: str,
    validator: Validator,
    desired_len: int,
) -> str:
    """Ask for an answer exactly *desired_len* characters long, re-prompting as necessary.

    A *desired_len* of zero is satisfied without prompting.
    """
    answer = ""
    while len(answer) != desired_len:
        answer = read_line(input, output, prompt, validator)
    return answer


def prompt_nonzero_len(
    input: TextIO,
    output: TextIO,
    prompt: str,
    validator: Validator,
) -> str:
    """Ask for a non-empty answer, re-prompting as necessary."""
    answer = ""
    while not answer:
        answer = read_line(input, output, prompt, validator)
    return answer


def prompt_any_len(
    input: TextIO,
    output: TextIO,
    prompt: str,
    validator: Validator,
) -> str | None:
    """Ask once for an answer of any length.

    Returns ``None`` when the answer is empty, rejected, or input has
    already ended.
    """
    answer = read_line(input, output, prompt, validator, allow_empty=True)
    return answer or None


# ---------------------------------------------------------------------------
# Multi-line answers
# ---------------------------------------------------------------------------

def _trailing_backslashes(line: str) -> int:
    return len(line) - len(line.rstrip(BACKSLASH))


def split_continuation(line: str) -> tuple[str, bool]:
    """Resolve the trailing backslash run of *line*.

    Each escaped pair in the run collapses to one literal backslash;
    an odd leftover backslash marks a continuation.  Returns the
    resolved text and whether another line follows.

    >>> split_continuation("Line 1\\\\")
    ('Line 1', True)
    >>> split_continuation("Line 0\\\\\\\\")
    ('Line 0\\\\', False)
    """
    run = _trailing_backslashes(line)
    if not run:
        return line, False
    body = line[: len(line) - run]
    return body + repeat_str(BACKSLASH, run // 2), run % 2 == 1


def prompt_multiline(
    input: TextIO,
    output: TextIO,
    prompt: str,
    validator: Validator,
) -> str:
    """Ask for a multi-line answer, re-prompting as necessary.

    A line ending in a single backslash continues on the next line::

        Prompt: Abolish\\
                the\\
                burgeoisie!

    yields ``"Abolish\\nthe\\nburgeoisie!"``, while ``Capitalism\\\\``
    yields ``"Capitalism\\"``.  Continuation lines are prompted with a
    blank prefix as wide as ``"Prompt: "`` and may be empty.

    The assembled answer is passed to *validator* as a whole; when it
    is rejected everything is discarded and the first line is asked
    for again.
    """
    reprompt = repeat_str(" ", len(prompt) + 2)

    while True:
        first = prompt_nonzero_len(input, output, prompt, accept_any)
        text, more = split_continuation(first)
        parts = [text]

        while more:
            line = read_line(
                input, output, reprompt, accept_any, allow_empty=True, colon=False,
            )
            text, more = split_continuation(line)
            parts.append(text)

        answer = "\n".join(parts)
        if validator(answer):
            return answer
        logger.debug("Rejected %d-line answer for prompt %r; starting over", len(parts), prompt)
