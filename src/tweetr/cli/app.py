"""CLI application entry point and command routing for tweetr.

This module is the **sole error boundary** for the entire application.
It turns :class:`~tweetr.exceptions.OutcomeError` into the outcome's
message and exit code, renders any other
:class:`~tweetr.exceptions.TweetrError` as a user-friendly message, and
maps ``KeyboardInterrupt`` and unexpected exceptions to well-defined
exit codes.

Architecture notes
------------------
* No business logic lives here.  Parsing lives in ``core`` and the
  prompting protocol in :mod:`tweetr.cli.prompt`.
* Prompts and command results go to stdout; diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from tweetr import exit_codes
from tweetr.cli.console import configure_logging, console
from tweetr.exceptions import OutcomeError, TweetrError
from tweetr.utils.timing import TWEET_DATETIME_FORMAT, timed
from tweetr.version import __version__

logger = logging.getLogger(__name__)

TWEET_MAX_LENGTH: int = 280
"""Longest tweet body ``compose`` accepts, in characters."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``tweetr when <expr> [--from <datetime>]`` resolves a relative time
    * ``tweetr compose`` composes a tweet interactively
    * ``tweetr --version``
    """
    parser = argparse.ArgumentParser(
        prog="tweetr",
        description="Compose tweets and schedule them with relative times.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug details to stderr.",
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    when = commands.add_parser(
        "when",
        help="Resolve a relative time such as 'now' or 'in 2 days'.",
    )
    when.add_argument("expression", help="Relative time expression.")
    when.add_argument(
        "--from",
        dest="start",
        default=None,
        metavar="DATETIME",
        # argparse %-formats help strings.
        help=f"Count from this instant (format: {TWEET_DATETIME_FORMAT.replace('%', '%%')!r}) instead of now.",
    )

    commands.add_parser("compose", help="Interactively compose a scheduled tweet.")
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_when(expression: str, start: str | None, stdout: TextIO) -> int:
    """Print the offset in seconds and the instant *expression* resolves to."""
    from tweetr.core.outcome import FileParsingFailed
    from tweetr.core.relative_time import instant_after, parse_relative_time
    from tweetr.exceptions import RelativeTimeParseError
    from tweetr.utils.timing import parse_tweet_datetime

    now = None
    if start is not None:
        try:
            now = parse_tweet_datetime(start)
        except ValueError as exc:
            raise OutcomeError(
                FileParsingFailed(
                    "start datetime",
                    (f'"{start}" does not match "{TWEET_DATETIME_FORMAT}"',),
                )
            ) from exc

    try:
        seconds = parse_relative_time(expression)
        instant = instant_after(seconds, now, expression=expression)
    except RelativeTimeParseError as exc:
        errors = [str(exc)]
        if exc.hint:
            errors.append(exc.hint)
        raise OutcomeError(FileParsingFailed("relative time expression", tuple(errors))) from exc

    stdout.write(f"{seconds}\n{instant.isoformat()}\n")
    return exit_codes.SUCCESS


def _fits_tweet(text: str) -> bool:
    return 0 < len(text) <= TWEET_MAX_LENGTH


def _handle_compose(stdin: TextIO, stdout: TextIO) -> int:
    """Prompt for a tweet body, a post time and an optional reply target.

    Flow:
    1. Multi-line body, re-prompted until it fits in one tweet.
    2. Relative post time, re-prompted until it resolves to an instant.
    3. Optional numeric id of the tweet being replied to.
    4. Print the composed tweet and when it would be posted.
    """
    from tweetr.cli.prompt import prompt_any_len, prompt_multiline, prompt_nonzero_len
    from tweetr.core.relative_time import is_resolvable_relative_time, resolve_relative_time

    content = prompt_multiline(stdin, stdout, "Tweet content", _fits_tweet)
    when = prompt_nonzero_len(
        stdin, stdout, "Post (now / in <N> <unit>)", is_resolvable_relative_time,
    )
    reply_to = prompt_any_len(
        stdin, stdout, "In reply to (tweet ID, optional)", lambda s: s.isascii() and s.isdigit(),
    )

    post_at = resolve_relative_time(when)
    stdout.write("\n")
    stdout.write(f"{content}\n")
    stdout.write(f"-- {len(content)}/{TWEET_MAX_LENGTH} characters, posting at {post_at.isoformat()}")
    if reply_to is not None:
        stdout.write(f" in reply to {reply_to}")
    stdout.write("\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the tweetr CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin, stdout:
        Streams used for prompts and command output; default to the
        process streams.  Accepting them enables deterministic testing
        without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "when":
        elapsed, code = timed(lambda: _handle_when(args.expression, args.start, stdout))
    else:
        elapsed, code = timed(lambda: _handle_compose(stdin, stdout))

    logger.debug("%s finished in %.3fs", args.command, elapsed.total_seconds())
    return code


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except OutcomeError as exc:
        exc.outcome.print(sys.stderr)
        sys.exit(exc.outcome.exit_code())
    except TweetrError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unhandled exception", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
