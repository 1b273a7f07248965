"""Relative time grammar.

Two forms are recognised, case-insensitively, and must cover the whole
input:

* ``now``: the current instant (zero seconds);
* ``in <N> <unit>[s]``: *N* ASCII decimal digits, *unit* one of
  ``second``, ``minute``, ``hour``, ``day`` or ``week``, tokens separated
  by single spaces.

Everything else raises :class:`~tweetr.exceptions.RelativeTimeParseError`;
expressions that parse but cannot be turned into a ``timedelta`` or an
instant raise its subclass :class:`~tweetr.exceptions.RelativeTimeRangeError`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from tweetr.exceptions import RelativeTimeParseError, RelativeTimeRangeError

logger = logging.getLogger(__name__)

NOW_KEYWORD: str = "now"
FUTURE_KEYWORD: str = "in"

UNIT_SECONDS: dict[str, int] = {
    "second": 1,
    "minute": 60,
    "hour": 60 * 60,
    "day": 60 * 60 * 24,
    "week": 60 * 60 * 24 * 7,
}
"""Seconds per supported unit, keyed by the singular unit name."""


def _parse_count(token: str) -> int | None:
    # str.isdigit() alone also admits non-ASCII digits such as "²".
    if not token or not token.isascii() or not token.isdigit():
        return None
    return int(token)


def _parse_unit(token: str) -> int | None:
    if token in UNIT_SECONDS:
        return UNIT_SECONDS[token]
    if token.endswith("s") and token[:-1] in UNIT_SECONDS:
        return UNIT_SECONDS[token[:-1]]
    return None


def parse_relative_time(text: str) -> int:
    """Parse a relative time expression into a number of seconds.

    >>> parse_relative_time("now")
    0
    >>> parse_relative_time("in 5 MINUTES")
    300

    Raises
    ------
    RelativeTimeParseError
        When *text* does not match either form in its entirety.
    """
    lowered = text.lower()
    if lowered == NOW_KEYWORD:
        return 0

    tokens = lowered.split(" ")
    if len(tokens) == 3 and tokens[0] == FUTURE_KEYWORD:
        count = _parse_count(tokens[1])
        multiplier = _parse_unit(tokens[2])
        if count is not None and multiplier is not None:
            return count * multiplier

    logger.debug("Rejected relative time expression %r", text)
    raise RelativeTimeParseError(text)


def is_relative_time(text: str) -> bool:
    """Validator form of :func:`parse_relative_time`, usable by prompts."""
    try:
        parse_relative_time(text)
    except RelativeTimeParseError:
        return False
    return True


def _to_timedelta(seconds: int, text: str) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except OverflowError as exc:
        logger.debug("Relative time expression %r out of range", text)
        raise RelativeTimeRangeError(text) from exc


def relative_timedelta(text: str) -> timedelta:
    """Parse *text* and return the offset as a :class:`~datetime.timedelta`.

    Raises
    ------
    RelativeTimeParseError
        When *text* does not parse.
    RelativeTimeRangeError
        When the offset is too large for a ``timedelta``.
    """
    return _to_timedelta(parse_relative_time(text), text)


def instant_after(seconds: int, now: datetime | None = None, *, expression: str) -> datetime:
    """Return the instant *seconds* after *now* (default: current UTC time).

    *expression* is the text the offset was parsed from; it is reported
    in the :class:`RelativeTimeRangeError` raised when the result falls
    outside the representable datetime range.
    """
    base = now if now is not None else datetime.now(timezone.utc)
    delta = _to_timedelta(seconds, expression)
    try:
        return base + delta
    except OverflowError as exc:
        logger.debug("Relative time expression %r lands past %s", expression, datetime.max.year)
        raise RelativeTimeRangeError(expression) from exc


def resolve_relative_time(text: str, now: datetime | None = None) -> datetime:
    """Return the absolute instant *text* refers to, counted from *now*.

    *now* defaults to the current UTC time.
    """
    return instant_after(parse_relative_time(text), now, expression=text)


def is_resolvable_relative_time(text: str) -> bool:
    """Validator accepting expressions that parse *and* resolve from now."""
    try:
        resolve_relative_time(text)
    except RelativeTimeParseError:
        return False
    return True
