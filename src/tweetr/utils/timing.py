"""Time-related helpers: timing a callable and Twitter's datetime format."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import TypeVar

R = TypeVar("R")

TWEET_DATETIME_FORMAT: str = "%a %b %d %H:%M:%S %z %Y"
"""The datetime format returned by Twitter when posting.

E.g. ``"Mon Sep 05 20:30:51 +0000 2016"``.
"""


def parse_tweet_datetime(text: str) -> datetime:
    """Parse *text* in :data:`TWEET_DATETIME_FORMAT` into an aware datetime.

    Raises ``ValueError`` when *text* does not match the format.
    """
    return datetime.strptime(text, TWEET_DATETIME_FORMAT)


def timed(fn: Callable[[], R]) -> tuple[timedelta, R]:
    """Run *fn* and return how long it took together with its return value."""
    start = time.perf_counter()
    result = fn()
    elapsed = time.perf_counter() - start
    return timedelta(seconds=elapsed), result
