"""Shared utilities: small helpers with no business logic.

Rules
-----
* No I/O.
* Importable by any layer.
"""

from tweetr.utils.text import repeat_str
from tweetr.utils.timing import TWEET_DATETIME_FORMAT, parse_tweet_datetime, timed

__all__: list[str] = [
    "TWEET_DATETIME_FORMAT",
    "parse_tweet_datetime",
    "repeat_str",
    "timed",
]
