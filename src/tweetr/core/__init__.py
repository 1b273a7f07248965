"""Core layer: pure parsing and outcome modelling.

Rules
-----
* No ``print()`` calls; output goes to a writer supplied by the caller.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from tweetr.core.outcome import (
    FileParsingFailed,
    NoError,
    Outcome,
    OverrideNoForce,
    RequiredDataFromSubsystemNonexistant,
    RequiredFileFromSubsystemNonexistant,
    TwitterAPIError,
)
from tweetr.core.relative_time import (
    is_relative_time,
    parse_relative_time,
    relative_timedelta,
    resolve_relative_time,
)

__all__: list[str] = [
    "FileParsingFailed",
    "NoError",
    "Outcome",
    "OverrideNoForce",
    "RequiredDataFromSubsystemNonexistant",
    "RequiredFileFromSubsystemNonexistant",
    "TwitterAPIError",
    "is_relative_time",
    "parse_relative_time",
    "relative_timedelta",
    "resolve_relative_time",
]
