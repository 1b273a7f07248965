"""String helpers."""

from __future__ import annotations


def repeat_str(what: str, n: int) -> str:
    """Return a string consisting of *n* repetitions of *what*.

    >>> repeat_str("Го! ", 3)
    'Го! Го! Го! '
    """
    return what * max(n, 0)
