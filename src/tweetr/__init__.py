"""tweetr: interactive tweet composition and scheduling helpers.

Provides the prompting protocol, the relative-time grammar and the
termination-outcome taxonomy used by the ``tweetr`` command-line tool.
"""

from tweetr.version import __version__

__all__: list[str] = ["__version__"]
