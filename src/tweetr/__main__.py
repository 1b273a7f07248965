"""Allow ``python -m tweetr`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m tweetr`` behaves identically to the ``tweetr`` console
script.
"""

from __future__ import annotations

from tweetr.cli.app import cli

if __name__ == "__main__":
    cli()
