"""Tests for the termination-outcome taxonomy (core/outcome.py).

Each variant must render its exact message and map to a fixed exit
code; only :class:`NoError` exits with zero.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

import pytest

from tweetr import exit_codes
from tweetr.core.outcome import (
    FileParsingFailed,
    NoError,
    Outcome,
    OverrideNoForce,
    RequiredDataFromSubsystemNonexistant,
    RequiredFileFromSubsystemNonexistant,
    TwitterAPIError,
)
from tweetr.exceptions import OutcomeError, TweetrError


def _printed(outcome: Outcome) -> str:
    out = io.StringIO()
    outcome.print(out)
    return out.getvalue()


ALL_VARIANTS: list[Outcome] = [
    NoError(),
    OverrideNoForce("queue.toml"),
    RequiredFileFromSubsystemNonexistant("init", "app.toml"),
    RequiredDataFromSubsystemNonexistant("init", "authorise the app"),
    TwitterAPIError("Rate limit exceeded"),
    FileParsingFailed("queue.toml", ("line 3: bad date",)),
]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

class TestPrint:
    def test_no_error_writes_nothing(self) -> None:
        assert _printed(NoError()) == ""

    def test_override_no_force(self) -> None:
        assert _printed(OverrideNoForce("doctest")) == (
            'File "doctest" was not overriden to prevent data loss.\n'
            "Pass --force to override it.\n"
        )

    def test_required_file(self) -> None:
        outcome = RequiredFileFromSubsystemNonexistant("init", "tweetr.toml")
        assert _printed(outcome) == 'Run the init subsystem first to produce "tweetr.toml".\n'

    def test_required_data(self) -> None:
        outcome = RequiredDataFromSubsystemNonexistant("init", "get an access token")
        assert _printed(outcome) == "Run the init subsystem first to get an access token.\n"

    def test_twitter_api_error(self) -> None:
        assert _printed(TwitterAPIError("Status is a duplicate.")) == (
            "Twitter API error: Status is a duplicate.\n"
        )

    def test_file_parsing_failed_without_errors(self) -> None:
        assert _printed(FileParsingFailed("tweets file")) == "Failed to parse tweets file.\n"

    def test_file_parsing_failed_with_errors(self) -> None:
        outcome = FileParsingFailed("tweets file", ("missing content", "bad time"))
        assert _printed(outcome) == (
            "Failed to parse tweets file:\n"
            "  missing content\n"
            "  bad time\n"
        )

    @pytest.mark.parametrize("outcome", ALL_VARIANTS, ids=lambda o: type(o).__name__)
    def test_render_matches_print(self, outcome: Outcome) -> None:
        assert outcome.render() == _printed(outcome)


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCode:
    @pytest.mark.parametrize(
        ("outcome", "code"),
        [
            (NoError(), 0),
            (OverrideNoForce("f"), 1),
            (RequiredFileFromSubsystemNonexistant("s", "f"), 2),
            (RequiredDataFromSubsystemNonexistant("s", "d"), 2),
            (TwitterAPIError("m"), 3),
            (FileParsingFailed("d", ()), 4),
            (FileParsingFailed("d", ("e",)), 4),
        ],
        ids=lambda v: type(v).__name__ if isinstance(v, Outcome) else str(v),
    )
    def test_codes(self, outcome: Outcome, code: int) -> None:
        assert outcome.exit_code() == code

    @pytest.mark.parametrize("outcome", ALL_VARIANTS, ids=lambda o: type(o).__name__)
    def test_only_no_error_is_success(self, outcome: Outcome) -> None:
        assert outcome.is_success == isinstance(outcome, NoError)
        assert (outcome.exit_code() == exit_codes.SUCCESS) == isinstance(outcome, NoError)


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------

class TestValueSemantics:
    def test_equality(self) -> None:
        assert OverrideNoForce("a") == OverrideNoForce("a")
        assert OverrideNoForce("a") != OverrideNoForce("b")

    def test_frozen(self) -> None:
        outcome = TwitterAPIError("m")
        with pytest.raises(AttributeError):
            outcome.message = "changed"  # type: ignore[misc]

    def test_errors_stored_as_tuple(self) -> None:
        outcome = FileParsingFailed("d", ["a", "b"])  # type: ignore[arg-type]
        assert outcome.errors == ("a", "b")
        hash(outcome)

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Outcome()  # type: ignore[abstract]

    def test_variant_must_define_exit_code(self) -> None:
        class Incomplete(Outcome):
            def _lines(self) -> Sequence[str]:
                return ("incomplete",)

        with pytest.raises(TypeError):
            Incomplete()  # type: ignore[abstract]


# ---------------------------------------------------------------------------
# OutcomeError
# ---------------------------------------------------------------------------

class TestOutcomeError:
    def test_carries_outcome(self) -> None:
        outcome = TwitterAPIError("Over capacity")
        err = OutcomeError(outcome)
        assert err.outcome is outcome
        assert isinstance(err, TweetrError)

    def test_message_is_rendered_outcome(self) -> None:
        err = OutcomeError(OverrideNoForce("doctest"))
        assert str(err) == (
            'File "doctest" was not overriden to prevent data loss.\n'
            "Pass --force to override it."
        )
