"""
Unit tests for scenario expectation checks.
"""

import pytest

from verifier.checks import Observation, evaluate
from verifier.models import CheckKind, Scenario, Suite


def scenario(check, expected=None, **kwargs):
    return Scenario(
        id="Pos_Fun_0001",
        title="Simple sentence",
        suite=Suite.LIVE,
        input="mama gammiris vaththata yanna hadhannee",
        expected=expected,
        check=check,
        **kwargs
    )


class TestEvaluate:

    def test_equals(self):
        s = scenario(CheckKind.EQUALS, "මම ගම්මිරිස් වත්තට යන්න හදන්නේ")

        assert evaluate(s, Observation(actual="මම ගම්මිරිස් වත්තට යන්න හදන්නේ"))[0]

        passed, message = evaluate(s, Observation(actual="මම"))
        assert not passed
        assert "expected" in message

    def test_not_equals(self):
        s = scenario(CheckKind.NOT_EQUALS, "මම රාජකාරියට යනවා")

        assert evaluate(s, Observation(actual="මම      රාජකාරියට        යනවා"))[0]
        assert not evaluate(s, Observation(actual="මම රාජකාරියට යනවා"))[0]

    def test_not_equals_passes_for_empty_output(self):
        s = scenario(CheckKind.NOT_EQUALS, "මම")

        assert evaluate(s, Observation(actual=""))[0]

    def test_not_empty(self):
        s = scenario(CheckKind.NOT_EMPTY)

        assert evaluate(s, Observation(actual="Translated: mama"))[0]
        assert not evaluate(s, Observation(actual=""))[0]

    def test_contains(self):
        s = scenario(CheckKind.CONTAINS, "මම")

        assert evaluate(s, Observation(actual="මම පාඩමක් කරනවා"))[0]
        assert not evaluate(s, Observation(actual="පාඩමක්"))[0]
        assert not evaluate(s, Observation(actual=""))[0]

    def test_matches(self):
        s = scenario(CheckKind.MATCHES, "Translated")

        assert evaluate(s, Observation(actual="Translated: oyaata meeka lassanayidha?"))[0]
        assert not evaluate(s, Observation(actual="oyaata"))[0]

    def test_visible(self):
        s = scenario(CheckKind.VISIBLE)

        assert evaluate(s, Observation(visible=True))[0]
        assert not evaluate(s, Observation(visible=False))[0]
        assert not evaluate(s, Observation())[0]

    def test_changes_on_append(self):
        s = scenario(CheckKind.CHANGES_ON_APPEND, append_text=" heta")

        assert evaluate(s, Observation(previous="Translated: mama", actual="Translated: mama heta"))[0]
        assert not evaluate(s, Observation(previous="Translated: mama", actual="Translated: mama"))[0]
        assert not evaluate(s, Observation(actual="Translated: mama"))[0]

    @pytest.mark.parametrize("previous,actual,passed", [
        ("Translated: api heta dhuvamu", "", True),
        ("Translated: api heta dhuvamu", "Translated: api", False),
        ("", "", False),
    ])
    def test_clears(self, previous, actual, passed):
        s = scenario(CheckKind.CLEARS, "")

        assert evaluate(s, Observation(previous=previous, actual=actual))[0] is passed
