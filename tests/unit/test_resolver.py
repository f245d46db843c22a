"""
Unit tests for the output resolver cascade.
"""

import asyncio

import pytest

from verifier.checks import Observation, evaluate
from verifier.models import ResolutionStrategy, Suite
from verifier.resolver import (
    Node,
    OutputResolver,
    TreeSnapshot,
    editable,
    resolve_output,
    textarea,
)
from verifier.scenarios import scenarios_by_id


def resolve(resolver, snapshot, input_record):
    return asyncio.run(resolver.resolve(snapshot, input_record))


class TestTwoFieldPage:
    """The common input/output layout."""

    def test_returns_second_field_when_it_differs(self, resolver):
        snapshot = TreeSnapshot.of_fields("mama", "මම")

        result = resolve(resolver, snapshot, "mama")

        assert result.text == "මම"
        assert result.strategy == ResolutionStrategy.DISTINCT_VALUE
        assert result.resolved

    @pytest.mark.parametrize("output", [
        "Translated: mama paadamak karanavaa",
        "මම පාඩමක් කරනවා",
        "mama paadamak karanavaa ",
    ])
    def test_second_field_wins_for_any_differing_output(self, resolver, output):
        snapshot = TreeSnapshot.of_fields("mama paadamak karanavaa", output)

        assert resolve(resolver, snapshot, "mama paadamak karanavaa").text == output

    def test_cleared_input_and_output_is_unresolved(self, resolver):
        snapshot = TreeSnapshot.of_fields("", "")

        result = resolve(resolver, snapshot, "")

        assert result.text == ""
        assert result.strategy == ResolutionStrategy.UNRESOLVED
        assert not result.resolved

    def test_never_populated_input_is_not_an_error(self, resolver):
        snapshot = TreeSnapshot(Node(tag="body"))

        result = resolve(resolver, snapshot, "")

        assert result.text == ""


class TestEcho:
    """Output that repeats the input."""

    def test_echo_in_second_of_two_fields_comes_from_cardinality(self, resolver):
        snapshot = TreeSnapshot.of_fields("api heta dhuvamu", "api heta dhuvamu")

        result = resolve(resolver, snapshot, "api heta dhuvamu")

        assert result.text == "api heta dhuvamu"
        assert result.strategy == ResolutionStrategy.CARDINALITY

    def test_untranslatable_date_time_passes_through(self, resolver):
        text = "2026/01/31 12.00 P.M."
        scenario = scenarios_by_id(Suite.LIVE)["Neg_Fun_0007"]
        snapshot = TreeSnapshot.of_fields(text, text)

        result = resolve(resolver, snapshot, scenario.input)
        passed, message = evaluate(scenario, Observation(actual=result.text))

        assert passed, message
        assert result.strategy == ResolutionStrategy.CARDINALITY

    def test_content_scans_skip_echo(self, resolver):
        snapshot = TreeSnapshot.of_fields("mama", "mama", "mama")

        result = resolve(resolver, snapshot, "mama")

        assert result.text == ""
        assert result.strategy == ResolutionStrategy.UNRESOLVED

    def test_echo_skipped_for_later_editable_region(self, resolver):
        snapshot = TreeSnapshot(Node(tag="body", children=[
            textarea("mama"),
            textarea("mama"),
            textarea("mama"),
            editable("මම"),
        ]))

        result = resolve(resolver, snapshot, "mama")

        assert result.text == "මම"
        assert result.strategy == ResolutionStrategy.EDITABLE_REGION


class TestCascadeOrder:
    """Strategies run in a fixed order; the first answer wins."""

    def test_first_divergent_field_beats_sinhala_field(self, resolver):
        snapshot = TreeSnapshot.of_fields("mama", "Loading...", "මම")

        result = resolve(resolver, snapshot, "mama")

        assert result.text == "Loading..."
        assert result.strategy == ResolutionStrategy.DISTINCT_VALUE

    def test_strategy_order(self, resolver):
        assert list(resolver.strategy_names()) == [
            ResolutionStrategy.DISTINCT_VALUE,
            ResolutionStrategy.SCRIPT_SIGNATURE,
            ResolutionStrategy.LABEL_PROXIMITY,
            ResolutionStrategy.CARDINALITY,
            ResolutionStrategy.EDITABLE_REGION,
        ]

    def test_label_proximity_picks_blank_output_next_to_label(self, resolver, labelled_page):
        # Whitespace-only output is skipped by the content scans but not by
        # the label scan
        snapshot = labelled_page("mama", "  ")

        result = resolve(resolver, snapshot, "mama")

        assert result.text == "  "
        assert result.strategy == ResolutionStrategy.LABEL_PROXIMITY

    def test_rich_text_output(self, resolver):
        snapshot = TreeSnapshot(Node(tag="body", children=[
            editable("mama"),
            editable("මම"),
        ]))

        result = resolve(resolver, snapshot, "mama")

        assert result.text == "මම"
        assert result.strategy == ResolutionStrategy.EDITABLE_REGION


class TestFaultTolerance:

    def test_failed_read_is_treated_as_empty(self, resolver):
        snapshot = TreeSnapshot(Node(tag="body", children=[
            textarea("mama"),
            textarea("ignored", fail_reads=True),
            textarea("මම"),
        ]))

        assert resolve(resolver, snapshot, "mama").text == "මම"

    def test_all_reads_failing_is_unresolved(self, resolver):
        snapshot = TreeSnapshot(Node(tag="body", children=[
            textarea("mama", fail_reads=True),
            textarea("මම", fail_reads=True),
        ]))

        result = resolve(resolver, snapshot, "mama")

        assert result.text == ""
        assert result.strategy == ResolutionStrategy.UNRESOLVED


class TestStatelessness:

    def test_idempotent_on_unchanged_snapshot(self, resolver, labelled_page):
        snapshot = labelled_page("oyaata meeka lassanayidha?", "ඔයාට මේක ලස්සනයිද?")

        first = resolve(resolver, snapshot, "oyaata meeka lassanayidha?")
        second = resolve(resolver, snapshot, "oyaata meeka lassanayidha?")

        assert first == second

    def test_does_not_mutate_snapshot(self, resolver):
        fields = [textarea("mama"), textarea("මම"), editable("x")]
        snapshot = TreeSnapshot(Node(tag="body", children=fields))

        resolve(resolver, snapshot, "mama")

        assert [f.value or f.text for f in fields] == ["mama", "මම", "x"]

    def test_sees_changes_between_calls(self, resolver):
        output = textarea("")
        snapshot = TreeSnapshot(Node(tag="body", children=[textarea("mama"), output]))

        assert resolve(resolver, snapshot, "mama").text == ""

        output.value = "මම"
        assert resolve(resolver, snapshot, "mama").text == "මම"


class TestResolveOutput:

    def test_returns_plain_text(self):
        snapshot = TreeSnapshot.of_fields("mama", "මම")

        assert asyncio.run(resolve_output(snapshot, "mama", OutputResolver(label_timeout_ms=0))) == "මම"

    def test_from_config_uses_configured_label(self, labelled_page):
        from verifier.models import VerifierConfig

        resolver = OutputResolver.from_config(VerifierConfig(label_pattern="Singlish", label_timeout_ms=0))
        snapshot = labelled_page("  ", "mama")

        # Label scan near "Singlish" finds the blank input field first
        result = resolve(resolver, snapshot, "mama")

        assert result.text == "  "
        assert result.strategy == ResolutionStrategy.LABEL_PROXIMITY
