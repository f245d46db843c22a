"""
Unit tests for scenario execution without a browser.
"""

import asyncio

from verifier.models import Suite, VerifierConfig
from verifier.runner import run_scenario, run_scenarios
from verifier.scenarios import scenarios_by_id


class UnavailableContexts:
    """Browser manager whose contexts cannot be created."""

    def __init__(self):
        self.closed = []

    async def create_context(self):
        raise RuntimeError("Browser has been closed")

    async def close_context(self, context):
        self.closed.append(context)


class TestContextFailure:

    def test_recorded_on_outcome(self):
        manager = UnavailableContexts()
        scenario = scenarios_by_id(Suite.MOCK)["Pos_Fun_0001"]

        outcome = asyncio.run(run_scenario(manager, scenario, VerifierConfig(report_file=None)))

        assert not outcome.passed
        assert outcome.error == "Browser has been closed"
        assert outcome.duration_seconds is not None
        assert manager.closed == []

    def test_run_continues_with_next_scenario(self):
        mock = scenarios_by_id(Suite.MOCK)
        scenarios = [mock["Pos_Fun_0001"], mock["Neg_Fun_0001"]]

        outcomes = asyncio.run(run_scenarios(UnavailableContexts(), scenarios, VerifierConfig(report_file=None)))

        assert [o.scenario.id for o in outcomes] == ["Pos_Fun_0001", "Neg_Fun_0001"]
        assert all(o.error for o in outcomes)
