"""
Integration tests against the mocked translator page in a real browser.
"""

import re

import pytest

from verifier.browser import PageSnapshot, TranslatorContext
from verifier.mock_page import INPUT_SELECTOR, MOCK_TRANSLATOR_HTML, OUTPUT_SELECTOR
from verifier.models import ResolutionStrategy, Suite
from verifier.runner import run_scenarios
from verifier.scenarios import mock_scenarios, scenarios_by_id

pytestmark = pytest.mark.browser


LABELLED_HTML = """<!DOCTYPE html>
<html>
  <body>
    <div class="panel">
      <span>Singlish</span>
      <textarea id="src">mama</textarea>
    </div>
    <div class="panel">
      <span>Sinhala</span>
      <textarea id="dst" readonly>මම</textarea>
    </div>
  </body>
</html>
"""


async def open_mock(manager, config):
    context = await manager.create_context()
    translator = TranslatorContext(context, config, scenario_id="mock")
    await translator.load_html(MOCK_TRANSLATOR_HTML)
    return context, translator


class TestMockPageResolution:

    def test_resolves_translated_output(self, with_browser, browser_config):
        async def body(manager):
            context, translator = await open_mock(manager, browser_config)
            try:
                await translator.fill_input("mama paadamak karanavaa", INPUT_SELECTOR)
                return await translator.resolve_output("mama paadamak karanavaa")
            finally:
                await translator.close()
                await manager.close_context(context)

        result = with_browser(browser_config, body)

        assert result.text == "Translated: mama paadamak karanavaa"
        assert result.strategy == ResolutionStrategy.DISTINCT_VALUE

    def test_clearing_input_gives_empty_output(self, with_browser, browser_config):
        async def body(manager):
            context, translator = await open_mock(manager, browser_config)
            try:
                await translator.fill_input("mama paadamak karanavaa", INPUT_SELECTOR)
                await translator.settle()
                await translator.fill_input("", INPUT_SELECTOR)
                return (
                    await translator.resolve_output(""),
                    await translator.read_value(OUTPUT_SELECTOR),
                )
            finally:
                await translator.close()
                await manager.close_context(context)

        result, raw = with_browser(browser_config, body)

        assert result.text == ""
        assert not result.resolved
        assert raw == ""

    def test_typed_input_updates_output(self, with_browser, browser_config):
        async def body(manager):
            context, translator = await open_mock(manager, browser_config)
            try:
                await translator.type_input("api", INPUT_SELECTOR)
                return await translator.resolve_output("api")
            finally:
                await translator.close()
                await manager.close_context(context)

        result = with_browser(browser_config, body)

        assert result.text == "Translated: api"

    def test_snapshot_sees_both_fields(self, with_browser, browser_config):
        async def body(manager):
            context, translator = await open_mock(manager, browser_config)
            try:
                snapshot = translator.snapshot()
                return len(await snapshot.text_fields()), len(await snapshot.editable_regions())
            finally:
                await translator.close()
                await manager.close_context(context)

        assert with_browser(browser_config, body) == (2, 0)

    def test_read_field_out_of_range(self, with_browser, browser_config):
        async def body(manager):
            context, translator = await open_mock(manager, browser_config)
            try:
                return await translator.read_field(5)
            finally:
                await translator.close()
                await manager.close_context(context)

        assert with_browser(browser_config, body) == ""


class TestPageSnapshot:

    def test_label_and_ancestors(self, with_browser, browser_config):
        async def body(manager):
            context = await manager.create_context()
            translator = TranslatorContext(context, browser_config)
            try:
                page = await translator.load_html(LABELLED_HTML)
                snapshot = PageSnapshot(page)

                label = await snapshot.find_label(re.compile("sinhala", re.IGNORECASE), 1000)
                ancestors = await label.ancestors(5)
                fields = await ancestors[0].text_fields()
                return await fields[0].read_value()
            finally:
                await translator.close()
                await manager.close_context(context)

        assert with_browser(browser_config, body) == "මම"

    def test_missing_label_is_none(self, with_browser, browser_config):
        async def body(manager):
            context, translator = await open_mock(manager, browser_config)
            try:
                return await translator.snapshot().find_label(re.compile("Sinhala"), 100)
            finally:
                await translator.close()
                await manager.close_context(context)

        assert with_browser(browser_config, body) is None


class TestMockSuite:

    def test_all_mock_scenarios_pass(self, with_browser, browser_config):
        async def body(manager):
            return await run_scenarios(manager, mock_scenarios(), browser_config)

        outcomes = with_browser(browser_config, body)

        failures = [(o.scenario.id, o.error or o.message) for o in outcomes if not o.passed]
        assert failures == []
        assert len(outcomes) == 36

    def test_ui_scenarios(self, with_browser, browser_config):
        scenarios = scenarios_by_id(Suite.MOCK)

        async def body(manager):
            return await run_scenarios(
                manager, [scenarios["Pos_UI_0001"], scenarios["Pos_UI_0002"]], browser_config
            )

        typing, clearing = with_browser(browser_config, body)

        assert typing.passed
        assert typing.actual.endswith(" heta")
        assert clearing.passed
        assert clearing.actual == ""
