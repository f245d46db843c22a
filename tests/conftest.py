"""
Pytest configuration and shared fixtures.
"""

import asyncio
import re

import pytest

from verifier.browser import BrowserManager
from verifier.models import VerifierConfig
from verifier.resolver import OutputResolver, Node, TreeSnapshot, textarea


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_addoption(parser):
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="run scenarios against the live translator site",
    )


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "browser: needs a Chromium browser")
    config.addinivalue_line("markers", "network: needs the live translator site")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-live"):
        return

    skip_live = pytest.mark.skip(reason="live site tests need --run-live")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_live)


# ============================================================================
# Resolver Fixtures
# ============================================================================


@pytest.fixture
def resolver():
    """Resolver with the default label and no label wait."""
    return OutputResolver(label_timeout_ms=0)


@pytest.fixture
def labelled_page():
    """
    Two-panel page: Singlish input on the left, Sinhala output on the right.

    body
      section  "Singlish" label + input textarea
      section  "Sinhala" label + read-only output textarea
    """
    def build(input_value: str, output_value: str) -> TreeSnapshot:
        return TreeSnapshot(Node(tag="body", children=[
            Node(tag="section", children=[
                Node(tag="label", text="Singlish"),
                textarea(input_value),
            ]),
            Node(tag="section", children=[
                Node(tag="label", text="Sinhala"),
                textarea(output_value, read_only=True),
            ]),
        ]))
    return build


@pytest.fixture
def sinhala_label():
    return re.compile("Sinhala", re.IGNORECASE)


# ============================================================================
# Browser Fixtures
# ============================================================================


@pytest.fixture
def browser_config():
    """Fast settings for the mocked page."""
    return VerifierConfig(
        settle_ms=50,
        label_timeout_ms=200,
        type_delay_ms=10,
        page_timeout_ms=10000,
        retry_attempts=1,
        report_file=None,
    )


@pytest.fixture
def live_config():
    """Default timings for the live translator."""
    return VerifierConfig(report_file=None)


_BROWSER_UNAVAILABLE = object()


@pytest.fixture
def with_browser():
    """
    Run an async body with a started BrowserManager.

    Skips the test when Chromium cannot be launched.
    """
    def runner(config: VerifierConfig, body):
        async def main():
            manager = BrowserManager(config)
            try:
                await manager.start()
            except Exception as e:
                return _BROWSER_UNAVAILABLE, str(e)

            try:
                return await body(manager)
            finally:
                await manager.stop()

        result = asyncio.run(main())
        if isinstance(result, tuple) and result and result[0] is _BROWSER_UNAVAILABLE:
            pytest.skip(f"Chromium unavailable: {result[1]}")
        return result

    return runner
