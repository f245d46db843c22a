"""
Isolated browser context wrapper.
Provides page loading, input submission and output reading for one scenario.
"""

import asyncio
from typing import Optional
from playwright.async_api import BrowserContext, Page, Locator, TimeoutError as PlaywrightTimeoutError

from .snapshot import PageSnapshot
from ..models import VerifierConfig, ResolutionResult
from ..resolver import OutputResolver
from ..utils import get_logger


class PageLoadError(RuntimeError):
    """Raised when the page under test cannot be loaded."""


class TranslatorContext:
    """
    Wrapper around Playwright BrowserContext for a single scenario.
    Provides navigation, retry logic, and debug capabilities.
    """

    def __init__(self, context: BrowserContext, config: VerifierConfig, scenario_id: str = "scenario"):
        self.context = context
        self.config = config
        self.scenario_id = scenario_id
        self.logger = get_logger()
        self.resolver = OutputResolver.from_config(config)

        self._current_page: Optional[Page] = None

    async def open_translator(self, url: Optional[str] = None) -> Page:
        """
        Navigate to the translator with retry logic and wait until the input
        surface is visible.

        Raises:
            PageLoadError: if the page cannot be loaded after all attempts
        """
        url = url or self.config.translator_url
        last_error: Optional[Exception] = None

        for attempt in range(self.config.retry_attempts):
            try:
                if not self._current_page:
                    self._current_page = await self.context.new_page()

                self.logger.debug(f"Navigating to {url} (attempt {attempt + 1})")

                response = await self._current_page.goto(
                    url,
                    wait_until="domcontentloaded",
                    timeout=self.config.page_timeout_ms
                )

                if response and response.status >= 400:
                    raise PageLoadError(f"HTTP {response.status} for {url}")

                await self._current_page.wait_for_load_state(
                    "networkidle",
                    timeout=self.config.page_timeout_ms
                )
                await self.input_locator().wait_for(
                    state="visible",
                    timeout=self.config.page_timeout_ms
                )

                self.logger.debug(f"Successfully loaded {url}")
                return self._current_page

            except (PlaywrightTimeoutError, PageLoadError) as e:
                last_error = e
                self.logger.warning(f"Failed loading {url} (attempt {attempt + 1}): {e}")
                if attempt < self.config.retry_attempts - 1:
                    await asyncio.sleep(2 ** attempt)  # Exponential backoff

        await self.save_debug_info("load_failed")
        raise PageLoadError(f"Could not load {url}: {last_error}")

    async def load_html(self, html: str) -> Page:
        """Load an in-process HTML document (no network)."""
        if not self._current_page:
            self._current_page = await self.context.new_page()

        await self._current_page.set_content(html)
        return self._current_page

    def input_locator(self) -> Locator:
        """The input surface: first text field on the page."""
        return self._require_page().locator(self.config.input_selector).first

    async def fill_input(self, text: str, selector: Optional[str] = None):
        locator = self._require_page().locator(selector).first if selector else self.input_locator()
        await locator.fill(text)

    async def type_input(self, text: str, selector: Optional[str] = None, delay_ms: Optional[int] = None):
        """Type text key by key, firing input events for each character."""
        locator = self._require_page().locator(selector).first if selector else self.input_locator()
        delay = self.config.type_delay_ms if delay_ms is None else delay_ms
        await locator.press_sequentially(text, delay=delay)

    async def settle(self, ms: Optional[int] = None):
        """Give the page time to react to input."""
        wait = self.config.settle_ms if ms is None else ms
        if wait > 0:
            await self._require_page().wait_for_timeout(wait)

    def snapshot(self) -> PageSnapshot:
        return PageSnapshot.from_config(self._require_page(), self.config)

    async def resolve_output(self, input_text: str, settle_ms: Optional[int] = None) -> ResolutionResult:
        """Wait for the page to settle, then run the output resolver."""
        await self.settle(settle_ms)
        return await self.resolver.resolve(self.snapshot(), input_text)

    async def read_field(self, index: int, selector: Optional[str] = None) -> str:
        """
        Read the value of the index-th field matching selector.

        Returns "" when fewer fields exist or the read fails.
        """
        fields = self._require_page().locator(selector or self.config.text_field_selector)
        if await fields.count() <= index:
            return ""

        try:
            return await fields.nth(index).input_value(timeout=self.config.page_timeout_ms)
        except PlaywrightTimeoutError:
            return ""

    async def read_value(self, selector: str) -> str:
        """Read the value of a known element."""
        return await self._require_page().locator(selector).input_value()

    async def is_visible(self, selector: str) -> bool:
        return await self._require_page().locator(selector).is_visible()

    async def get_page_content(self) -> Optional[str]:
        """Get current page HTML content."""
        if not self._current_page:
            return None

        try:
            return await self._current_page.content()
        except Exception as e:
            self.logger.error(f"Error getting page content: {e}")
            return None

    async def screenshot(self) -> Optional[bytes]:
        """Take a screenshot of the current page."""
        if not self._current_page:
            return None

        try:
            return await self._current_page.screenshot(full_page=True)
        except Exception as e:
            self.logger.error(f"Error taking screenshot: {e}")
            return None

    async def save_debug_info(self, reason: str):
        """Save debug information (screenshot + HTML) for the current page."""
        if not self.config.debug_mode or not self._current_page:
            return

        try:
            if self.config.debug_save_screenshots:
                screenshot_data = await self.screenshot()
                if screenshot_data:
                    self.logger.save_debug_screenshot(screenshot_data, self.scenario_id, reason)

            if self.config.debug_save_html:
                html = await self.get_page_content()
                if html:
                    self.logger.save_debug_html(html, self.scenario_id, reason)

        except Exception as e:
            self.logger.error(f"Error saving debug info: {e}")

    async def close(self):
        """Close current page."""
        if self._current_page:
            try:
                await self._current_page.close()
            except Exception as e:
                self.logger.warning(f"Error closing page: {e}")

            self._current_page = None

    def _require_page(self) -> Page:
        if not self._current_page:
            raise RuntimeError("No page loaded. Call open_translator() or load_html() first.")
        return self._current_page

    @property
    def page(self) -> Optional[Page]:
        """Get current page object."""
        return self._current_page
