"""
Browser manager for Playwright.
Handles browser lifecycle and hands out one fresh context per scenario.
"""

from typing import Optional, List
from playwright.async_api import async_playwright, Browser, Playwright, BrowserContext

from ..models import VerifierConfig
from ..utils import get_logger


class BrowserManager:
    """
    Manages Playwright browser lifecycle.
    Scenarios never share a context; each gets a fresh one.
    """

    def __init__(self, config: VerifierConfig):
        self.config = config
        self.logger = get_logger()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._active_contexts: List[BrowserContext] = []

    async def start(self):
        """Initialize Playwright and launch browser."""
        self.logger.info("Starting browser manager...")

        try:
            self._playwright = await async_playwright().start()

            self._browser = await self._playwright.chromium.launch(
                headless=self.config.headless,
                args=[
                    '--no-sandbox',
                    '--disable-dev-shm-usage',
                ]
            )

            self.logger.info(
                f"Browser launched (headless={self.config.headless})"
            )

        except Exception as e:
            self.logger.error(f"Failed to start browser: {e}", exc_info=True)
            await self.stop()
            raise

    async def stop(self):
        """Close browser and cleanup."""
        self.logger.debug("Stopping browser manager...")

        for context in self._active_contexts:
            try:
                await context.close()
            except Exception as e:
                self.logger.warning(f"Error closing context: {e}")

        self._active_contexts.clear()

        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                self.logger.warning(f"Error closing browser: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as e:
                self.logger.warning(f"Error stopping playwright: {e}")
            self._playwright = None

        self.logger.debug("Browser manager stopped")

    async def create_context(self) -> BrowserContext:
        """Create a new, isolated browser context."""
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {
            'viewport': {'width': 1280, 'height': 800},
            'locale': self.config.locale,
        }
        if self.config.user_agent:
            context_options['user_agent'] = self.config.user_agent

        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.config.page_timeout_ms)

        self._active_contexts.append(context)
        self.logger.debug(f"Created browser context ({len(self._active_contexts)} active)")

        return context

    async def close_context(self, context: BrowserContext):
        """Close a browser context."""
        try:
            await context.close()
        finally:
            if context in self._active_contexts:
                self._active_contexts.remove(context)

            self.logger.debug(f"Closed browser context ({len(self._active_contexts)} active)")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()
