"""
Playwright-backed document snapshot.
Every query goes to the live page, so each call sees the current DOM.
"""

import re
from typing import Optional, List
from playwright.async_api import Locator, Page, TimeoutError as PlaywrightTimeoutError

from ..models import ElementKind, VerifierConfig
from ..resolver.snapshot import DocumentSnapshot, SnapshotElement


class LocatorElement(SnapshotElement):
    """Snapshot element backed by a Playwright locator."""

    def __init__(
        self,
        locator: Locator,
        kind: Optional[ElementKind],
        text_field_selector: str = "textarea",
        read_timeout_ms: int = 1000,
    ):
        self.locator = locator
        self.kind = kind
        self.text_field_selector = text_field_selector
        self.read_timeout_ms = read_timeout_ms

    async def read_value(self) -> str:
        if self.kind in (ElementKind.TEXT_INPUT, ElementKind.READ_ONLY):
            return await self.locator.input_value(timeout=self.read_timeout_ms)
        return await self.locator.inner_text(timeout=self.read_timeout_ms)

    async def ancestors(self, max_depth: int) -> List[SnapshotElement]:
        chain = self.locator.locator(f"xpath=ancestor::*[position()<={max_depth}]")
        count = await chain.count()

        # Matches come back in document order, outermost first
        return [self._child(chain.nth(i), None) for i in reversed(range(count))]

    async def text_fields(self) -> List[SnapshotElement]:
        fields = self.locator.locator(self.text_field_selector)
        count = await fields.count()
        return [self._child(fields.nth(i), ElementKind.TEXT_INPUT) for i in range(count)]

    def _child(self, locator: Locator, kind: Optional[ElementKind]) -> "LocatorElement":
        return LocatorElement(locator, kind, self.text_field_selector, self.read_timeout_ms)

    def __repr__(self):
        return f"LocatorElement({self.locator!r}, kind={self.kind})"


class PageSnapshot(DocumentSnapshot):
    """Document snapshot over a live Playwright page."""

    def __init__(
        self,
        page: Page,
        text_field_selector: str = "textarea",
        editable_selector: str = '[contenteditable="true"]',
        read_timeout_ms: int = 1000,
    ):
        self.page = page
        self.text_field_selector = text_field_selector
        self.editable_selector = editable_selector
        self.read_timeout_ms = read_timeout_ms

    @classmethod
    def from_config(cls, page: Page, config: VerifierConfig) -> "PageSnapshot":
        return cls(
            page,
            text_field_selector=config.text_field_selector,
            editable_selector=config.editable_selector,
        )

    async def text_fields(self) -> List[SnapshotElement]:
        return await self._collect(self.text_field_selector, ElementKind.TEXT_INPUT)

    async def editable_regions(self) -> List[SnapshotElement]:
        return await self._collect(self.editable_selector, ElementKind.EDITABLE)

    async def find_label(self, pattern: re.Pattern, timeout_ms: int) -> Optional[SnapshotElement]:
        label = self.page.get_by_text(pattern).first
        try:
            await label.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError:
            return None
        return self._element(label, None)

    async def _collect(self, selector: str, kind: ElementKind) -> List[SnapshotElement]:
        locator = self.page.locator(selector)
        count = await locator.count()
        return [self._element(locator.nth(i), kind) for i in range(count)]

    def _element(self, locator: Locator, kind: Optional[ElementKind]) -> LocatorElement:
        return LocatorElement(locator, kind, self.text_field_selector, self.read_timeout_ms)
