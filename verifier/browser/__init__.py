"""
Browser automation module.
Provides Playwright-based browser management and page access.
"""

from .manager import BrowserManager
from .context import TranslatorContext, PageLoadError
from .snapshot import PageSnapshot, LocatorElement

__all__ = [
    'BrowserManager',
    'TranslatorContext',
    'PageLoadError',
    'PageSnapshot',
    'LocatorElement',
]
