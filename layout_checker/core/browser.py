"""Playwright collaborator layer.

Everything that touches a real browser lives here: launching an isolated
session, element existence, computed styles and the page-state helpers the
dark-scheme check applies before a screenshot. Checks only see the
PageHandle protocol, so tests can swap in a fake page.

The page scripts are module constants; a fake page dispatches on them.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from layout_checker.core.types import PageHandle

logger = logging.getLogger(__name__)

CLIENT_HEIGHT_GAP_JS = '(selector) => window.innerHeight - document.querySelector(selector).clientHeight'

COMPUTED_STYLE_JS = """([selector, properties]) => {
  const styles = window.getComputedStyle(document.querySelector(selector));
  return properties.map((property) => styles.getPropertyValue(property));
}"""

REMOVE_IMAGES_JS = "() => document.querySelectorAll('img').forEach((img) => img.remove())"

SCROLL_TO_END_JS = '() => window.scrollTo(0, Number.MAX_SAFE_INTEGER)'


@dataclass
class BrowserSession:
    """An isolated browser plus the page it opened."""

    browser: Any
    page: PageHandle


@asynccontextmanager
async def launch_browser(
    url: str,
    *,
    launch_args: Sequence[str] = (),
    viewport: dict[str, int] | None = None,
) -> AsyncIterator[BrowserSession]:
    """Launch headless Chromium, open url, yield the session, always close it.

    Navigation errors propagate after the browser has been closed.
    """
    from playwright.async_api import async_playwright

    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=True, args=list(launch_args))
        try:
            page = await browser.new_page(viewport=viewport)
            logger.debug('navigating to %s (viewport=%s)', url, viewport)
            await page.goto(url)
            yield BrowserSession(browser=browser, page=page)
        finally:
            await browser.close()
            logger.debug('closed browser for %s', url)


async def has_element_by_selectors(page: PageHandle, selector: str) -> bool:
    """True if at least one element matches selector."""
    return await page.query_selector(selector) is not None


async def get_style(page: PageHandle, selector: str, properties: Sequence[str]) -> list[str]:
    """Computed values of the first element matching selector, in request order."""
    values = await page.evaluate(COMPUTED_STYLE_JS, [selector, list(properties)])
    return [str(v) for v in values]


async def client_height_gap(page: PageHandle, selector: str) -> int:
    """window.innerHeight minus the element's clientHeight."""
    return int(await page.evaluate(CLIENT_HEIGHT_GAP_JS, selector))


async def prepare_dark_capture(page: PageHandle, settle_delay_ms: int, remove_images: bool = False) -> None:
    """Emulate a dark colour-scheme preference, scroll to the end and let the page settle."""
    await page.emulate_media(color_scheme='dark')
    if remove_images:
        await page.evaluate(REMOVE_IMAGES_JS)
    await page.evaluate(SCROLL_TO_END_JS)
    await page.wait_for_timeout(settle_delay_ms)
