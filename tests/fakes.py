"""Test doubles: a BeautifulSoup-backed page, a recording browser launcher and block images."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from bs4 import BeautifulSoup
from layout_checker.core.browser import (
    CLIENT_HEIGHT_GAP_JS,
    COMPUTED_STYLE_JS,
    REMOVE_IMAGES_JS,
    SCROLL_TO_END_JS,
    BrowserSession,
)
from PIL import Image

LIGHT = [(250, 250, 250), (240, 200, 120), (30, 30, 30), (40, 90, 200)]
DARK = [(20, 20, 24), (110, 40, 150), (200, 200, 200), (40, 150, 240)]


def block_image(colours: list[tuple[int, int, int]], size: int = 160) -> Image.Image:
    """Square image split into four equal quadrants, one per colour.

    The default size keeps quadrant edges on the 16px JPEG block grid.
    """
    img = Image.new('RGB', (size, size))
    half = size // 2
    for i, colour in enumerate(colours[:4]):
        x, y = (i % 2) * half, (i // 2) * half
        img.paste(colour, (x, y, x + half, y + half))
    return img


class FakePage:
    """Implements the PageHandle protocol against static HTML.

    Selectors are matched with soupsieve, so :is() and [attr~=token] behave
    like they do in a browser. Computed styles and clientHeights are given
    per selector. Screenshots are four-block images in LIGHT or DARK colours
    depending on the emulated colour scheme.
    """

    def __init__(
        self,
        html: str = '',
        styles: dict[str, dict[str, str]] | None = None,
        client_heights: dict[str, int] | None = None,
        inner_height: int = 768,
    ):
        self.soup = BeautifulSoup(html, 'html.parser')
        self.styles = styles or {}
        self.client_heights = client_heights or {}
        self.inner_height = inner_height
        self.color_scheme: str | None = None
        self.calls: list[tuple[str, Any]] = []

    async def query_selector(self, selector: str) -> Any:
        self.calls.append(('query_selector', selector))
        return self.soup.select_one(selector)

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        if expression == CLIENT_HEIGHT_GAP_JS:
            self.calls.append(('client_height', arg))
            return self.inner_height - self.client_heights[arg]
        if expression == COMPUTED_STYLE_JS:
            selector, properties = arg
            self.calls.append(('style', selector))
            if self.soup.select_one(selector) is None:
                raise LookupError(f'no element matches {selector}')
            style = self.styles.get(selector, {})
            return [style.get(p, '') for p in properties]
        if expression == REMOVE_IMAGES_JS:
            self.calls.append(('remove_images', None))
            for img in self.soup.select('img'):
                img.decompose()
            return None
        if expression == SCROLL_TO_END_JS:
            self.calls.append(('scroll', None))
            return None
        raise AssertionError(f'unexpected script: {expression}')

    async def emulate_media(self, *, color_scheme: str | None = None) -> None:
        self.calls.append(('emulate_media', color_scheme))
        self.color_scheme = color_scheme

    async def wait_for_timeout(self, timeout: float) -> None:
        self.calls.append(('wait', timeout))

    async def screenshot(self, *, path: str | None = None, full_page: bool = False) -> bytes:
        self.calls.append(('screenshot', path))
        colours = DARK if self.color_scheme == 'dark' else LIGHT
        if path:
            block_image(colours).save(path)
        return b''

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


class FakeBrowser:
    def __init__(self) -> None:
        self.closed = False


class FakeLauncher:
    """Stands in for launch_browser: yields a session on a given page, records launches."""

    def __init__(self, page: FakePage):
        self.page = page
        self.launches: list[dict[str, Any]] = []
        self.browsers: list[FakeBrowser] = []

    @asynccontextmanager
    async def __call__(self, url: str, *, launch_args=(), viewport=None):
        browser = FakeBrowser()
        self.browsers.append(browser)
        self.launches.append({'url': url, 'launch_args': tuple(launch_args), 'viewport': viewport})
        try:
            yield BrowserSession(browser=browser, page=self.page)
        finally:
            browser.closed = True

