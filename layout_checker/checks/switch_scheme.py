"""Check the dark colour scheme against canonical dark-mode screenshots.

Opens its own browser session on the URL (1024x768, sandbox disabled). It
does not reuse the caller's page.

  1. The dark theme toggle
     (.header__theme-menu-button.header__theme-menu-button_type_dark)
     must exist, otherwise switchButtonsChanged is reported and nothing
     else runs.
  2. Emulates prefers-color-scheme: dark, removes every <img> (photos skew
     the palette), scrolls to the end, waits 2000 ms and saves a full-page
     screenshot to layout-dark.jpg.
  3. Extracts a 4-colour palette from layout-canonical-dark.jpg and from
     the screenshot. Both palettes are sorted and compared pairwise with a
     tolerance of 35 per channel.
  4. Runs a full-page layout diff (layout-dark-full.jpg against
     layout-canonical-dark-full.jpg, written to output-dark.jpg). The
     mismatch percentage is logged. It does not affect the result.

Reports notDarkColorScheme when the palettes differ.

All filenames live in the work dir (--work-dir or LAYOUT_CHECKER_WORK_DIR).
The canonical images must already be there.

Example:
    layout-checker switch-scheme http://localhost:8080/ --work-dir ./artefacts
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Literal

from layout_checker.core.browser import has_element_by_selectors, launch_browser, prepare_dark_capture
from layout_checker.core.colours import extract_palette, palettes_match
from layout_checker.core.config import CheckConfig
from layout_checker.core.layout_diff import compare_layout
from layout_checker.core.types import (
    Check,
    CheckContext,
    NotDarkColorScheme,
    PageHandle,
    Report,
    SwitchButtonsChanged,
)

logger = logging.getLogger(__name__)

check = Check(
    name='switch-scheme',
    help='Compare the dark theme against canonical dark screenshots. Opens its own browser.',
    needs_page=False,
)


async def switch_scheme(
    page_url: str,
    config: CheckConfig | None = None,
    *,
    launcher: Callable = launch_browser,
    layout_differ: Callable = compare_layout,
    palette_extractor: Callable = extract_palette,
) -> SwitchButtonsChanged | NotDarkColorScheme | Literal[False]:
    config = config or CheckConfig()
    artifacts = config.artifacts
    screenshot_path = config.path(artifacts.dark_screenshot)

    async with launcher(page_url, launch_args=config.launch_args, viewport=config.viewport_size) as session:
        page = session.page
        if not await has_element_by_selectors(page, config.theme_button_selector):
            logger.info('theme toggle %s not found', config.theme_button_selector)
            return SwitchButtonsChanged()

        await prepare_dark_capture(page, config.settle_delay_ms, remove_images=True)
        await page.screenshot(path=str(screenshot_path), full_page=True)

        # KMeans is CPU-bound, keep it off the event loop
        canonical_path = config.path(artifacts.canonical_dark)
        canonical = await asyncio.to_thread(palette_extractor, canonical_path, config.palette_size)
        actual = await asyncio.to_thread(palette_extractor, screenshot_path, config.palette_size)
        is_same = palettes_match(canonical, actual, config.colour_tolerance)
        logger.debug('dark palettes canonical=%s actual=%s match=%s', canonical, actual, is_same)

    async def before_screenshot(p: PageHandle) -> None:
        await prepare_dark_capture(p, config.settle_delay_ms)

    diff = await layout_differ(
        page_url,
        canonical_image=config.path(artifacts.canonical_dark_full),
        page_image=config.path(artifacts.dark_full),
        output_image=config.path(artifacts.dark_diff),
        launch_args=config.launch_args,
        viewport=config.viewport_size,
        on_before_screenshot=before_screenshot,
    )
    logger.info('dark layout diff: %s', diff)

    if not is_same:
        logger.info('dark palette differs from canonical beyond tolerance %d', config.colour_tolerance)
        return NotDarkColorScheme()
    return False


@check.run
async def run(ctx: CheckContext, report: Report) -> None:
    result = await switch_scheme(ctx.url, ctx.config)
    report.add(check.name, [result] if result else [])
