"""Require a block to be exactly as tall as the viewport.

Compares window.innerHeight with the element's clientHeight. Any difference,
even a single pixel, reports blockNotFullScreen with the selector as `name`.
An element that is not on the page is not this check's concern and passes.

Requires --selector.

Example:
    layout-checker block-full-screen http://localhost:8080/ --selector .hero
"""

import logging
from typing import Literal

from layout_checker.core.browser import client_height_gap, has_element_by_selectors
from layout_checker.core.types import BlockNotFullScreen, Check, CheckContext, PageHandle, Report

logger = logging.getLogger(__name__)

check = Check(
    name='block-full-screen',
    help='Require the --selector block to fill the viewport height exactly.',
    requires=('selector',),
)


async def block_full_screen(page: PageHandle, selector: str) -> BlockNotFullScreen | Literal[False]:
    if not await has_element_by_selectors(page, selector):
        logger.debug('%s not found, skipping height comparison', selector)
        return False

    gap = await client_height_gap(page, selector)
    if gap != 0:
        logger.info('%s is %dpx off the viewport height', selector, gap)
        return BlockNotFullScreen(name=selector)
    return False


@check.run
async def run(ctx: CheckContext, report: Report) -> None:
    result = await block_full_screen(ctx.page, ctx.selector)
    report.add(check.name, [result] if result else [])
