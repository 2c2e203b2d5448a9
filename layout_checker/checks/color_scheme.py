"""Require a color-scheme meta tag declaring both light and dark support.

Passes when the document has

    <meta name="color-scheme" content="light dark">

(token order does not matter). Reports notColorScheme otherwise, including
when only one of the two tokens is present.

Example:
    layout-checker color-scheme http://localhost:8080/
"""

import logging
from typing import Literal

from layout_checker.core.browser import has_element_by_selectors
from layout_checker.core.types import Check, CheckContext, NotColorScheme, PageHandle, Report

logger = logging.getLogger(__name__)

check = Check(
    name='color-scheme',
    help='Require <meta name="color-scheme"> declaring both light and dark.',
)

COLOR_SCHEME_META = 'meta[name=color-scheme]:is([content~="dark"]):is([content~="light"])'


async def color_scheme(page: PageHandle) -> NotColorScheme | Literal[False]:
    if not await has_element_by_selectors(page, COLOR_SCHEME_META):
        logger.info('no light/dark color-scheme meta tag')
        return NotColorScheme()
    return False


@check.run
async def run(ctx: CheckContext, report: Report) -> None:
    result = await color_scheme(ctx.page)
    report.add(check.name, [result] if result else [])
