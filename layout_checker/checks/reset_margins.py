"""Require the listed tags to have their default margin and padding reset.

Reads the computed `margin` and `padding` shorthands of every --tag selector
concurrently. A tag counts as reset only when both are exactly '0px'.
Offenders are reported in one notResetMargins diagnostic.

Requires at least one --tag.

Example:
    layout-checker reset-margins http://localhost:8080/ -t body -t h1 -t p
"""

import asyncio
import logging
from collections.abc import Sequence

from layout_checker.core.browser import get_style
from layout_checker.core.types import Check, CheckContext, NotResetMargins, PageHandle, Report

logger = logging.getLogger(__name__)

check = Check(
    name='reset-margins',
    help="Require computed margin and padding of every --tag to be '0px'.",
    requires=('tags',),
)

RESET_PROPERTIES = ('margin', 'padding')
RESET_VALUE = '0px'


async def reset_margins(page: PageHandle, tag_selectors: Sequence[str]) -> list[NotResetMargins]:
    styles = await asyncio.gather(*(get_style(page, tag, RESET_PROPERTIES) for tag in tag_selectors))
    not_reset = [
        tag for tag, values in zip(tag_selectors, styles) if any(value != RESET_VALUE for value in values)
    ]

    if not_reset:
        logger.info('margins/padding not reset on: %s', not_reset)
        return [NotResetMargins(tag_names=', '.join(not_reset))]
    return []


@check.run
async def run(ctx: CheckContext, report: Report) -> None:
    report.add(check.name, await reset_margins(ctx.page, ctx.tags))
