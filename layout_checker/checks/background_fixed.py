"""Require a fixed background on the --selector element.

Reports notFixedBackground when the computed background-attachment is
anything other than 'fixed'.

Example:
    layout-checker background-fixed http://localhost:8080/ --selector .promo
"""

from layout_checker.core.browser import get_style
from layout_checker.core.types import Check, CheckContext, NotFixedBackground, PageHandle, Report

check = Check(
    name='background-fixed',
    help="Require computed background-attachment of --selector to be 'fixed'.",
    requires=('selector',),
)


async def background_fixed(page: PageHandle, selector: str) -> list[NotFixedBackground]:
    values = await get_style(page, selector, ['background-attachment'])
    if any(value != 'fixed' for value in values):
        return [NotFixedBackground(selector=selector)]
    return []


@check.run
async def run(ctx: CheckContext, report: Report) -> None:
    report.add(check.name, await background_fixed(ctx.page, ctx.selector))
