"""Require each listed semantic tag to appear on the page.

Looks up every --tag selector concurrently. All missing selectors are
reported together in one semanticTagsMissing diagnostic, joined with
', ' in the order they were given.

Requires at least one --tag.

Example:
    layout-checker semantic-tags http://localhost:8080/ -t header -t main -t footer
"""

import asyncio
import logging
from collections.abc import Sequence

from layout_checker.core.browser import has_element_by_selectors
from layout_checker.core.types import Check, CheckContext, PageHandle, Report, SemanticTagsMissing

logger = logging.getLogger(__name__)

check = Check(
    name='semantic-tags',
    help='Require every --tag selector to be present on the page.',
    requires=('tags',),
)


async def semantic_tags(page: PageHandle, tag_selectors: Sequence[str]) -> list[SemanticTagsMissing]:
    found = await asyncio.gather(*(has_element_by_selectors(page, tag) for tag in tag_selectors))
    missing = [tag for tag, is_found in zip(tag_selectors, found) if not is_found]

    if missing:
        logger.info('missing semantic tags: %s', missing)
        return [SemanticTagsMissing(tag_names=', '.join(missing))]
    return []


@check.run
async def run(ctx: CheckContext, report: Report) -> None:
    report.add(check.name, await semantic_tags(ctx.page, ctx.tags))
