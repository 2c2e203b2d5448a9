"""Run every check whose inputs were supplied, combined into a single report.

Runs: color-scheme always.
Runs block-full-screen and background-fixed when --selector is given.
Runs semantic-tags and reset-margins when --tag is given.
Runs switch-scheme only when the canonical dark screenshot is in the work
dir (it opens two extra browser sessions).

Skipped checks are listed in the report with the reason. Results of checks
that already ran stay in the report if a later one fails to run.

Example:
    layout-checker all http://localhost:8080/ -s .hero -t header -t footer
    layout-checker all http://localhost:8080/ -s .hero --work-dir ./artefacts --json
"""

from layout_checker.core.types import Check, CheckContext, Report

check = Check(
    name='all',
    help='Run every check whose inputs were supplied. Combine into a single report.',
)


@check.run
async def run(ctx: CheckContext, report: Report) -> None:
    from layout_checker.registry import plan

    runnable, skipped = plan(ctx, exclude={check.name})
    for name, reason in skipped.items():
        report.skip(name, reason)

    canonical = ctx.config.path(ctx.config.artifacts.canonical_dark)
    for chk in runnable:
        if chk.name == 'switch-scheme' and not canonical.is_file():
            report.skip(chk.name, f'canonical image not found: {canonical}')
            continue
        await chk.execute(ctx, report)
