"""layout-checker: layout regression checks against a rendered web page.

Usage: layout-checker <check> <url> [options]

Checks are auto-discovered from layout_checker/checks/.
Each check module's docstring is its documentation.
Run `layout-checker help <check>` for full module docs.

Configuration:
  Settings come from flags, then LAYOUT_CHECKER_* environment variables,
  then a .env file in the current directory (or --env-file PATH).
  See layout_checker.core.config for the variables.

Exit status: 0 ok, 1 diagnostics reported with --fail-on-diagnostic,
2 a check could not run.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from playwright.async_api import Error as PlaywrightError

from layout_checker import registry
from layout_checker.core.browser import launch_browser
from layout_checker.core.config import CheckConfig
from layout_checker.core.report import format_json, format_text
from layout_checker.core.types import Check, CheckContext, Report

EXIT_DIAGNOSTICS = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    checks = registry.all_checks()

    epilog = (
        'Examples:\n'
        '  layout-checker color-scheme http://localhost:8080/\n'
        '  layout-checker block-full-screen http://localhost:8080/ -s .hero\n'
        '  layout-checker semantic-tags http://localhost:8080/ -t header -t main -t footer\n'
        '  layout-checker switch-scheme http://localhost:8080/ -w ./artefacts\n'
        '  layout-checker all http://localhost:8080/ -s .hero -t header --json --fail-on-diagnostic\n'
        '  layout-checker help switch-scheme\n'
        '\n'
        'Configuration env vars (set in .env or environment):\n'
        '  LAYOUT_CHECKER_WORK_DIR, LAYOUT_CHECKER_SETTLE_DELAY_MS,\n'
        '  LAYOUT_CHECKER_COLOUR_TOLERANCE, LAYOUT_CHECKER_PALETTE_SIZE\n'
    )
    parser = argparse.ArgumentParser(
        prog='layout-checker',
        description='Layout regression checks against a rendered web page.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: .env in the current directory)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='check', help='Check to run')

    for name, chk in sorted(checks.items()):
        p = sub.add_parser(name, help=chk.summary)
        p.add_argument('url', help='Page URL (http://, https:// or file://)')
        p.add_argument('-s', '--selector', help='Element selector for block/background checks')
        p.add_argument(
            '-t',
            '--tag',
            dest='tags',
            action='append',
            default=[],
            metavar='SELECTOR',
            help='Tag selector for semantic-tags/reset-margins (repeatable)',
        )
        p.add_argument('-w', '--work-dir', help='Directory with canonical and captured images')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '--fail-on-diagnostic',
            action='store_true',
            help='Exit 1 if any check reports a diagnostic (CI gating)',
        )

    help_parser = sub.add_parser('help', help='Print full docs for a check')
    help_parser.add_argument('command', nargs='?', help='Check name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a check."""
    checks = registry.all_checks()

    if command is None:
        print('Available checks:\n')
        for name, chk in sorted(checks.items()):
            print(f'  {name:<18} {chk.summary}')
        print('\nRun: layout-checker help <check> for full docs.')
        return

    if command not in checks:
        print(f'Unknown check: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(checks))}', file=sys.stderr)
        sys.exit(EXIT_ERROR)

    print(checks[command].doc or f'(No module docs for {command!r})')


async def run_check(chk: Check, ctx: CheckContext, report: Report) -> None:
    """Run one check, opening a page for it first when it needs one."""
    if not chk.needs_page:
        await chk.execute(ctx, report)
        return

    config = ctx.config
    async with launch_browser(ctx.url, launch_args=config.launch_args, viewport=config.viewport_size) as session:
        ctx.page = session.page
        try:
            await chk.execute(ctx, report)
        finally:
            ctx.page = None


def _load_config(args: argparse.Namespace) -> CheckConfig:
    """Build the config from flags, LAYOUT_CHECKER_* variables and the .env file.

    Raises ValueError (pydantic.ValidationError) for out-of-range settings and
    FileNotFoundError for a missing --env-file.
    """
    overrides: dict = {}
    if args.env_file:
        if not Path(args.env_file).is_file():
            raise FileNotFoundError(f'env file not found: {args.env_file}')
        overrides['_env_file'] = args.env_file
    if args.work_dir:
        overrides['work_dir'] = Path(args.work_dir)
    return CheckConfig(**overrides)


def _print_report(report: Report, as_json: bool) -> None:
    print(format_json(report) if as_json else format_text(report))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if not args.check:
        parser.print_help()
        sys.exit(EXIT_ERROR)

    if args.check == 'help':
        _print_help(args.command)
        return

    try:
        config = _load_config(args)
    except (ValueError, FileNotFoundError) as e:
        print(f'layout-checker: invalid configuration: {e}', file=sys.stderr)
        sys.exit(EXIT_ERROR)

    chk = registry.get(args.check)
    ctx = CheckContext(url=args.url, selector=args.selector, tags=args.tags, config=config)

    missing = chk.missing_flags(ctx)
    if missing:
        print(f'layout-checker: {chk.name} requires: {", ".join(missing)}', file=sys.stderr)
        sys.exit(EXIT_ERROR)

    report = Report(url=args.url)
    try:
        asyncio.run(run_check(chk, ctx, report))
    except (PlaywrightError, OSError) as e:
        # keep what the checks that did run found
        if report.results:
            _print_report(report, args.json)
        print(f'layout-checker: {chk.name} failed: {e}', file=sys.stderr)
        sys.exit(EXIT_ERROR)

    _print_report(report, args.json)

    # CI gate runs after output so the report is visible even on failure
    if args.fail_on_diagnostic and report.diagnostics:
        sys.exit(EXIT_DIAGNOSTICS)


if __name__ == '__main__':
    main()
