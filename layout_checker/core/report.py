"""Report builder: text and JSON output for layout-checker results."""

import json
from typing import Any

from layout_checker.core.types import Diagnostic, DiagnosticId, Report

MESSAGES: dict[DiagnosticId, str] = {
    DiagnosticId.NOT_COLOR_SCHEME: 'no <meta name="color-scheme"> declaring both light and dark',
    DiagnosticId.SWITCH_BUTTONS_CHANGED: 'dark theme toggle button is missing or was renamed',
    DiagnosticId.NOT_DARK_COLOR_SCHEME: 'dark theme palette differs from the canonical dark layout',
    DiagnosticId.BLOCK_NOT_FULL_SCREEN: 'block {name} is not exactly one viewport tall',
    DiagnosticId.SEMANTIC_TAGS_MISSING: 'missing semantic tags: {tagNames}',
    DiagnosticId.NOT_RESET_MARGINS: 'margin/padding not reset on: {tagNames}',
    DiagnosticId.NOT_FIXED_BACKGROUND: 'background of {selector} is not fixed',
}


def describe(diagnostic: Diagnostic) -> str:
    """Human-readable message for a diagnostic."""
    return MESSAGES[diagnostic.id].format(**diagnostic.values)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'layout-checker: {report.url}', '']

    for check_name, diagnostics in report.results.items():
        mark = '✗' if diagnostics else '✓'
        lines.append(f'── {check_name} {mark}')
        for diagnostic in diagnostics:
            lines.append(f'  {diagnostic.id.value}: {describe(diagnostic)}')

    for check_name, reason in report.skipped.items():
        lines.append(f'── {check_name} skipped ({reason})')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append('')
        lines.append(f'PASS {report.pass_count}/{total} checks  FAIL {report.fail_count}/{total} checks')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'url': report.url}
    obj['checks'] = [
        {'name': name, 'diagnostics': [d.to_dict() for d in diagnostics]}
        for name, diagnostics in report.results.items()
    ]
    if report.skipped:
        obj['skipped'] = dict(report.skipped)
    obj['summary'] = {
        'total': report.pass_count + report.fail_count,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)
