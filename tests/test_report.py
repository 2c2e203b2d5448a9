"""Tests for diagnostics and layout_checker.core.report: text and JSON output."""

import json

from layout_checker.core.report import MESSAGES, describe, format_json, format_text
from layout_checker.core.types import (
    BlockNotFullScreen,
    DiagnosticId,
    NotColorScheme,
    NotFixedBackground,
    NotResetMargins,
    Report,
    SemanticTagsMissing,
)


def _report() -> Report:
    report = Report(url='http://site/')
    report.add('color-scheme', [NotColorScheme()])
    report.add('block-full-screen', [])
    report.add('semantic-tags', [SemanticTagsMissing(tag_names='nav, footer')])
    report.skip('switch-scheme', 'canonical image not found')
    return report


class TestDiagnostic:
    def test_ids_cover_taxonomy(self):
        assert {d.value for d in DiagnosticId} == {
            'notColorScheme',
            'switchButtonsChanged',
            'notDarkColorScheme',
            'blockNotFullScreen',
            'semanticTagsMissing',
            'notResetMargins',
            'notFixedBackground',
        }

    def test_every_id_has_a_message(self):
        assert set(MESSAGES) == set(DiagnosticId)

    def test_to_dict_without_values(self):
        assert NotColorScheme().to_dict() == {'id': 'notColorScheme'}

    def test_to_dict_with_values(self):
        assert NotResetMargins(tag_names='h1, p').to_dict() == {
            'id': 'notResetMargins',
            'values': {'tagNames': 'h1, p'},
        }

    def test_variants_compare_by_value(self):
        assert NotFixedBackground(selector='.a') == NotFixedBackground(selector='.a')
        assert NotFixedBackground(selector='.a') != NotFixedBackground(selector='.b')

    def test_describe_interpolates_values(self):
        assert describe(BlockNotFullScreen(name='.hero')) == 'block .hero is not exactly one viewport tall'


class TestReport:
    def test_counts(self):
        report = _report()
        assert report.pass_count == 1
        assert report.fail_count == 2
        assert report.diagnostics == [NotColorScheme(), SemanticTagsMissing(tag_names='nav, footer')]


class TestFormatText:
    def test_lists_checks_and_messages(self):
        text = format_text(_report())
        assert text.startswith('layout-checker: http://site/')
        assert '── color-scheme ✗' in text
        assert '── block-full-screen ✓' in text
        assert 'semanticTagsMissing: missing semantic tags: nav, footer' in text
        assert '── switch-scheme skipped (canonical image not found)' in text
        assert text.endswith('PASS 1/3 checks  FAIL 2/3 checks')

    def test_empty_report_has_no_summary(self):
        assert 'PASS' not in format_text(Report(url='http://site/'))


class TestFormatJson:
    def test_structure(self):
        obj = json.loads(format_json(_report()))
        assert obj['url'] == 'http://site/'
        assert obj['checks'][0] == {'name': 'color-scheme', 'diagnostics': [{'id': 'notColorScheme'}]}
        assert obj['checks'][2]['diagnostics'] == [
            {'id': 'semanticTagsMissing', 'values': {'tagNames': 'nav, footer'}}
        ]
        assert obj['skipped'] == {'switch-scheme': 'canonical image not found'}
        assert obj['summary'] == {'total': 3, 'pass': 1, 'fail': 2}
