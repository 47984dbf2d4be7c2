"""Tests for hwb_palette.core.report — text, JSON and HTML output."""

import json

import pytest
from hwb_palette.core.report import format_html_table, format_json, format_text
from hwb_palette.core.types import RenderReport


def _report() -> RenderReport:
    report = RenderReport(out_dir='images')
    report.add('palette', 'images/palette0.png', 128, 128, 49152)
    report.add('palette', 'images/palette30.png', 128, 128, 49152)
    report.add('hue-palette', 'images/hue_palette.png', 384, 160, 184320)
    return report


class TestFormatText:
    def test_header(self):
        text = format_text(_report())
        assert text.splitlines()[0] == 'hwb-palette: 3 image(s) in images'

    def test_groups_by_render(self):
        text = format_text(_report())
        assert '── palette' in text
        assert '── hue-palette' in text
        assert 'images/palette30.png (128×128, 49152 bytes)' in text


class TestFormatJson:
    def test_structure(self):
        parsed = json.loads(format_json(_report()))
        assert parsed['out_dir'] == 'images'
        assert len(parsed['images']) == 3
        assert parsed['summary'] == {'total': 3, 'renders': ['hue-palette', 'palette']}

    def test_empty(self):
        parsed = json.loads(format_json(RenderReport()))
        assert parsed['summary']['total'] == 0


class TestHtmlTable:
    def test_cell_count(self):
        html = format_html_table()
        # 5 saturation blocks x 16 luminance rows x 24 hues
        assert html.count('display: table-cell;') == 5 * 16 * 24

    def test_blocks_balanced(self):
        html = format_html_table(step=90, saturation_levels=1, luminance_levels=1)
        assert html.count('<div') == html.count('</div>')
        assert html.count('<br>') == 2

    def test_first_cell_is_black(self):
        html = format_html_table()
        first = html.splitlines()[2]
        assert 'background-color: #000000;' in first

    def test_contains_pure_red_and_gray(self):
        html = format_html_table(step=30, saturation_levels=2, luminance_levels=2)
        assert 'background-color: #ff0000;' in html
        assert 'background-color: #7f7f7f;' in html

    def test_rejects_zero_levels(self):
        with pytest.raises(ValueError):
            format_html_table(saturation_levels=0)
