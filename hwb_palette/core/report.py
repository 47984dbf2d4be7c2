"""Report builder — text and JSON run summaries, and the HTML swatch table."""

import json
from typing import Any

from hwb_palette.core.hsl import hsl_primary_colors
from hwb_palette.core.types import HSL, RenderReport


def format_text(report: RenderReport) -> str:
    """Format report as human-readable text."""
    lines = [f'hwb-palette: {len(report.images)} image(s) in {report.out_dir}', '']

    for render_name, images in report.by_render().items():
        lines.append(f'── {render_name}')
        for image in images:
            dim = f'{image["width"]}×{image["height"]}'
            lines.append(f'  {image["path"]} ({dim}, {image["bytes"]} bytes)')
        lines.append('')

    return '\n'.join(lines)


def format_json(report: RenderReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'out_dir': report.out_dir,
        'images': report.images,
        'summary': {'total': len(report.images), 'renders': sorted(report.by_render())},
    }
    return json.dumps(obj, indent=2)


def format_html_table(step: int = 15, saturation_levels: int = 4, luminance_levels: int = 15) -> str:
    """HTML table of 16px cells: one block per saturation level, one row per luminance."""
    if saturation_levels <= 0 or luminance_levels <= 0:
        raise ValueError('Saturation and luminance levels must be positive')
    colours = hsl_primary_colors(step)
    cell = '<div style="display: table-cell; background-color: {}; width: 16px; height: 16px;"></div>'

    lines = []
    for saturation in range(saturation_levels, -1, -1):
        lines.append('<div style="display: table;">')
        for intensity in range(luminance_levels + 1):
            lines.append('<div style="display: table-row;">')
            for colour in colours:
                hsl = HSL(
                    colour.hue,
                    saturation / saturation_levels,
                    intensity / luminance_levels,
                )
                lines.append(cell.format(hsl))
            lines.append('</div>')
        lines.append('</div>')
        lines.append('<br>')
    return '\n'.join(lines)
