"""Run every render, combine into a single report.

Runs: hsl-grid, hue-palette, palette. Options such as --hue, --steps and
--scale are passed through to each render.

Example:
    hwb-palette all
    hwb-palette all --out-dir ./images --json
"""

from hwb_palette.core.types import Render, RenderReport

render = Render(
    name='all',
    help='Run every render. Combine into a single report.',
)


@render.run
def run(settings, report: RenderReport, args) -> None:
    from hwb_palette.registry import all_renders

    for name, other in sorted(all_renders().items()):
        if name == render.name:
            continue
        other.execute(settings, report, args)
