"""HWB whiteness x blackness swatch grid for a single hue.

Rows step whiteness from 0 to 1000 permille (top to bottom), columns step
blackness from 0 to 1000 permille (left to right). The top-left swatch is
the pure hue, the bottom-right one is a mid gray.

With --hue DEG renders that hue only. Without it renders every 30 degrees.
Grid size and swatch size come from --steps and --scale.

Writes <out_dir>/palette<hue>.png, hue in whole degrees.

Example:
    hwb-palette palette --hue 120 --steps 8 --scale 16
    hwb-palette palette --out-dir ./images
"""

from hwb_palette.core.fixed import PERMILLE, hwb_to_rgb
from hwb_palette.core.pixels import PixelBuffer
from hwb_palette.core.raster import axis_value, render_grid
from hwb_palette.core.sink import write_render
from hwb_palette.core.types import HWB, Render, RenderReport

render = Render(
    name='palette',
    help='HWB whiteness x blackness grid for one hue (default: every 30 degrees).',
)

DEFAULT_HUES = range(0, 360, 30)


def build_palette(hue: int, steps: int, scale: int, alpha: bool = False) -> PixelBuffer:
    """Rasterize the grid for a hue given in tenths of a degree."""

    def colour_at(row: int, col: int):
        return hwb_to_rgb(HWB(hue, axis_value(row, steps, PERMILLE), axis_value(col, steps, PERMILLE)))

    return render_grid(steps, steps, scale, colour_at, alpha=alpha)


@render.run
def run(settings, report: RenderReport, args) -> None:
    hue = getattr(args, 'hue', None)
    hues = [hue] if hue is not None else DEFAULT_HUES
    for degrees in hues:
        pixels = build_palette(degrees * 10, settings.steps, settings.scale, alpha=settings.alpha)
        path = write_render(pixels, settings.out_dir, f'palette{degrees}.png')
        report.add(render.name, path, pixels.width, pixels.height, len(pixels))
