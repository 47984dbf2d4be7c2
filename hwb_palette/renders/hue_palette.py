"""Hue x value strip across the whole colour wheel.

24 columns, one every 15 degrees. 10 rows walk from near-black through
the pure hue to near-white: the top rows shed blackness, the bottom rows
add whiteness. For row value v = 20 * row (0-180):

    blackness = (100 - min(v + 10, 100)) * 10
    whiteness = max(v - 100, 0) * 10

--steps does not apply; --scale sets the swatch size.

Writes <out_dir>/hue_palette.png.

Example:
    hwb-palette hue-palette --scale 16
"""

from hwb_palette.core.fixed import hwb_to_rgb
from hwb_palette.core.pixels import PixelBuffer
from hwb_palette.core.raster import render_grid
from hwb_palette.core.sink import write_render
from hwb_palette.core.types import HWB, RGB, Render, RenderReport

render = Render(
    name='hue-palette',
    help='Hue x value strip across the wheel, dark to light.',
)

HUE_STEP = 15
VALUE_STEP = 20
COLUMNS = 360 // HUE_STEP
ROWS = 200 // VALUE_STEP


def hue_palette_colour(row: int, col: int) -> RGB:
    value = row * VALUE_STEP
    blackness = 100 - min(value + 10, 100)
    whiteness = max(value - 100, 0)
    return hwb_to_rgb(HWB(col * HUE_STEP * 10, whiteness * 10, blackness * 10))


def build_hue_palette(scale: int, alpha: bool = False) -> PixelBuffer:
    return render_grid(ROWS, COLUMNS, scale, hue_palette_colour, alpha=alpha)


@render.run
def run(settings, report: RenderReport, args) -> None:
    pixels = build_hue_palette(settings.scale, alpha=settings.alpha)
    path = write_render(pixels, settings.out_dir, 'hue_palette.png')
    report.add(render.name, path, pixels.width, pixels.height, len(pixels))
