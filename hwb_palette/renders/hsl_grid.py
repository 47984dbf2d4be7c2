"""HSL saturation x luminance swatch grid for a single hue (float pipeline).

Rows step luminance from 0.0 to 1.0 (top to bottom), columns step
saturation from 0.0 to 1.0 (left to right). Uses the float conversion in
hwb_palette.core.hsl, not the fixed-point one.

With --hue DEG renders that hue only. Without it renders every 30 degrees.

Writes <out_dir>/hsl<hue>.png.

Example:
    hwb-palette hsl-grid --hue 210 --steps 16 --scale 8
"""

from hwb_palette.core.hsl import from_hsl
from hwb_palette.core.pixels import PixelBuffer
from hwb_palette.core.raster import axis_fraction, render_grid
from hwb_palette.core.sink import write_render
from hwb_palette.core.types import Render, RenderReport

render = Render(
    name='hsl-grid',
    help='HSL saturation x luminance grid for one hue (float pipeline).',
)

DEFAULT_HUES = range(0, 360, 30)


def build_hsl_grid(hue: float, steps: int, scale: int, alpha: bool = False) -> PixelBuffer:
    """Rasterize the grid for a hue in degrees."""
    return render_grid(
        steps,
        steps,
        scale,
        lambda row, col: from_hsl(hue, axis_fraction(col, steps), axis_fraction(row, steps)),
        alpha=alpha,
    )


@render.run
def run(settings, report: RenderReport, args) -> None:
    hue = getattr(args, 'hue', None)
    hues = [hue] if hue is not None else DEFAULT_HUES
    for degrees in hues:
        pixels = build_hsl_grid(float(degrees), settings.steps, settings.scale, alpha=settings.alpha)
        path = write_render(pixels, settings.out_dir, f'hsl{degrees}.png')
        report.add(render.name, path, pixels.width, pixels.height, len(pixels))
