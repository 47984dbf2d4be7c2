"""Swatch grid rasterizer.

Maps every (row, col) cell of a grid to a scale x scale block of pixels
filled with colour_at(row, col). Model parameters are spread across the
grid with axis_value().
"""

from collections.abc import Callable

from hwb_palette.core.pixels import PixelBuffer
from hwb_palette.core.types import RGB

ColourAt = Callable[[int, int], RGB]


def axis_value(index: int, steps: int, span: int) -> int:
    """Linear step `index` of `steps` across 0..span, both ends included."""
    if steps <= 1:
        return 0
    return span * index // (steps - 1)


def axis_fraction(index: int, steps: int) -> float:
    """Same as axis_value() over 0.0..1.0 for the float pipeline."""
    if steps <= 1:
        return 0.0
    return index / (steps - 1)


def swatch_centre(row: int, col: int, scale: int) -> tuple[int, int]:
    """Pixel (x, y) at the centre of a swatch."""
    return col * scale + scale // 2, row * scale + scale // 2


def render_grid(rows: int, cols: int, scale: int, colour_at: ColourAt, alpha: bool = False) -> PixelBuffer:
    """Rasterize a rows x cols swatch grid into a new buffer."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f'Grid needs at least one row and column, got {rows}x{cols}')
    if scale <= 0:
        raise ValueError(f'Swatch scale must be positive, got {scale}')

    pixels = PixelBuffer(cols * scale, rows * scale, alpha=alpha)
    for row in range(rows):
        for col in range(cols):
            pixels.rect(col * scale, row * scale, scale - 1, scale - 1, colour_at(row, col))
    return pixels
