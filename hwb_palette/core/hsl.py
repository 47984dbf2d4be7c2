"""Float HSL -> RGB conversion.

An independent pipeline from hwb_palette.core.fixed. Hue is in degrees,
saturation and luminance in 0.0-1.0. Chroma is luminance * saturation, so
(h, 1, 1) is the pure hue and (h, 0, l) is a gray of intensity l.

There is no RGB -> HSL direction.
"""

import math

from hwb_palette.core.sectors import arrange
from hwb_palette.core.types import HSL, RGB


def _byte(v: float) -> int:
    """Scale 0.0-1.0 to a byte, truncating and saturating to 0-255."""
    scaled = v * 255
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return 255 if scaled > 0 else 0
    return max(0, min(255, int(scaled)))


def hsl_to_rgb(hsl: HSL) -> RGB:
    # https://en.wikipedia.org/wiki/HSL_and_HSV
    c = hsl.luminance * hsl.saturation
    h = hsl.hue / 60.0
    x = c * (1.0 - abs(h % 2.0 - 1.0))
    r, g, b = arrange(math.floor(h) % 6, c, x, 0.0)
    m = hsl.luminance - c
    return RGB(_byte(r + m), _byte(g + m), _byte(b + m))


def from_hsl(hue: float, saturation: float, luminance: float) -> RGB:
    return hsl_to_rgb(HSL(hue, saturation, luminance))


def gray(intensity: float) -> RGB:
    return from_hsl(0.0, 0.0, intensity)


def hsl_primary_colors(step: int) -> list[HSL]:
    """Full saturation, full luminance colours every `step` degrees."""
    return [HSL(float(hue), 1.0, 1.0) for hue in range(0, 360, step)]


def primary_colors(step: int) -> list[RGB]:
    return [hsl.to_rgb() for hsl in hsl_primary_colors(step)]
