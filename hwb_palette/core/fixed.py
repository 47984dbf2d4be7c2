"""Fixed-point colour math on integer-scaled units.

Units:
  RGB channels      0-255
  hue               0-3599 (tenths of a degree)
  whiteness etc.    0-1000 (permille)

Divisions that can see a negative operand (the hue term in rgb_to_hue,
the delta in mix) go through _div(), which truncates toward zero. The
rest use floor division on operands that are never negative.
"""

import re

from hwb_palette.core.sectors import arrange
from hwb_palette.core.types import HWB, RGB

HUE_RANGE = 3600
SECTOR = 600
PERMILLE = 1000

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def rgb_from_packed(v: int) -> RGB:
    """Split a packed 0xRRGGBB integer. Bits above 24 are ignored."""
    return RGB((v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def hex_to_rgb(text: str) -> RGB:
    """Parse '#rrggbb', '#rgb' or the same without '#'. Malformed input is black."""
    m = _HEX_RE.match(text.strip())
    if not m:
        return RGB(0, 0, 0)
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return rgb_from_packed(int(digits, 16))


def hue_to_rgb(hue: int) -> RGB:
    """Fully saturated, full brightness colour for a hue."""
    sector = hue // SECTOR
    x = hue % SECTOR * 255 // SECTOR
    secondary = 255 - x if sector & 1 else x
    return RGB(*arrange(sector % 6, 255, secondary, 0))


def rgb_to_hue(rgb: tuple[int, int, int]) -> int:
    """Hue of a colour in tenths of a degree. Achromatic colours are 0."""
    r, g, b = rgb
    lo = min(rgb)
    hi = max(rgb)
    if lo == hi:
        return 0

    if r == hi:
        offset, term = 0, g - b
    elif g == hi:
        offset, term = 2 * SECTOR, b - r
    else:
        offset, term = 4 * SECTOR, r - g

    f = _div(term * PERMILLE, 255)
    d = _div((hi - lo) * PERMILLE, 255)
    hue = offset + _div(SECTOR * f, d)
    return (hue + HUE_RANGE) % HUE_RANGE


def gray(value: int) -> RGB:
    """Gray for a permille brightness."""
    byte = 255 * value // PERMILLE
    return RGB(byte, byte, byte)


def mix(p: int, a: tuple[int, int, int], b: tuple[int, int, int]) -> RGB:
    """Move p permille of the way from a to b, per channel."""
    return RGB(*(_div(a[i] * PERMILLE + (b[i] - a[i]) * p, PERMILLE) for i in range(3)))


def hwb_to_rgb(hwb: tuple[int, int, int]) -> RGB:
    hue, whiteness, blackness = hwb
    total = whiteness + blackness
    if total >= PERMILLE:
        # Achromatic: brightness is whiteness's share of the total
        return gray(PERMILLE * whiteness // total)

    w = 255 * whiteness // PERMILLE
    value = 255 - 255 * blackness // PERMILLE

    sector = hue // SECTOR
    x = hue % SECTOR * PERMILLE // SECTOR
    if sector & 1:
        x = PERMILLE - x
    x = w + x * (value - w) // PERMILLE
    return RGB(*arrange(sector % 6, value, x, w))


def rgb_to_hwb(rgb: tuple[int, int, int]) -> HWB:
    lo = min(rgb)
    hi = max(rgb)
    return HWB(
        rgb_to_hue(rgb),
        lo * PERMILLE // 255,
        (255 - hi) * PERMILLE // 255,
    )
