"""The six-sector hue wheel shared by every conversion.

Each 60 degree sector assigns a primary, secondary and zero component to
R, G and B. Integer and float pipelines both dispatch through arrange().
"""

from typing import TypeVar

T = TypeVar('T', int, float)

PRIMARY = 0
SECONDARY = 1
ZERO = 2

# sector -> (red slot, green slot, blue slot)
SECTOR_TABLE: tuple[tuple[int, int, int], ...] = (
    (PRIMARY, SECONDARY, ZERO),
    (SECONDARY, PRIMARY, ZERO),
    (ZERO, PRIMARY, SECONDARY),
    (ZERO, SECONDARY, PRIMARY),
    (SECONDARY, ZERO, PRIMARY),
    (PRIMARY, ZERO, SECONDARY),
)


def arrange(sector: int, primary: T, secondary: T, zero: T) -> tuple[T, T, T]:
    """Order (primary, secondary, zero) into (r, g, b) for a sector."""
    values = (primary, secondary, zero)
    r, g, b = SECTOR_TABLE[sector % 6]
    return values[r], values[g], values[b]
