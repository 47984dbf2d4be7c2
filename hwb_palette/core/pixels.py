"""Pixel buffer backed by a numpy array.

Row-major, top-left origin, channel order R, G, B[, A]. A new buffer is
filled with 255 (opaque white). Writes outside the buffer raise
PixelBoundsError instead of wrapping or corrupting a neighbouring row.
"""

import numpy as np
from PIL import Image

from hwb_palette.core.types import RGB


class PixelBoundsError(IndexError):
    """A write landed outside the pixel buffer."""


class PixelBuffer:
    def __init__(self, width: int, height: int, alpha: bool = False):
        if width <= 0 or height <= 0:
            raise ValueError(f'Pixel buffer must be at least 1x1, got {width}x{height}')
        self.width = width
        self.height = height
        self.bytes_per_pixel = 4 if alpha else 3
        self._data = np.full((height, width, self.bytes_per_pixel), 255, dtype=np.uint8)

    @property
    def alpha(self) -> bool:
        return self.bytes_per_pixel == 4

    @property
    def data(self) -> bytes:
        """Raw channel bytes, width * height * bytes_per_pixel long."""
        return self._data.tobytes()

    def __len__(self) -> int:
        return self._data.size

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelBoundsError(f'Pixel ({x}, {y}) outside {self.width}x{self.height} buffer')

    def _channels(self, rgb: tuple[int, int, int]) -> list[int]:
        channels = [int(c) for c in rgb]
        if self.alpha:
            channels.append(255)
        return channels

    def set(self, x: int, y: int, rgb: tuple[int, int, int]) -> None:
        self._check(x, y)
        self._data[y, x] = self._channels(rgb)

    def get(self, x: int, y: int) -> RGB:
        self._check(x, y)
        r, g, b = self._data[y, x, :3]
        return RGB(int(r), int(g), int(b))

    def rect(self, x: int, y: int, w: int, h: int, rgb: tuple[int, int, int]) -> None:
        """Fill the inclusive region x..x+w, y..y+h.

        The origin must lie inside the buffer; the far edge is clipped to it.
        """
        self._check(x, y)
        if w < 0 or h < 0:
            raise ValueError(f'Negative rectangle extent {w}x{h}')
        x_end = min(x + w, self.width - 1)
        y_end = min(y + h, self.height - 1)
        self._data[y : y_end + 1, x : x_end + 1] = self._channels(rgb)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._data)
