"""PNG image sink. Writes a PixelBuffer through Pillow."""

import os
import sys

from hwb_palette.core.pixels import PixelBuffer


def save_png(pixels: PixelBuffer, path: str) -> None:
    """Write pixels to path as an 8-bit RGB or RGBA PNG.

    OSError (missing directory, permissions) propagates to the caller.
    """
    pixels.to_image().save(path, format='PNG')


def write_render(pixels: PixelBuffer, out_dir: str, filename: str) -> str:
    """Save pixels as out_dir/filename and return the path written."""
    path = os.path.join(out_dir, filename)
    save_png(pixels, path)
    print(f'hwb-palette: wrote {path}', file=sys.stderr)
    return path
