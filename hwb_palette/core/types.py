"""Shared types for hwb-palette: RGB, HWB, HSL, Render, RenderReport."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple


class RGB(NamedTuple):
    """Three 8-bit channels, 0-255."""

    red: int
    green: int
    blue: int


class HWB(NamedTuple):
    """Fixed-point HWB colour.

    hue is in tenths of a degree (0-3599), whiteness and blackness are
    permille (0-1000). whiteness + blackness >= 1000 is a gray.
    """

    hue: int
    whiteness: int
    blackness: int


@dataclass(frozen=True)
class HSL:
    """Float HSL colour. Values are not range checked."""

    hue: float  # degrees
    saturation: float  # 0.0-1.0
    luminance: float  # 0.0-1.0

    @classmethod
    def black(cls) -> HSL:
        return cls(0.0, 0.0, 0.0)

    def to_rgb(self) -> RGB:
        from hwb_palette.core.hsl import hsl_to_rgb

        return hsl_to_rgb(self)

    def __str__(self) -> str:
        from hwb_palette.core.fixed import rgb_to_hex

        return rgb_to_hex(self.to_rgb())


class Render:
    """A self-registering palette render.

    Usage in a render module:

        render = Render(name='palette', help='HWB whiteness x blackness grid')

        @render.run
        def run(settings, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, settings: Any, report: RenderReport, args: Any) -> None:
        """Execute the render's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Render {self.name} has no run function')
        self._run_fn(settings, report, args)


@dataclass
class RenderReport:
    """Accumulates the images written by renders for text/JSON output."""

    out_dir: str = ''
    images: list[dict[str, Any]] = field(default_factory=list)

    def add(self, render_name: str, path: str, width: int, height: int, size: int) -> None:
        """Record one written image."""
        self.images.append(
            {
                'render': render_name,
                'path': path,
                'width': width,
                'height': height,
                'bytes': size,
            }
        )

    def by_render(self) -> dict[str, list[dict[str, Any]]]:
        grouped: dict[str, list[dict[str, Any]]] = {}
        for image in self.images:
            grouped.setdefault(image['render'], []).append(image)
        return grouped
