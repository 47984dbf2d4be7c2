"""Tests for hwb_palette.core.hsl — float HSL -> RGB pipeline."""

import dataclasses

import pytest
from hwb_palette.core.fixed import rgb_to_hex
from hwb_palette.core.hsl import from_hsl, gray, hsl_primary_colors, primary_colors
from hwb_palette.core.types import HSL, RGB


class TestFromHsl:
    def test_red(self):
        assert rgb_to_hex(from_hsl(0, 1, 1)) == '#ff0000'

    def test_returns_rgb(self):
        assert isinstance(from_hsl(120, 1, 1), RGB)

    def test_full_circle_wraps_to_red(self):
        assert from_hsl(360, 1, 1) == (255, 0, 0)

    def test_negative_hue_wraps(self):
        assert from_hsl(-60, 1, 1) == from_hsl(300, 1, 1)

    def test_zero_luminance_is_black(self):
        assert from_hsl(200, 1, 0) == (0, 0, 0)

    def test_out_of_range_values_saturate(self):
        assert from_hsl(0, 2.0, 1.0) == (255, 0, 0)
        assert from_hsl(0, 0.0, 2.0) == (255, 255, 255)
        assert from_hsl(0, 0.0, -1.0) == (0, 0, 0)

    def test_infinite_channels_saturate(self):
        assert from_hsl(0, 0, 1e308) == (255, 255, 255)
        assert from_hsl(0, 0, -1e308) == (0, 0, 0)
        # red and green are NaN (inf - inf), blue is 0 + inf
        assert from_hsl(0, -1, float('inf')) == (0, 0, 255)

    def test_half_saturation(self):
        # c = 0.5, m = 0.5 -> (1.0, 0.5, 0.5)
        assert from_hsl(0, 0.5, 1.0) == (255, 127, 127)


class TestGray:
    def test_mid(self):
        assert rgb_to_hex(gray(0.5)) == '#7f7f7f'

    def test_quarters(self):
        colours = [rgb_to_hex(gray(i / 4)) for i in range(5)]
        assert colours == ['#000000', '#3f3f3f', '#7f7f7f', '#bfbfbf', '#ffffff']


class TestPrimaryColors:
    def test_thirty_degree_sweep(self):
        colours = [rgb_to_hex(c) for c in primary_colors(30)]
        assert colours == [
            '#ff0000',
            '#ff7f00',
            '#ffff00',
            '#7fff00',
            '#00ff00',
            '#00ff7f',
            '#00ffff',
            '#007fff',
            '#0000ff',
            '#7f00ff',
            '#ff00ff',
            '#ff007f',
        ]

    def test_hsl_primaries(self):
        hues = hsl_primary_colors(15)
        assert len(hues) == 24
        assert hues[1] == HSL(15.0, 1.0, 1.0)


class TestHslType:
    def test_str_is_hex(self):
        assert str(HSL(0.0, 1.0, 1.0)) == '#ff0000'

    def test_black(self):
        assert HSL.black().to_rgb() == (0, 0, 0)

    def test_immutable(self):
        hsl = HSL(0.0, 1.0, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            hsl.hue = 10.0  # type: ignore[misc]
