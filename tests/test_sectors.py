"""Tests for hwb_palette.core.sectors — the shared hue wheel table."""

from hwb_palette.core.sectors import SECTOR_TABLE, arrange


class TestArrange:
    def test_six_sectors(self):
        assert len(SECTOR_TABLE) == 6

    def test_each_sector_uses_each_slot_once(self):
        for row in SECTOR_TABLE:
            assert sorted(row) == [0, 1, 2]

    def test_integer_table(self):
        assert [arrange(s, 'P', 'S', 'Z') for s in range(6)] == [
            ('P', 'S', 'Z'),
            ('S', 'P', 'Z'),
            ('Z', 'P', 'S'),
            ('Z', 'S', 'P'),
            ('S', 'Z', 'P'),
            ('P', 'Z', 'S'),
        ]

    def test_sector_wraps(self):
        assert arrange(6, 255, 10, 0) == arrange(0, 255, 10, 0)

    def test_float_values(self):
        assert arrange(2, 1.0, 0.5, 0.0) == (0.0, 1.0, 0.5)
