"""
Unit tests for Color handles and IndexOutOfRange.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pngn_color import Color, IndexOutOfRange
from pngn_config import OutputConfig, PaletteSystemConfig, reload_config
from pngn_palette import Reset


class TestColorConstruction(unittest.TestCase):
    """Range and type validation."""

    def test_valid_range(self):
        self.assertEqual(Color(0).index, 0)
        self.assertEqual(Color(255, background=True).index, 255)

    def test_out_of_range_raises(self):
        with self.assertRaises(IndexOutOfRange) as ctx:
            Color(256)
        err = ctx.exception
        self.assertEqual(err.family, 'Color')
        self.assertEqual(err.position, 256)
        self.assertEqual(err.valid_range, (0, 255))
        self.assertIn("exceeds the available color range (0 - 255)", str(err))

    def test_negative_index_raises(self):
        with self.assertRaises(IndexOutOfRange) as ctx:
            Color(-1)
        self.assertIn("below the valid range (0 - 255)", str(ctx.exception))

    def test_index_out_of_range_is_index_error(self):
        with self.assertRaises(IndexError):
            Color(1000)

    def test_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            Color(1.0)
        with self.assertRaises(TypeError):
            Color("12")
        with self.assertRaises(TypeError):
            Color(True)

    def test_equality_and_hash(self):
        self.assertEqual(Color(21), Color(21))
        self.assertNotEqual(Color(21), Color(21, background=True))
        self.assertEqual(len({Color(21), Color(21), Color(22)}), 2)

    def test_immutable(self):
        with self.assertRaises(Exception):
            Color(5).index = 6


class TestColorOutput(unittest.TestCase):
    """Sequences, escapes and painting."""

    def tearDown(self):
        reload_config(PaletteSystemConfig())

    def test_sequence(self):
        self.assertEqual(Color(196).sequence(), "\033[38;5;196m")
        self.assertEqual(Color(196, background=True).sequence(), "\033[48;5;196m")
        self.assertEqual(str(Color(7)), "\033[38;5;7m")
        self.assertEqual(int(Color(7)), 7)

    def test_mode_conversion(self):
        color = Color(33)
        self.assertFalse(color.is_background())
        self.assertTrue(color.as_background().is_background())
        self.assertEqual(color.as_background().as_foreground(), color)

    def test_escape_prefixes_matching_reset(self):
        self.assertEqual(Color(9).escape(reset_first=True), Reset.FG_COLOR + "\033[38;5;9m")
        self.assertEqual(Color(9, True).escape(reset_first=True), Reset.BG_COLOR + "\033[48;5;9m")
        self.assertEqual(Color(9).escape(reset_first=False), "\033[38;5;9m")

    def test_escape_follows_config(self):
        reload_config(PaletteSystemConfig(output=OutputConfig(reset_before_color=False)))
        self.assertEqual(Color(9).escape(), "\033[38;5;9m")
        reload_config(PaletteSystemConfig(output=OutputConfig(reset_before_color=True)))
        self.assertEqual(Color(9).escape(), Reset.FG_COLOR + "\033[38;5;9m")

    def test_paint(self):
        reload_config(PaletteSystemConfig())
        painted = Color(208).paint("warn")
        self.assertTrue(painted.endswith("warn" + Reset.ALL))
        self.assertIn("\033[38;5;208m", painted)

    def test_paint_with_color_disabled(self):
        reload_config(PaletteSystemConfig(output=OutputConfig(enable_color=False)))
        self.assertEqual(Color(208).paint("warn"), "warn")

    def test_rgb_and_from_rgb(self):
        self.assertEqual(Color(52).rgb, (95, 0, 0))
        self.assertEqual(Color.from_rgb(95, 0, 0), Color(52))
        self.assertEqual(Color.from_rgb(7, 7, 7, background=True), Color(232, True))


if __name__ == "__main__":
    unittest.main()
