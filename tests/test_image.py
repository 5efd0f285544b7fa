"""
Unit tests for half-block image rendering.
Run from project root: python -m pytest tests/ -v
"""
import sys
import tempfile
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pngn_image import HALF_BLOCK, image_to_ansi, image_to_ansi_lines
from pngn_match import PaletteMatcher
from pngn_palette import Reset, strip_sequences


class TestImageRendering(unittest.TestCase):

    def setUp(self):
        self.matcher = PaletteMatcher(cache_size=16, enable_cache=True, follow_config=False)

    def test_solid_image(self):
        img = Image.new("RGB", (4, 4), (255, 0, 0))
        lines = image_to_ansi_lines(img, max_width_chars=4, matcher=self.matcher)
        self.assertEqual(len(lines), 2)
        for line in lines:
            self.assertTrue(line.startswith("\033[38;5;9m\033[48;5;9m"))
            self.assertTrue(line.endswith(Reset.ALL))
            self.assertEqual(strip_sequences(line), HALF_BLOCK * 4)
            # one color change per line for a solid image
            self.assertEqual(line.count("\033[38;5;"), 1)
        self.assertEqual(self.matcher.get_stats()['vectorized_pixels'], 16)

    def test_top_and_bottom_colors(self):
        img = Image.new("RGB", (2, 2))
        img.putpixel((0, 0), (95, 0, 0))
        img.putpixel((1, 0), (95, 0, 0))
        img.putpixel((0, 1), (0, 0, 0))
        img.putpixel((1, 1), (0, 0, 0))
        lines = image_to_ansi_lines(img, max_width_chars=2, matcher=self.matcher)
        self.assertEqual(lines, ["\033[38;5;52m\033[48;5;0m" + HALF_BLOCK * 2 + Reset.ALL])

    def test_odd_height_is_padded(self):
        img = Image.new("RGB", (2, 3), (255, 255, 255))
        lines = image_to_ansi_lines(img, max_width_chars=2, char_aspect_ratio=0.5,
                                    matcher=self.matcher)
        self.assertEqual(len(lines), 2)
        self.assertIn("\033[38;5;15m\033[48;5;15m", lines[-1])

    def test_width_is_limited(self):
        img = Image.new("RGB", (40, 20), (0, 0, 0))
        lines = image_to_ansi_lines(img, max_width_chars=10, matcher=self.matcher)
        for line in lines:
            self.assertEqual(len(strip_sequences(line)), 10)

    def test_accepts_rgba_and_paths(self):
        img = Image.new("RGBA", (4, 2), (0, 0, 255, 128))
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "swatch.png"
            img.save(path)
            text = image_to_ansi(path, max_width_chars=4, matcher=self.matcher)
        self.assertEqual(text.count("\n"), 0)
        self.assertIn("\033[38;5;12m", text)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            image_to_ansi("/nonexistent/image.png")

    def test_invalid_arguments(self):
        img = Image.new("RGB", (2, 2))
        with self.assertRaises(ValueError):
            image_to_ansi_lines(img, max_width_chars=0)
        with self.assertRaises(ValueError):
            image_to_ansi_lines(img, char_aspect_ratio=0)


if __name__ == "__main__":
    unittest.main()
