"""
Unit tests for the swatch browser example script.
Run from project root: python -m pytest tests/ -v
"""
import io
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import example_swatches
from pngn_families import bg, fg
from pngn_palette import strip_sequences


def run_main(*args):
    out, err = io.StringIO(), io.StringIO()
    with mock.patch.object(sys, 'argv', ['example_swatches.py', *args]):
        with redirect_stdout(out), redirect_stderr(err):
            code = example_swatches.main()
    return code, out.getvalue(), err.getvalue()


class TestSwatches(unittest.TestCase):

    def test_family_rows(self):
        rows = example_swatches.family_rows(fg.grayscale.White)
        self.assertIn("GrayScaleColors.White", rows[0])
        self.assertIn("(4 colors)", rows[0])
        self.assertEqual(strip_sequences(rows[1]), example_swatches.BLOCK * 4)
        self.assertEqual(len(rows), 2 + 4)
        self.assertTrue(strip_sequences(rows[2]).strip().startswith("std_White"))

    def test_background_strip_uses_blank_cells(self):
        rows = example_swatches.family_rows(bg.grayscale.Black)
        self.assertEqual(strip_sequences(rows[1]), example_swatches.SWATCH * 4)

    def test_single_family(self):
        code, out, _ = run_main('--family', 'Orange')
        self.assertEqual(code, 0)
        self.assertIn("TertiaryColors.Orange", out)
        self.assertNotIn("PrimaryColors.Red", out)

    def test_unknown_family(self):
        code, _, err = run_main('--family', 'Teal')
        self.assertEqual(code, 1)
        self.assertIn("Teal", err)

    def test_rgb_match(self):
        code, out, _ = run_main('--rgb', '95', '0', '0')
        self.assertEqual(code, 0)
        self.assertIn("rgb(95, 0, 0) ->  52", out)

    def test_invalid_rgb(self):
        code, _, err = run_main('--rgb', '300', '0', '0')
        self.assertEqual(code, 1)
        self.assertIn("Invalid color", err)

    def test_missing_image(self):
        code, _, err = run_main('--image', '/nonexistent/logo.png')
        self.assertEqual(code, 1)
        self.assertIn("Image not found", err)


if __name__ == "__main__":
    unittest.main()
