import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from titletool_core.models import Color, Size
from titletool_renderer.gradient import fill, fill_gradient
from titletool_renderer.models import Canvas, Region

RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


class GradientTests(unittest.TestCase):
    def test_endpoints_match_colors(self):
        canvas = Canvas(Size(6, 5))
        fill_gradient(canvas, canvas.roi, RED, BLUE)
        np.testing.assert_allclose(canvas.pixels[0, :, :3], np.tile(RED, (6, 1)), atol=1e-6)
        np.testing.assert_allclose(canvas.pixels[-1, :, :3], np.tile(BLUE, (6, 1)), atol=1e-6)

    def test_rows_are_uniform_and_opaque(self):
        canvas = Canvas(Size(7, 9))
        fill_gradient(canvas, canvas.roi, RED, BLUE)
        for y in range(9):
            row = canvas.pixels[y]
            self.assertTrue(np.all(row == row[0]))
        self.assertTrue(np.all(canvas.pixels[:, :, 3] == 1.0))

    def test_blend_is_monotonic(self):
        canvas = Canvas(Size(3, 50))
        fill_gradient(canvas, canvas.roi, RED, BLUE)
        red = canvas.pixels[:, 0, 0]
        blue = canvas.pixels[:, 0, 2]
        self.assertTrue(np.all(np.diff(red) < 0))
        self.assertTrue(np.all(np.diff(blue) > 0))

    def test_midpoint_of_odd_height(self):
        canvas = Canvas(Size(2, 3))
        fill_gradient(canvas, canvas.roi, RED, BLUE)
        np.testing.assert_allclose(canvas.pixels[1, 0], (0.5, 0.0, 0.5, 1.0), atol=1e-6)

    def test_single_row_uses_start_color(self):
        canvas = Canvas(Size(4, 1))
        fill_gradient(canvas, canvas.roi, RED, BLUE)
        np.testing.assert_allclose(canvas.pixels[0, :, :3], np.tile(RED, (4, 1)), atol=1e-6)

    def test_sub_region_leaves_outside_untouched(self):
        canvas = Canvas(Size(5, 5))
        region = Region(1, 4, 2, 4)
        fill_gradient(canvas, region, RED, BLUE)
        mask = np.zeros((5, 5), dtype=bool)
        mask[2:4, 1:4] = True
        self.assertTrue(np.all(canvas.pixels[mask][:, 3] == 1.0))
        self.assertTrue(np.all(canvas.pixels[~mask] == 0.0))
        np.testing.assert_allclose(canvas.pixels[2, 1, :3], RED, atol=1e-6)
        np.testing.assert_allclose(canvas.pixels[3, 3, :3], BLUE, atol=1e-6)

    def test_empty_region_is_noop(self):
        canvas = Canvas(Size(3, 3))
        fill_gradient(canvas, Region(1, 1, 0, 3), RED, BLUE)
        self.assertTrue(np.all(canvas.pixels == 0.0))

    def test_flat_fill(self):
        canvas = Canvas(Size(4, 3))
        fill(canvas, canvas.roi, Color(0.2, 0.4, 0.6))
        np.testing.assert_allclose(canvas.pixels[1, 2], (0.2, 0.4, 0.6, 1.0), atol=1e-6)
        self.assertTrue(np.all(canvas.pixels == canvas.pixels[0, 0]))


class RegionTests(unittest.TestCase):
    def test_from_size(self):
        region = Region.from_size(Size(2350, 1000))
        self.assertEqual((region.xbegin, region.xend, region.ybegin, region.yend), (0, 2350, 0, 1000))
        self.assertEqual(region.width, 2350)
        self.assertEqual(region.height, 1000)

    def test_inverted_region_rejected(self):
        with self.assertRaises(ValueError):
            Region(5, 1, 0, 1)


if __name__ == "__main__":
    unittest.main()
