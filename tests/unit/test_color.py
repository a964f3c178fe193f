import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from titletool_renderer.color import HSV, hsv_to_rgb


class HsvToRgbTests(unittest.TestCase):
    def assertColorAlmostEqual(self, actual, expected):
        for a, e in zip(actual, expected):
            self.assertAlmostEqual(a, e, places=6)

    def test_zero_saturation_is_gray(self):
        for hue in (0, 45, 120, 359.5, 360):
            for value in (0.25, 0.5, 1.0):
                self.assertEqual(hsv_to_rgb(hue, 0.0, value), (value, value, value))

    def test_zero_value_is_black(self):
        for hue in (0, 90, 200, 360):
            for saturation in (0.0, 0.5, 1.0):
                self.assertEqual(hsv_to_rgb(hue, saturation, 0.0), (0.0, 0.0, 0.0))

    def test_primaries(self):
        self.assertEqual(hsv_to_rgb(0, 1, 1), (1.0, 0.0, 0.0))
        self.assertEqual(hsv_to_rgb(120, 1, 1), (0.0, 1.0, 0.0))
        self.assertEqual(hsv_to_rgb(240, 1, 1), (0.0, 0.0, 1.0))

    def test_secondaries(self):
        self.assertColorAlmostEqual(hsv_to_rgb(60, 1, 1), (1.0, 1.0, 0.0))
        self.assertColorAlmostEqual(hsv_to_rgb(180, 1, 1), (0.0, 1.0, 1.0))
        self.assertColorAlmostEqual(hsv_to_rgb(300, 1, 1), (1.0, 0.0, 1.0))

    def test_hue_360_wraps_to_zero(self):
        self.assertEqual(hsv_to_rgb(360, 1.0, 0.5), hsv_to_rgb(0, 1.0, 0.5))
        self.assertEqual(hsv_to_rgb(360, 0.5, 0.8), hsv_to_rgb(0, 0.5, 0.8))

    def test_hue_above_360_resets_to_zero(self):
        self.assertEqual(hsv_to_rgb(450, 1, 1), (1.0, 0.0, 0.0))
        self.assertEqual(hsv_to_rgb(720.5, 1.0, 0.5), hsv_to_rgb(0, 1.0, 0.5))

    def test_negative_hue_wraps_modulo_360(self):
        self.assertColorAlmostEqual(hsv_to_rgb(-30, 1, 1), hsv_to_rgb(330, 1, 1))

    def test_fractional_sector(self):
        # hue 30: sector 0, f = 0.5
        self.assertColorAlmostEqual(hsv_to_rgb(30, 1, 1), (1.0, 0.5, 0.0))
        self.assertColorAlmostEqual(hsv_to_rgb(210, 1, 1), (0.0, 0.5, 1.0))

    def test_blue_gradient_endpoints(self):
        self.assertColorAlmostEqual(hsv_to_rgb(240, 1.0, 0.5), (0.0, 0.0, 0.5))
        self.assertColorAlmostEqual(hsv_to_rgb(240, 0.5, 0.8), (0.4, 0.4, 0.8))

    def test_hsv_value_type(self):
        hsv = HSV(120, 1.0, 1.0)
        self.assertEqual(hsv.to_rgb(), (0.0, 1.0, 0.0))
        self.assertEqual(hsv.hue, 120)


if __name__ == "__main__":
    unittest.main()
