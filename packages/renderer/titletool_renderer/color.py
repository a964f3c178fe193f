"""HSV to RGB conversion used to derive gradient endpoints."""

from __future__ import annotations

import math
import sys
from typing import NamedTuple

from titletool_core.models import Color

_EPSILON = sys.float_info.epsilon


class HSV(NamedTuple):
    hue: float
    saturation: float
    value: float

    def to_rgb(self) -> Color:
        return hsv_to_rgb(self.hue, self.saturation, self.value)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """Six-sector HSV conversion. Hues at or above 360 reset to 0, negative hues wrap."""
    if hue < 0.0:
        hue = hue % 360.0
    if hue >= 360.0:
        # also catches -1e-20 % 360.0, which rounds up to 360.0
        hue = 0.0

    if value < _EPSILON:
        return Color(0.0, 0.0, 0.0)
    if saturation < _EPSILON:
        return Color(value, value, value)

    sector = hue / 60.0
    hi = int(math.floor(sector)) % 6
    f = sector - hi
    p = value * (1.0 - saturation)
    q = value * (1.0 - f * saturation)
    t = value * (1.0 - (1.0 - f) * saturation)

    if hi == 0:
        return Color(value, t, p)
    if hi == 1:
        return Color(q, value, p)
    if hi == 2:
        return Color(p, value, t)
    if hi == 3:
        return Color(p, q, value)
    if hi == 4:
        return Color(t, p, value)
    return Color(value, p, q)
