"""Flat and vertical gradient fills over a canvas region."""

from __future__ import annotations

import numpy as np

from titletool_core.models import Color

from .models import Canvas, Region


def fill(canvas: Canvas, region: Region, color: Color) -> None:
    if region.empty:
        return
    canvas.pixels[region.ybegin : region.yend, region.xbegin : region.xend] = color.rgba(1.0)


def fill_gradient(canvas: Canvas, region: Region, start: Color, end: Color) -> None:
    """Blend from ``start`` on the first row to ``end`` on the last row."""
    if region.empty:
        return

    rows = np.arange(region.height, dtype=np.float64)
    blend = rows / max(region.height - 1, 1)
    blend = blend[:, np.newaxis]
    top = np.asarray(start, dtype=np.float64)
    bottom = np.asarray(end, dtype=np.float64)
    colors = (1.0 - blend) * top + blend * bottom

    target = canvas.pixels[region.ybegin : region.yend, region.xbegin : region.xend]
    target[:, :, :3] = colors[:, np.newaxis, :]
    target[:, :, 3] = 1.0
