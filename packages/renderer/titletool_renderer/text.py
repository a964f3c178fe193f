"""Font resolution, text measurement and text drawing on a float canvas."""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from titletool_core.config import DEFAULT_FONT_FILE
from titletool_core.logging_setup import get_logger
from titletool_core.models import Color

from .models import Canvas, Region

logger = get_logger().getChild("text")


class TextAlignX(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextAlignY(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


def resolve_font(name: str) -> str:
    """Absolute paths are used as given, bare names resolve next to the installed package."""
    if Path(name).is_absolute():
        return name
    return str(Path(__file__).resolve().parent / "fonts" / name)


@lru_cache(maxsize=None)
def _font_available(path: str) -> bool:
    try:
        ImageFont.truetype(path, 12)
    except OSError as exc:
        # the default font is not bundled
        level = logging.DEBUG if path == resolve_font(DEFAULT_FONT_FILE) else logging.WARNING
        logger.log(
            level,
            f"could not load font {path} ({exc}), using the built-in font",
            extra={"event": "font_fallback"},
        )
        return False
    return True


@lru_cache(maxsize=64)
def load_font(path: str, size: int) -> ImageFont.FreeTypeFont:
    if _font_available(path):
        return ImageFont.truetype(path, size)
    return ImageFont.load_default(size)


def measure_text(text: str, font_size: int, font_path: str) -> Region:
    """Tight bounding box of ``text`` drawn with its left baseline origin at (0, 0)."""
    if not text or font_size <= 0:
        return Region(0, 0, 0, 0)
    left, top, right, bottom = load_font(font_path, font_size).getbbox(text)
    return Region(int(left), int(right), int(top), int(bottom))


def _aligned_origin(anchor: int, extent: int, align: str) -> int:
    if align == "center":
        return anchor - extent // 2
    if align in ("right", "bottom"):
        return anchor - extent
    return anchor


def draw_text(
    canvas: Canvas,
    x: int,
    y: int,
    text: str,
    font_size: int,
    font_path: str,
    color: Color,
    align_x: TextAlignX = TextAlignX.CENTER,
    align_y: TextAlignY = TextAlignY.TOP,
) -> None:
    """Blend ``text`` into the canvas, aligning its measured box on (x, y)."""
    box = measure_text(text, font_size, font_path)
    if box.empty:
        return

    x0 = _aligned_origin(x, box.width, TextAlignX(align_x).value)
    y0 = _aligned_origin(y, box.height, TextAlignY(align_y).value)

    roi = canvas.roi
    clip_x0, clip_x1 = max(x0, roi.xbegin), min(x0 + box.width, roi.xend)
    clip_y0, clip_y1 = max(y0, roi.ybegin), min(y0 + box.height, roi.yend)
    if clip_x0 >= clip_x1 or clip_y0 >= clip_y1:
        return

    mask = Image.new("L", (clip_x1 - clip_x0, clip_y1 - clip_y0), 0)
    ImageDraw.Draw(mask).text(
        (x0 - box.xbegin - clip_x0, y0 - box.ybegin - clip_y0),
        text,
        font=load_font(font_path, font_size),
        fill=255,
    )
    coverage = np.asarray(mask, dtype=np.float32)[:, :, np.newaxis] / 255.0

    target = canvas.pixels[clip_y0:clip_y1, clip_x0:clip_x1]
    ink = np.asarray(color, dtype=np.float32)
    target[:, :, :3] = target[:, :, :3] * (1.0 - coverage) + ink * coverage
    target[:, :, 3:] = coverage + target[:, :, 3:] * (1.0 - coverage)
