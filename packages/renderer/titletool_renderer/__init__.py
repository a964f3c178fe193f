"""Renderer package for title image composition."""

from .color import HSV, hsv_to_rgb
from .compose import TitleRenderer, write_image
from .gradient import fill, fill_gradient
from .hues import GradientColors, gradient_colors, gradient_options, list_gradients, lookup
from .layout import TextLayoutEngine, stack_blocks
from .models import Canvas, Region, TextBlock
from .text import TextAlignX, TextAlignY, draw_text, load_font, measure_text, resolve_font

__all__ = [
    "HSV",
    "Canvas",
    "GradientColors",
    "Region",
    "TextAlignX",
    "TextAlignY",
    "TextBlock",
    "TextLayoutEngine",
    "TitleRenderer",
    "draw_text",
    "fill",
    "fill_gradient",
    "gradient_colors",
    "gradient_options",
    "hsv_to_rgb",
    "list_gradients",
    "load_font",
    "lookup",
    "measure_text",
    "resolve_font",
    "stack_blocks",
    "write_image",
]
