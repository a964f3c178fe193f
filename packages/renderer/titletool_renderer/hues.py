"""Built-in gradient names and their hue angles."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from titletool_core.errors import GradientNameNotFound
from titletool_core.models import Color

from .color import hsv_to_rgb

HUES = MappingProxyType(
    {
        "red": 360.0,
        "orange": 30.0,
        "yellow": 60.0,
        "green": 120.0,
        "cyan": 180.0,
        "azure": 210.0,
        "blue": 240.0,
        "violet": 270.0,
        "magenta": 300.0,
        "rose": 330.0,
    }
)


@dataclass(frozen=True)
class GradientColors:
    start: Color
    end: Color


def lookup(name: str) -> float | None:
    return HUES.get(name)


def list_gradients() -> list[str]:
    return sorted(HUES.keys())


def gradient_options() -> str:
    return ", ".join(list_gradients())


def gradient_colors(name: str) -> GradientColors:
    """Saturated mid tone at the top, desaturated brighter tone at the bottom."""
    hue = lookup(name)
    if hue is None:
        raise GradientNameNotFound(name, list_gradients())
    return GradientColors(
        start=hsv_to_rgb(hue, 1.0, 0.5),
        end=hsv_to_rgb(hue, 0.5, 0.8),
    )
