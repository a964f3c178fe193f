"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np
from PIL import Image

from titletool_core.models import Size


@dataclass(frozen=True)
class Region:
    """Half-open pixel rectangle ``[xbegin, xend) x [ybegin, yend)``."""

    xbegin: int
    xend: int
    ybegin: int
    yend: int

    def __post_init__(self) -> None:
        if self.xbegin > self.xend or self.ybegin > self.yend:
            raise ValueError(f"Invalid region: {self}")

    @property
    def width(self) -> int:
        return self.xend - self.xbegin

    @property
    def height(self) -> int:
        return self.yend - self.ybegin

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @classmethod
    def from_size(cls, size: Size) -> Region:
        return cls(0, size.width, 0, size.height)


@dataclass(frozen=True)
class TextBlock:
    text: str
    font_size: int
    height: int | None = None
    y: int | None = None

    def measured(self, height: int) -> TextBlock:
        return replace(self, height=height)

    def placed(self, y: int) -> TextBlock:
        return replace(self, y=y)


class Canvas:
    """Float RGBA pixel buffer, indexed ``pixels[y, x, channel]``."""

    def __init__(self, size: Size) -> None:
        self.size = size
        self.pixels = np.zeros((size.height, size.width, 4), dtype=np.float32)

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def roi(self) -> Region:
        return Region.from_size(self.size)

    def to_image(self) -> Image.Image:
        data = np.clip(self.pixels, 0.0, 1.0) * 255.0
        return Image.fromarray(np.rint(data).astype(np.uint8))
