"""Typed value models shared by configuration and rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .errors import ConfigurationError


class Color(NamedTuple):
    """Linear RGB color, channels nominally in [0, 1]."""

    r: float
    g: float
    b: float

    def rgba(self, alpha: float = 1.0) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, alpha)


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"size must be positive, got {self.width}, {self.height}")

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}, {self.height}"
