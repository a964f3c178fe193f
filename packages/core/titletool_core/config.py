"""Render settings schema, job description and load helpers."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from PIL import ImageColor

from .errors import ConfigurationError
from .models import Color, Size


DEFAULT_FONT_FILE = "Roboto.ttf"

_SIZE_RE = re.compile(r"^\s*(-?\d+)\s*,\s*(-?\d+)\s*$")


@dataclass(frozen=True)
class RenderConfig:
    title_size_ratio: float = 0.2
    subtitle_size_ratio: float = 0.1
    spacing_ratio: float = 0.08
    background: Color = Color(0.0, 0.0, 0.0)
    foreground: Color = Color(1.0, 1.0, 1.0)
    size: Size = field(default_factory=lambda: Size(1024, 1024))
    font_file: str = DEFAULT_FONT_FILE

    def title_size(self, height: int) -> int:
        return int(height * self.title_size_ratio)

    def subtitle_size(self, height: int) -> int:
        return int(height * self.subtitle_size_ratio)

    def spacing(self, height: int) -> int:
        return int(height * self.spacing_ratio)


@dataclass(frozen=True)
class TitleJob:
    """One invocation's inputs, built once from the command line."""

    output_file: Path
    size: Size
    title: str = ""
    subtitle: str = ""
    gradient: str | None = None


def parse_size(text: str) -> Size:
    """Parse ``"W,H"`` into a positive :class:`Size`."""
    match = _SIZE_RE.match(text or "")
    if match is None:
        raise ConfigurationError(f"could not parse size from string: {text}")
    return Size(int(match.group(1)), int(match.group(2)))


def parse_color(value: Any) -> Color:
    """Accept ``"#RRGGBB"``/CSS names or a sequence of three floats in [0, 1]."""
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value)
        except ValueError as exc:
            raise ConfigurationError(f"invalid color: {value!r}") from exc
        return Color(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)

    if isinstance(value, (list, tuple)) and len(value) == 3:
        try:
            channels = [float(v) for v in value]
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"invalid color: {value!r}") from exc
        if any(c < 0.0 or c > 1.0 for c in channels):
            raise ConfigurationError(f"color channels must be within [0, 1]: {value!r}")
        return Color(*channels)

    raise ConfigurationError(f"invalid color: {value!r}")


def _parse_ratio(name: str, value: Any) -> float:
    try:
        ratio = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if ratio <= 0.0:
        raise ConfigurationError(f"{name} must be positive, got {ratio}")
    return min(ratio, 1.0)


def _parse_config_size(value: Any) -> Size:
    if isinstance(value, str):
        return parse_size(value)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return Size(int(value[0]), int(value[1]))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"invalid size: {value!r}") from exc
    raise ConfigurationError(f"invalid size: {value!r}")


def _merge(raw: dict[str, Any]) -> RenderConfig:
    known = {f.name for f in fields(RenderConfig)}
    values: dict[str, Any] = {}
    for key, value in raw.items():
        if key not in known:
            continue
        if key.endswith("_ratio"):
            values[key] = _parse_ratio(key, value)
        elif key in ("background", "foreground"):
            values[key] = parse_color(value)
        elif key == "size":
            values[key] = _parse_config_size(value)
        elif key == "font_file":
            if not isinstance(value, str) or not value:
                raise ConfigurationError("font_file must be a non-empty string")
            values[key] = value
    return RenderConfig(**values)


def load_config(path: Path) -> RenderConfig:
    """Read a JSON render config, keeping defaults for anything not given."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"could not read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"invalid JSON in config file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"config file {path} must contain a JSON object")
    return _merge(raw)
