"""Error types shared by the title tool packages."""

from __future__ import annotations

from pathlib import Path


class TitleToolError(Exception):
    """Base class for all title tool failures."""


class ConfigurationError(TitleToolError):
    """Missing or malformed settings; the run cannot start."""


class GradientNameNotFound(TitleToolError):
    def __init__(self, name: str, options: list[str]) -> None:
        self.name = name
        self.options = list(options)
        super().__init__(f"could not find hue for gradient: {name}")


class OutputWriteError(TitleToolError):
    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"could not write output file {self.path}: {message}")
