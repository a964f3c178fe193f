"""Core services for title tool settings, errors, and logging."""

from .config import DEFAULT_FONT_FILE, RenderConfig, TitleJob, load_config, parse_color, parse_size
from .errors import ConfigurationError, GradientNameNotFound, OutputWriteError, TitleToolError
from .logging_setup import configure_logging, get_logger
from .models import Color, Size

__all__ = [
    "Color",
    "ConfigurationError",
    "DEFAULT_FONT_FILE",
    "GradientNameNotFound",
    "OutputWriteError",
    "RenderConfig",
    "Size",
    "TitleJob",
    "TitleToolError",
    "configure_logging",
    "get_logger",
    "load_config",
    "parse_color",
    "parse_size",
]
