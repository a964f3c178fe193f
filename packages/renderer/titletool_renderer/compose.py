"""
TitleRenderer - orchestrates one title image.

Workflow:
1. Background (hue gradient when a known name is given, flat color otherwise)
2. Layout of the title and subtitle blocks
3. Text drawing, centered horizontally
4. Export through Pillow, format chosen by the file extension
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from titletool_core.config import RenderConfig, TitleJob
from titletool_core.errors import GradientNameNotFound, OutputWriteError
from titletool_core.logging_setup import get_logger

from .gradient import fill, fill_gradient
from .hues import gradient_colors, gradient_options
from .layout import TextLayoutEngine
from .models import Canvas, TextBlock
from .text import TextAlignX, TextAlignY, draw_text, resolve_font

logger = get_logger().getChild("compose")

# Formats Pillow cannot write with an alpha channel.
_RGB_ONLY_FORMATS = {"JPEG", "PPM", "EPS", "PCX"}


def write_image(canvas: Canvas, path: Path) -> Path:
    """
    Encode the canvas to ``path``.

    Raises:
        OutputWriteError: unknown extension, unwritable location or encoder failure.
    """
    path = Path(path)
    image = canvas.to_image()
    fmt = Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise OutputWriteError(path, f"unknown file extension: {path.suffix or '(none)'}")
    Image.init()
    if fmt not in Image.SAVE:
        # read-only plugins such as PSD, FLI and CUR
        raise OutputWriteError(path, f"cannot write format {fmt}")
    if fmt in _RGB_ONLY_FORMATS:
        image = image.convert("RGB")

    try:
        image.save(path, format=fmt)
    except (OSError, ValueError) as exc:
        raise OutputWriteError(path, str(exc)) from exc
    return path


class TitleRenderer:
    """Renders a title job into a canvas and writes it out."""

    def __init__(self, config: RenderConfig | None = None, font_path: str | None = None) -> None:
        self.config = config or RenderConfig()
        self.font_path = font_path or resolve_font(self.config.font_file)
        self.layout_engine = TextLayoutEngine(self.font_path)

    def render(self, job: TitleJob) -> Canvas:
        canvas = Canvas(job.size)
        self._paint_background(canvas, job.gradient)
        self._draw_titles(canvas, job)
        return canvas

    def render_image(self, job: TitleJob) -> Image.Image:
        return self.render(job).to_image()

    def write(self, job: TitleJob) -> Path:
        logger.info(f"Writing title file: {job.output_file}", extra={"event": "write_start"})
        path = write_image(self.render(job), job.output_file)
        logger.info(f"Wrote {job.size.width}x{job.size.height} image to {path}", extra={"event": "write_done"})
        return path

    def _paint_background(self, canvas: Canvas, gradient: str | None) -> None:
        roi = canvas.roi
        if gradient:
            logger.info(f"gradient: {gradient}")
            try:
                colors = gradient_colors(gradient)
            except GradientNameNotFound as exc:
                logger.warning(str(exc), extra={"event": "gradient_not_found"})
                logger.warning(f"available options are: {gradient_options()}")
            else:
                logger.debug(f"gradient colors: {colors.start} -> {colors.end}")
                fill_gradient(canvas, roi, colors.start, colors.end)
                return

        fill(canvas, roi, self.config.background)

    def _draw_titles(self, canvas: Canvas, job: TitleJob) -> None:
        roi = canvas.roi
        height = roi.height
        center_x = roi.xbegin + roi.width // 2
        center_y = roi.ybegin + height // 2

        title, subtitle = self.layout_engine.place(
            TextBlock(job.title, self.config.title_size(height)),
            TextBlock(job.subtitle, self.config.subtitle_size(height)),
            spacing=self.config.spacing(height),
            center_y=center_y,
        )
        logger.debug(f"layout: title_y={title.y} subtitle_y={subtitle.y}")

        for block in (title, subtitle):
            draw_text(
                canvas,
                center_x,
                block.y,
                block.text,
                block.font_size,
                self.font_path,
                self.config.foreground,
                align_x=TextAlignX.CENTER,
                align_y=TextAlignY.TOP,
            )
