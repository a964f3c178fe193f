"""
TextLayoutEngine - vertical placement of the title and subtitle blocks.

The two blocks are stacked as one unit (title, spacing, subtitle) and the
unit is centered on a given row. Horizontal centering is left to the draw
call's alignment mode.
"""

from __future__ import annotations

from typing import Callable

from .models import Region, TextBlock
from .text import measure_text

MeasureFn = Callable[[str, int, str], Region]


def stack_blocks(title_height: int, subtitle_height: int, spacing: int, center_y: int) -> tuple[int, int]:
    """
    Top rows of the title and subtitle for a block centered on ``center_y``.

    Examples:
        >>> stack_blocks(100, 50, 20, 500)
        (415, 535)
    """
    total_height = title_height + spacing + subtitle_height
    title_y = center_y - total_height // 2
    subtitle_y = title_y + title_height + spacing
    return title_y, subtitle_y


class TextLayoutEngine:
    def __init__(self, font_path: str, measure: MeasureFn = measure_text) -> None:
        self.font_path = font_path
        self._measure = measure

    def measure(self, block: TextBlock) -> TextBlock:
        if not block.text:
            return block.measured(0)
        region = self._measure(block.text, block.font_size, self.font_path)
        return block.measured(region.height)

    def place(
        self,
        title: TextBlock,
        subtitle: TextBlock,
        spacing: int,
        center_y: int,
    ) -> tuple[TextBlock, TextBlock]:
        title = self.measure(title)
        subtitle = self.measure(subtitle)
        title_y, subtitle_y = stack_blocks(title.height, subtitle.height, spacing, center_y)
        return title.placed(title_y), subtitle.placed(subtitle_y)

    def layout(self, title: TextBlock, subtitle: TextBlock, spacing: int, center_y: int) -> tuple[int, int]:
        placed_title, placed_subtitle = self.place(title, subtitle, spacing, center_y)
        return placed_title.y, placed_subtitle.y
