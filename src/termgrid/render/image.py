"""Render a Grid snapshot to a raster image with Pillow."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from PIL import Image, ImageDraw, ImageFont

from termgrid.core.color import palette_rgb

if TYPE_CHECKING:
    from termgrid.core.grid import Grid


logger = logging.getLogger(__name__)


class ImageRenderer:
    """
    Paint each cell as a ``cell_width`` x ``cell_height`` block.

    Backgrounds are filled with the palette color of the cell's ``bg`` and
    glyphs are drawn with Pillow's default font in the ``fg`` color.
    Spaces only paint their background, and glyphs the font cannot encode
    are left out of the image.
    """

    def __init__(self, cell_width: int = 8, cell_height: int = 16):
        if cell_width < 1 or cell_height < 1:
            raise ValueError(f"Cell size must be positive, got {cell_width}x{cell_height}")
        self.cell_width = cell_width
        self.cell_height = cell_height
        self._font = ImageFont.load_default()

    def render(self, grid: "Grid") -> Image.Image:
        """Render the grid to a new RGB image."""
        img = Image.new(
            "RGB",
            (grid.width * self.cell_width, grid.height * self.cell_height),
        )
        draw = ImageDraw.Draw(img)

        for y, x, cell in grid.cells():
            left = x * self.cell_width
            top = y * self.cell_height
            draw.rectangle(
                (left, top, left + self.cell_width - 1, top + self.cell_height - 1),
                fill=palette_rgb(cell.bg),
            )
            if cell.char.isspace():
                continue
            try:
                draw.text((left, top), cell.char, fill=palette_rgb(cell.fg), font=self._font)
            except UnicodeEncodeError:
                logger.debug("no glyph for %r at (%d, %d)", cell.char, y, x)

        return img

    def save(self, grid: "Grid", path: Union[str, Path]) -> Path:
        """Render and save to ``path``; the format follows the file extension."""
        path = Path(path)
        self.render(grid).save(path)
        return path
