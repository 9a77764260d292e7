"""Render a Grid to the escape sequences written by Grid.draw()."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from termgrid.core.constants import BG_SGR, CELL_COST, DRAW_PREFIX, FG_SGR, LINE_TERMINATOR

if TYPE_CHECKING:
    from termgrid.core.grid import Grid


class TerminalRenderer:
    """
    Serialize every cell of a Grid into one frame.

    Each cell costs the same number of characters (two fixed-width color
    sequences and its glyph), so every frame of a given grid has the same
    length and the one buffer is rebuilt in place on each call. No diffing:
    every frame carries the whole grid.
    """

    def __init__(self) -> None:
        self._buffer = io.StringIO()

    @staticmethod
    def frame_length(height: int, width: int) -> int:
        """Characters in a frame for a grid of the given size."""
        return len(DRAW_PREFIX) + height * width * CELL_COST + height * len(LINE_TERMINATOR)

    def render(self, grid: "Grid") -> str:
        """Render the grid to a single frame string."""
        buffer = self._buffer
        buffer.seek(0)
        buffer.truncate()
        write = buffer.write

        write(DRAW_PREFIX)
        for row in grid.rows():
            for cell in row:
                write(FG_SGR[cell.fg])
                write(BG_SGR[cell.bg])
                write(cell.char)
            write(LINE_TERMINATOR)

        return buffer.getvalue()
