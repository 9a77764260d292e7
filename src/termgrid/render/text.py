"""Render a Grid's glyphs as plain text."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termgrid.core.grid import Grid


class TextRenderer:
    """One line per row, colors dropped."""

    def __init__(self, preserve_whitespace: bool = False):
        self.preserve_whitespace = preserve_whitespace

    def render(self, grid: "Grid") -> str:
        lines = [''.join(cell.char for cell in row) for row in grid.rows()]
        if self.preserve_whitespace:
            return '\n'.join(lines)
        # Trailing blanks and empty bottom rows carry no content
        return '\n'.join(line.rstrip() for line in lines).rstrip('\n')
