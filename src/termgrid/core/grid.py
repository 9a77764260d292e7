"""Grid - fixed-size 2D array of cells bound to a terminal."""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterator, Optional

from termgrid.core.cell import Cell
from termgrid.core.color import map6to8, validate_color
from termgrid.core.constants import (
    CLEAR_SCREEN,
    DEFAULT_BG6,
    DEFAULT_CHAR,
    DEFAULT_FG6,
    RESET_SEQUENCE,
)
from termgrid.errors import InvalidDimension, InvalidGlyph, OutOfBounds
from termgrid.render.terminal import TerminalRenderer
from termgrid.term.terminal import Terminal, TerminalHandle


logger = logging.getLogger(__name__)


def _validate_glyph(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidGlyph(f"Glyph must be a single character, got {char!r}")
    if unicodedata.category(char) in ("Cc", "Cs"):
        raise InvalidGlyph(f"Glyph must not be a control character, got {char!r}")


class Grid:
    """
    A height x width grid of Cells that renders itself onto a terminal.

    Cells live in a flat row-major list. Every mutating call validates all
    of its arguments before touching a cell, so a rejected call leaves the
    grid exactly as it was.

    ``draw`` reuses a single render buffer and is not reentrant; callers
    that mutate and draw from several threads must serialize those calls.
    """

    def __init__(self, height: int, width: int, terminal: TerminalHandle) -> None:
        if height < 1:
            raise InvalidDimension(f"Height must be positive, got {height}")
        if width < 1:
            raise InvalidDimension(f"Width must be positive, got {width}")
        self.height = height
        self.width = width
        self.terminal = terminal
        fg = map6to8(DEFAULT_FG6)
        bg = map6to8(DEFAULT_BG6)
        self._cells: list[Cell] = [
            Cell(char=DEFAULT_CHAR, fg=fg, bg=bg) for _ in range(height * width)
        ]
        self._renderer = TerminalRenderer()

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"

    def __enter__(self) -> "Grid":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reset()

    def _index(self, y: int, x: int) -> int:
        return y * self.width + x

    def _check_coordinate(self, name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise OutOfBounds(f"{name}={value!r} is not an integer position")

    def _check_row(self, y: int) -> None:
        self._check_coordinate("y", y)
        if not 0 <= y < self.height:
            raise OutOfBounds(f"y={y} out of bounds (height={self.height})")

    def _check_position(self, y: int, x: int) -> None:
        self._check_row(y)
        self._check_coordinate("x", x)
        if not 0 <= x < self.width:
            raise OutOfBounds(f"x={x} out of bounds (width={self.width})")

    # Mutation

    def set(self, y: int, x: int, char: str, fg: int, bg: int) -> None:
        """Set one cell. ``fg`` and ``bg`` are 6-bit colors."""
        self._check_position(y, x)
        validate_color(fg)
        validate_color(bg)
        _validate_glyph(char)

        cell = self._cells[self._index(y, x)]
        cell.char = char
        cell.fg = map6to8(fg)
        cell.bg = map6to8(bg)

    def text(self, y: int, x: int, text: str, fg: int, bg: int) -> None:
        """Write ``text`` into consecutive cells of row ``y`` starting at ``x``."""
        self._check_row(y)
        self._check_coordinate("x", x)
        if x < 0 or x + len(text) > self.width:
            raise OutOfBounds(
                f"text span x={x}..{x + len(text)} out of bounds (width={self.width})"
            )
        mapped_fg = map6to8(fg)
        mapped_bg = map6to8(bg)
        for char in text:
            _validate_glyph(char)

        start = self._index(y, x)
        for offset, char in enumerate(text):
            cell = self._cells[start + offset]
            cell.char = char
            cell.fg = mapped_fg
            cell.bg = mapped_bg

    def fill(self, char: str, fg: int, bg: int) -> None:
        """Set every cell to the same glyph and colors."""
        _validate_glyph(char)
        mapped_fg = map6to8(fg)
        mapped_bg = map6to8(bg)
        for cell in self._cells:
            cell.char = char
            cell.fg = mapped_fg
            cell.bg = mapped_bg

    # Access

    def get(self, y: int, x: int) -> Cell:
        """Get the cell at row ``y``, column ``x``."""
        self._check_position(y, x)
        return self._cells[self._index(y, x)]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[y, x]."""
        y, x = pos
        return self.get(y, x)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield self._cells[start:start + self.width]

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (y, x, cell) tuples in row-major order."""
        for i, cell in enumerate(self._cells):
            yield i // self.width, i % self.width, cell

    # Terminal output

    @property
    def frame_length(self) -> int:
        """Length in characters of every frame ``draw`` emits."""
        return self._renderer.frame_length(self.height, self.width)

    def render(self) -> str:
        """Build the frame ``draw`` would write, without writing it."""
        return self._renderer.render(self)

    def draw(self) -> None:
        """Render the whole grid and write it to the terminal in one write."""
        self.terminal.write(self._renderer.render(self))

    def clear(self) -> None:
        """Clear the visible screen. Cell contents are kept."""
        self.terminal.write(CLEAR_SCREEN)

    def reset(self) -> None:
        """Restore default attributes and show the cursor."""
        self.terminal.write(RESET_SEQUENCE)


def new_grid(height: int, width: int, terminal: Optional[TerminalHandle] = None) -> Grid:
    """
    Create a grid, acquiring a Terminal on stdin/stdout when none is given.

    Dimensions are checked before the terminal is touched.
    """
    if height < 1:
        raise InvalidDimension(f"Height must be positive, got {height}")
    if width < 1:
        raise InvalidDimension(f"Width must be positive, got {width}")
    if terminal is None:
        terminal = Terminal()
    logger.debug("new grid %dx%d", height, width)
    return Grid(height, width, terminal)
