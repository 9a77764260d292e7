"""Decode frames produced by Grid.draw() back into cells."""

from __future__ import annotations

import re

from termgrid.core.cell import Cell
from termgrid.core.constants import DRAW_PREFIX, LINE_TERMINATOR
from termgrid.errors import FrameFormatError


# ESC[38;5;NNNm ESC[48;5;NNNm <glyph>
CELL_PATTERN = re.compile(r'\x1b\[38;5;(\d{3})m\x1b\[48;5;(\d{3})m(.)', re.DOTALL)


def parse_frame(text: str) -> list[list[Cell]]:
    """
    Parse one frame into rows of Cells holding mapped colors.

    Raises FrameFormatError when the prefix is missing, a cell sequence is
    malformed, the frame stops mid-row, or rows differ in width.
    """
    if not text.startswith(DRAW_PREFIX):
        raise FrameFormatError("Frame does not start with the draw prefix")

    rows: list[list[Cell]] = []
    row: list[Cell] = []
    pos = len(DRAW_PREFIX)
    end = len(text)

    while pos < end:
        if text.startswith(LINE_TERMINATOR, pos):
            rows.append(row)
            row = []
            pos += len(LINE_TERMINATOR)
            continue

        match = CELL_PATTERN.match(text, pos)
        if match is None:
            raise FrameFormatError(f"Malformed cell at offset {pos}: {text[pos:pos + 24]!r}")
        row.append(Cell(char=match.group(3), fg=int(match.group(1)), bg=int(match.group(2))))
        pos = match.end()

    if row:
        raise FrameFormatError("Frame ends without a line terminator")
    if not rows:
        raise FrameFormatError("Frame has no rows")

    width = len(rows[0])
    for y, parsed in enumerate(rows):
        if len(parsed) != width:
            raise FrameFormatError(f"Row {y} has {len(parsed)} cells, expected {width}")

    return rows
