"""Escape sequences and defaults shared by the grid and its renderers."""

ESC = "\x1b"
CSI = f"{ESC}["

CLEAR_SCREEN = f"{CSI}2J"
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CURSOR_ORIGIN = f"{CSI}0;0H"
RESET_ATTRIBUTES = f"{CSI}0m"

# Emitted before every frame
DRAW_PREFIX = HIDE_CURSOR + CURSOR_ORIGIN
# Emitted by Grid.reset()
RESET_SEQUENCE = RESET_ATTRIBUTES + SHOW_CURSOR

LINE_TERMINATOR = "\n"

# Per-cell SGR, color code always three digits wide
FG_TEMPLATE = CSI + "38;5;{:03d}m"
BG_TEMPLATE = CSI + "48;5;{:03d}m"

FG_SGR: tuple[str, ...] = tuple(FG_TEMPLATE.format(i) for i in range(256))
BG_SGR: tuple[str, ...] = tuple(BG_TEMPLATE.format(i) for i in range(256))

# Two color sequences plus the glyph
CELL_COST = len(FG_SGR[0]) + len(BG_SGR[0]) + 1

# Defaults for freshly built grids, as 6-bit colors
DEFAULT_CHAR = " "
DEFAULT_FG6 = 63  # white
DEFAULT_BG6 = 0   # black
