"""Cell - atomic unit of the grid."""

from dataclasses import dataclass

from termgrid.core.constants import DEFAULT_CHAR


# Mapped values of DEFAULT_FG6 / DEFAULT_BG6 (see core.color)
DEFAULT_FG = 231
DEFAULT_BG = 16


@dataclass(slots=True)
class Cell:
    """
    A single character cell.

    ``fg`` and ``bg`` hold colors already mapped to the terminal palette;
    mapping happens once, when the grid is mutated, never at draw time.
    """
    char: str = DEFAULT_CHAR
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, fg=self.fg, bg=self.bg)

    def is_default(self) -> bool:
        """Check if this cell still holds the construction defaults."""
        return self.char == DEFAULT_CHAR and self.fg == DEFAULT_FG and self.bg == DEFAULT_BG
