"""Core data structures: color mapping, cells, and the grid."""

from termgrid.core.cell import Cell
from termgrid.core.color import map6to8, palette, palette_rgb, rgb6
from termgrid.core.grid import Grid, new_grid

__all__ = ["Cell", "Grid", "new_grid", "map6to8", "palette", "palette_rgb", "rgb6"]
