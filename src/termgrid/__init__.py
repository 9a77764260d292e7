"""
termgrid: colored character-cell grids and key-binding input for terminals

Quick Start:
    >>> import queue
    >>> import termgrid as tg
    >>> grid = tg.new_grid(10, 40)
    >>> grid.text(0, 0, "hello", fg=63, bg=0)
    >>> grid.draw()
    >>> events = queue.Queue()
    >>> loop = tg.InputLoop([tg.Action(["q"], "quit")], events, grid)
    >>> loop.start()

Features:
    - 64-color (2 bits per channel) cube mapped onto the xterm 256-color palette
    - Fixed-size grid with validated set/text mutation
    - Full-frame rendering with constant frame length
    - Key maps with named keys, ctrl/alt sequences, and ambiguous-prefix handling
    - Threaded input loop feeding a queue, or a synchronous repl
    - Plain-text and PNG snapshots of a grid
"""

__version__ = "0.1.0"

# Core types
from termgrid.core.cell import Cell
from termgrid.core.color import map6to8, palette, rgb6
from termgrid.core.grid import Grid, new_grid

# Errors
from termgrid.errors import (
    FrameFormatError,
    InvalidColor,
    InvalidDimension,
    InvalidGlyph,
    IOFailure,
    OutOfBounds,
    TermGridError,
)

# Terminal and input
from termgrid.term.terminal import Terminal
from termgrid.keys.input import Key, alt, ctrl, esc
from termgrid.keys.keymap import Action, KeyMap
from termgrid.keys.loop import InputLoop, LoopControl, StopSignal, input_loop, repl

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Grid",
    "new_grid",
    "map6to8",
    "palette",
    "rgb6",
    # Errors
    "TermGridError",
    "InvalidDimension",
    "OutOfBounds",
    "InvalidColor",
    "InvalidGlyph",
    "IOFailure",
    "FrameFormatError",
    # Terminal and input
    "Terminal",
    "Key",
    "alt",
    "ctrl",
    "esc",
    "Action",
    "KeyMap",
    "InputLoop",
    "LoopControl",
    "StopSignal",
    "input_loop",
    "repl",
]
