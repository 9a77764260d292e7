"""Error taxonomy for termgrid.

Validation errors also derive from the builtin exception a caller would
naturally expect (``ValueError`` for bad values, ``IndexError`` for bad
positions), so existing ``except`` clauses keep working.
"""


class TermGridError(Exception):
    """Base class for all termgrid errors."""


class InvalidDimension(TermGridError, ValueError):
    """Grid constructed with a non-positive height or width."""


class OutOfBounds(TermGridError, IndexError):
    """Row, column, or text span outside the grid."""


class InvalidColor(TermGridError, ValueError):
    """Color value outside the 6-bit range [0, 63]."""


class InvalidGlyph(TermGridError, ValueError):
    """Cell glyph that is not exactly one printable character."""


class IOFailure(TermGridError, OSError):
    """Terminal read, write, or mode transition failed."""


class FrameFormatError(TermGridError, ValueError):
    """Rendered frame text that does not follow the draw layout."""
