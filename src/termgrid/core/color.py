"""6-bit color cube and its mapping onto the xterm 256-color palette.

A 6-bit color packs three 2-bit channels as ``RRGGBB``, giving four levels
per channel. Terminals with the 256-color SGR extension expose a 6x6x6 cube
at indices 16-231, so each 2-bit level is placed on the cube level whose
intensity is nearest to an even quarter split of 0-255:

    ======  =============  ==========  ===============
    level   ideal (0-255)  cube level  xterm intensity
    ======  =============  ==========  ===============
    0       0              0           0
    1       85             1           95
    2       170            3           175
    3       255            5           255
    ======  =============  ==========  ===============

The resulting index is ``16 + 36*r + 6*g + b`` over the cube levels. This
table is canonical: ``map6to8(0) == 16`` (black) and ``map6to8(63) == 231``
(white).
"""

from __future__ import annotations

from termgrid.errors import InvalidColor


MIN_COLOR = 0
MAX_COLOR = 63

# 2-bit channel level -> xterm cube level (0-5)
CUBE_LEVELS: tuple[int, ...] = (0, 1, 3, 5)

# xterm cube level -> channel intensity
CUBE_INTENSITIES: tuple[int, ...] = (0, 95, 135, 175, 215, 255)

# Standard 16 system colors (xterm defaults)
SYSTEM_RGB: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0), (205, 0, 0), (0, 205, 0), (205, 205, 0),
    (0, 0, 238), (205, 0, 205), (0, 205, 205), (229, 229, 229),
    (127, 127, 127), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (92, 92, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
)


def _build_table() -> tuple[int, ...]:
    table = []
    for c in range(MAX_COLOR + 1):
        r, g, b = split_channels(c)
        table.append(16 + 36 * CUBE_LEVELS[r] + 6 * CUBE_LEVELS[g] + CUBE_LEVELS[b])
    return tuple(table)


def split_channels(c: int) -> tuple[int, int, int]:
    """Split a 6-bit color into its (r, g, b) 2-bit levels. No validation."""
    return (c >> 4) & 0b11, (c >> 2) & 0b11, c & 0b11


def validate_color(c: int) -> None:
    """Raise InvalidColor unless ``c`` is an int in [0, 63]."""
    if isinstance(c, bool) or not isinstance(c, int):
        raise InvalidColor(f"Color must be an int in [0, 63], got {c!r}")
    if not MIN_COLOR <= c <= MAX_COLOR:
        raise InvalidColor(f"Color must be in [0, 63], got {c}")


def map6to8(c: int) -> int:
    """Map a 6-bit color to its xterm 256-color palette index."""
    validate_color(c)
    return _TABLE[c]


def rgb6(r: int, g: int, b: int) -> int:
    """Build a 6-bit color from three channel levels, each 0-3."""
    for level in (r, g, b):
        if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= 3:
            raise InvalidColor(f"Channel levels must be 0-3, got ({r}, {g}, {b})")
    return (r << 4) | (g << 2) | b


def palette() -> tuple[int, ...]:
    """Return the canonical table: entry ``c`` is ``map6to8(c)``."""
    return _TABLE


def palette_rgb(index: int) -> tuple[int, int, int]:
    """Return the RGB triple xterm uses for a 256-color palette index."""
    if not 0 <= index <= 255:
        raise ValueError(f"256-color index must be 0-255, got {index}")
    if index < 16:
        return SYSTEM_RGB[index]
    if index < 232:
        n = index - 16
        return (
            CUBE_INTENSITIES[n // 36],
            CUBE_INTENSITIES[(n // 6) % 6],
            CUBE_INTENSITIES[n % 6],
        )
    gray = 8 + 10 * (index - 232)
    return (gray, gray, gray)


_TABLE: tuple[int, ...] = _build_table()
