"""Named keys and the raw sequences terminals send for them."""

from __future__ import annotations

from enum import Enum, auto


ESC = '\x1b'


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()

    @property
    def sequences(self) -> tuple[str, ...]:
        """Every raw sequence that produces this key."""
        return KEY_SEQUENCES[self]


# Raw input per key. Arrow, Home/End, and F1-F4 come in both CSI and
# SS3 (application mode) forms.
KEY_SEQUENCES: dict[Key, tuple[str, ...]] = {
    Key.UP: (ESC + '[A', ESC + 'OA'),
    Key.DOWN: (ESC + '[B', ESC + 'OB'),
    Key.RIGHT: (ESC + '[C', ESC + 'OC'),
    Key.LEFT: (ESC + '[D', ESC + 'OD'),
    Key.HOME: (ESC + '[H', ESC + 'OH', ESC + '[1~'),
    Key.END: (ESC + '[F', ESC + 'OF', ESC + '[4~'),
    Key.INSERT: (ESC + '[2~',),
    Key.DELETE: (ESC + '[3~',),
    Key.PAGE_UP: (ESC + '[5~',),
    Key.PAGE_DOWN: (ESC + '[6~',),
    Key.F1: (ESC + 'OP', ESC + '[11~'),
    Key.F2: (ESC + 'OQ', ESC + '[12~'),
    Key.F3: (ESC + 'OR', ESC + '[13~'),
    Key.F4: (ESC + 'OS', ESC + '[14~'),
    Key.F5: (ESC + '[15~',),
    Key.F6: (ESC + '[17~',),
    Key.F7: (ESC + '[18~',),
    Key.F8: (ESC + '[19~',),
    Key.F9: (ESC + '[20~',),
    Key.F10: (ESC + '[21~',),
    Key.F11: (ESC + '[23~',),
    Key.F12: (ESC + '[24~',),
    # Raw mode leaves ICRNL off, so Enter arrives as CR
    Key.ENTER: ('\r', '\n'),
    Key.ESCAPE: (ESC,),
    Key.TAB: ('\t',),
    Key.BACKSPACE: ('\x7f', '\x08'),
}


def ctrl(char: str) -> str:
    """Sequence for Ctrl+``char``: ``ctrl('c') == '\\x03'``."""
    if len(char) != 1:
        raise ValueError(f"ctrl() takes a single character, got {char!r}")
    if char == '?':
        return '\x7f'
    code = ord(char.upper())
    if not 0x40 <= code <= 0x5f:
        raise ValueError(f"No control sequence for {char!r}")
    return chr(code & 0x1f)


def alt(sequence: str) -> str:
    """Sequence for Alt+``sequence``, sent by terminals as an ESC prefix."""
    return ESC + sequence


def esc() -> str:
    """Sequence for the Escape key on its own."""
    return ESC


def key_display(key: Key) -> str:
    """Convert a Key to a short display string."""
    display_map = {
        Key.UP: "↑",
        Key.DOWN: "↓",
        Key.LEFT: "←",
        Key.RIGHT: "→",
        Key.ESCAPE: "Esc",
        Key.BACKSPACE: "Bksp",
        Key.PAGE_UP: "PgUp",
        Key.PAGE_DOWN: "PgDn",
        Key.DELETE: "Del",
        Key.INSERT: "Ins",
    }
    return display_map.get(key, key.name.title())
