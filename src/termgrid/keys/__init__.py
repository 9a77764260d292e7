"""Keyboard input: key maps, binding decoding, and input loops."""

from termgrid.keys.input import Key, KEY_SEQUENCES, alt, ctrl, esc
from termgrid.keys.keymap import Action, KeyMap
from termgrid.keys.binding import BindingReader
from termgrid.keys.loop import InputLoop, LoopControl, StopSignal, input_loop, repl

__all__ = [
    "Key",
    "KEY_SEQUENCES",
    "alt",
    "ctrl",
    "esc",
    "Action",
    "KeyMap",
    "BindingReader",
    "InputLoop",
    "LoopControl",
    "StopSignal",
    "input_loop",
    "repl",
]
