"""Terminal device access."""

from termgrid.term.terminal import Terminal, TerminalHandle, TerminalSize

__all__ = ["Terminal", "TerminalHandle", "TerminalSize"]
