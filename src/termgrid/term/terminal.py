"""Terminal handle: raw mode, blocking character reads, and output writes."""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from typing import ContextManager, Iterator, Optional, Protocol, TextIO

from termgrid.errors import IOFailure


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class TerminalHandle(Protocol):
    """The capabilities a Grid and the input loops need from a terminal."""

    def enter_raw_mode(self) -> None: ...

    def restore_mode(self) -> None: ...

    def raw_mode(self) -> ContextManager[None]: ...

    def read_char(self, timeout: Optional[float] = None) -> Optional[str]: ...

    def write(self, text: str) -> None: ...


class Terminal:
    """
    Terminal I/O over an input and an output stream (stdin/stdout by default).

    Input is read with ``os.read`` on the input descriptor, bypassing Python's
    buffering so ``select`` sees exactly what is pending, and decoded as UTF-8
    one character at a time.
    """

    def __init__(self, input: Optional[TextIO] = None, output: Optional[TextIO] = None) -> None:
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending: deque[str] = deque()
        self._saved_attrs: Optional[list] = None

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    def _input_fd(self) -> int:
        try:
            return self.input.fileno()
        except (OSError, ValueError) as e:
            raise IOFailure(f"Terminal input has no file descriptor: {e}") from e

    # Raw mode

    @property
    def is_raw(self) -> bool:
        return self._saved_attrs is not None

    def enter_raw_mode(self) -> None:
        """
        Switch input to raw mode. Calling it again while raw does nothing.

        Canonical mode, echo, extended input processing, flow control, and
        CR/NL translation on input are turned off. Output processing stays on,
        so a newline still returns the carriage. Signals stay on, so Ctrl-C
        still interrupts. A no-op when input is not a TTY or the platform has
        no termios.
        """
        if self._saved_attrs is not None:
            return
        try:
            import termios
        except ImportError:
            logger.debug("termios unavailable, raw mode skipped")
            return

        fd = self._input_fd()
        if not os.isatty(fd):
            logger.debug("input fd %d is not a tty, raw mode skipped", fd)
            return

        try:
            old = termios.tcgetattr(fd)
            new = termios.tcgetattr(fd)
            new[0] &= ~(termios.IXON | termios.ICRNL | termios.INLCR)
            new[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN)
            new[6][termios.VMIN] = 1
            new[6][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSADRAIN, new)
        except termios.error as e:
            raise IOFailure(f"Could not enter raw mode: {e}") from e

        self._saved_attrs = old
        logger.debug("entered raw mode on fd %d", fd)

    def restore_mode(self) -> None:
        """Restore the input mode saved by ``enter_raw_mode``."""
        if self._saved_attrs is None:
            return
        import termios

        fd = self._input_fd()
        saved, self._saved_attrs = self._saved_attrs, None
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        except termios.error as e:
            raise IOFailure(f"Could not restore terminal mode: {e}") from e
        logger.debug("restored terminal mode on fd %d", fd)

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Raw mode for the duration of the block, restored on every exit path."""
        owner = not self.is_raw
        self.enter_raw_mode()
        try:
            yield
        finally:
            if owner:
                self.restore_mode()

    # I/O

    def read_char(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Read one character, blocking until one arrives.

        With a ``timeout`` (seconds), returns None if nothing arrived in
        time. End of input is an IOFailure.
        """
        if self._pending:
            return self._pending.popleft()

        fd = self._input_fd()
        while True:
            try:
                ready, _, _ = select.select([fd], [], [], timeout)
            except (OSError, ValueError) as e:
                raise IOFailure(f"Terminal read failed: {e}") from e
            if not ready:
                return None

            try:
                data = os.read(fd, 1024)
            except OSError as e:
                raise IOFailure(f"Terminal read failed: {e}") from e
            if not data:
                raise IOFailure("Terminal input closed")

            # A multi-byte character split across reads decodes to ''
            self._pending.extend(self._decoder.decode(data))
            if self._pending:
                return self._pending.popleft()

    def write(self, text: str) -> None:
        """Write text to the terminal and flush it."""
        try:
            self.output.write(text)
            self.output.flush()
        except (OSError, ValueError) as e:
            raise IOFailure(f"Terminal write failed: {e}") from e
