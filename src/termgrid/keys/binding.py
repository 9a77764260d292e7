"""Decode raw terminal input into key map bindings."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from termgrid.config import Settings
from termgrid.keys.keymap import KeyMap

if TYPE_CHECKING:
    from termgrid.keys.loop import StopSignal
    from termgrid.term.terminal import TerminalHandle


T = TypeVar("T")

logger = logging.getLogger(__name__)


class BindingReader(Generic[T]):
    """
    Read characters from a terminal until they spell a bound sequence.

    Matching is longest-first. When the characters read so far are a
    complete binding and also the prefix of a longer one, the reader waits
    up to ``ambiguous_timeout`` seconds for the next character and falls back
    to the shorter binding if none arrives. A longer sequence that breaks off
    part way also falls back to the deepest binding it passed, and the
    characters after that binding are read again. Input that matches nothing
    is dropped one character at a time.

    A character read past the end of a binding is kept for the next call, so
    nothing typed is lost between bindings.
    """

    def __init__(
        self,
        terminal: "TerminalHandle",
        ambiguous_timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ) -> None:
        settings = Settings.from_env()
        self.terminal = terminal
        self.ambiguous_timeout = (
            settings.ambiguous_timeout if ambiguous_timeout is None else ambiguous_timeout
        )
        self.poll_interval = settings.poll_interval if poll_interval is None else poll_interval
        self._pushback: deque[str] = deque()

    def _next_char(self, timeout: Optional[float]) -> Optional[str]:
        if self._pushback:
            return self._pushback.popleft()
        return self.terminal.read_char(timeout)

    def read_binding(self, keymap: KeyMap[T], stop: Optional["StopSignal"] = None) -> Optional[T]:
        """
        Block until a full binding is read and return its value.

        With a ``stop`` signal, the wait between bindings is split into
        ``poll_interval`` slices and None is returned once the signal says
        stop. A binding whose first character has arrived is always read to
        the end.
        """
        root = keymap.root
        node = root
        consumed: list[str] = []
        # Deepest bound node passed so far, and how many characters it used
        match: Optional[T] = None
        match_len = 0

        while True:
            if consumed:
                timeout: Optional[float] = self.ambiguous_timeout
            elif stop is not None:
                timeout = self.poll_interval
            else:
                timeout = None

            char = self._next_char(timeout)

            if char is None:
                if not consumed:
                    if stop is not None and stop.stopped:
                        return None
                    continue
            else:
                child = node.children.get(char)
                if child is not None:
                    node = child
                    consumed.append(char)
                    if node.value is not None:
                        match, match_len = node.value, len(consumed)
                    if node.children:
                        continue
                    if node.value is not None:
                        return node.value
                elif not consumed:
                    logger.debug("dropping unbound input %r", char)
                    continue
                else:
                    # ``char`` starts whatever comes next
                    self._pushback.appendleft(char)

            if match is not None:
                self._pushback.extendleft(reversed(consumed[match_len:]))
                return match

            # Nothing bound starts here: drop one character and rescan the rest
            logger.debug("dropping unbound input %r", consumed[0])
            self._pushback.extendleft(reversed(consumed[1:]))
            node, consumed = root, []
