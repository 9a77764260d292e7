"""Shared fixtures: a scripted terminal that needs no TTY."""

from __future__ import annotations

import io
import time
from collections import deque
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Optional, Union

import pytest

from termgrid.core.grid import Grid, new_grid
from termgrid.errors import IOFailure


class FakeTerminal:
    """
    In-memory terminal.

    ``script`` items are handed out one per ``read_char`` call. A None item
    acts as a read that timed out and an exception instance is raised. Once
    the script runs out, a read with a timeout sleeps and returns None, and
    a blocking read fails like closed input.
    """

    def __init__(
        self,
        script: Iterable[Union[str, None, BaseException]] = (),
        on_read: Optional[Callable[[int, str], None]] = None,
    ) -> None:
        self.script: deque = deque(script)
        self.on_read = on_read
        self.output = io.StringIO()
        self.writes: list[str] = []
        self.raw = False
        self.raw_entries = 0
        self.restores = 0
        self.reads = 0
        self.timeouts: list[Optional[float]] = []

    def enter_raw_mode(self) -> None:
        if not self.raw:
            self.raw = True
            self.raw_entries += 1

    def restore_mode(self) -> None:
        if self.raw:
            self.raw = False
            self.restores += 1

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        owner = not self.raw
        self.enter_raw_mode()
        try:
            yield
        finally:
            if owner:
                self.restore_mode()

    def feed(self, chars: Iterable[str]) -> None:
        self.script.extend(chars)

    def read_char(self, timeout: Optional[float] = None) -> Optional[str]:
        self.timeouts.append(timeout)
        if not self.script:
            if timeout is None:
                raise IOFailure("Terminal input closed")
            time.sleep(timeout)
            return None
        item = self.script.popleft()
        if item is None:
            return None
        if isinstance(item, BaseException):
            raise item
        self.reads += 1
        if self.on_read is not None:
            self.on_read(self.reads, item)
        return item

    def write(self, text: str) -> None:
        self.writes.append(text)
        self.output.write(text)

    @property
    def written(self) -> str:
        return self.output.getvalue()


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def grid(terminal: FakeTerminal) -> Grid:
    """A 3x5 grid on a fake terminal."""
    return new_grid(3, 5, terminal)
