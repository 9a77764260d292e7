"""Input loops: publish key bindings to a queue, or hand them to a callback."""

from __future__ import annotations

import logging
import queue
import threading
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Generic, Iterable, Optional, TypeVar, Union

from termgrid.keys.binding import BindingReader
from termgrid.keys.keymap import Action, KeyMap

if TYPE_CHECKING:
    from termgrid.core.grid import Grid


T = TypeVar("T")

logger = logging.getLogger(__name__)

Bindings = Union[KeyMap[T], Iterable[Action[T]]]


class LoopControl(Enum):
    """Whether an input loop should keep reading."""
    LOOP = auto()
    STOP = auto()


class StopSignal:
    """
    Thread-safe stop request for an input loop.

    Starts in ``LoopControl.LOOP``. Only the owner moves it to ``STOP``,
    by calling ``stop()``; the loop reading it never does.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def state(self) -> LoopControl:
        return LoopControl.STOP if self._event.is_set() else LoopControl.LOOP

    @property
    def stopped(self) -> bool:
        return self._event.is_set()

    def stop(self) -> None:
        self._event.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until stopped or ``timeout`` passes; True if stopped."""
        return self._event.wait(timeout)


def _as_keymap(bindings: Bindings[T]) -> KeyMap[T]:
    if isinstance(bindings, KeyMap):
        return bindings
    return KeyMap.from_actions(bindings)


class InputLoop(Generic[T]):
    """
    Read key bindings from a grid's terminal and put their events on a queue.

    Each cycle reads one complete binding, enqueues its event, then checks
    the stop signal, so events reach the queue in the order keys were
    pressed and nothing is enqueued after the stop is observed. Stopping is
    cooperative: a cycle in progress always finishes. While idle the reader
    checks the signal every ``poll_interval`` seconds.

    The terminal is in raw mode for the lifetime of ``run`` and restored on
    every exit path. A terminal failure ends the loop with IOFailure.

    Example:
        events: queue.Queue[str] = queue.Queue()
        loop = InputLoop([Action(["q"], "quit"), Action([Key.UP], "up")], events, grid)
        loop.start()
        ...
        loop.stop()
        loop.join()
    """

    def __init__(
        self,
        bindings: Bindings[T],
        events: "queue.Queue[T]",
        grid: "Grid",
        stop: Optional[StopSignal] = None,
        reader: Optional[BindingReader[T]] = None,
    ) -> None:
        self.keymap = _as_keymap(bindings)
        self.events = events
        self.grid = grid
        self.signal = stop if stop is not None else StopSignal()
        self.reader: BindingReader[T] = reader if reader is not None else BindingReader(grid.terminal)
        self.error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    def run(self) -> None:
        """Run the loop on the calling thread until the signal says stop."""
        terminal = self.grid.terminal
        logger.debug("input loop starting")
        with terminal.raw_mode():
            while True:
                event = self.reader.read_binding(self.keymap, self.signal)
                if event is not None:
                    self.events.put(event)
                if self.signal.state is LoopControl.STOP:
                    break
        logger.debug("input loop stopped")

    def _run_captured(self) -> None:
        try:
            self.run()
        except Exception as e:
            logger.error("input loop failed", exc_info=True)
            self.error = e

    def start(self) -> threading.Thread:
        """Run the loop on a daemon thread."""
        if self._thread is not None:
            raise RuntimeError("Input loop already started")
        self._thread = threading.Thread(target=self._run_captured, name="termgrid-input", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self) -> None:
        """Ask the loop to stop after its current cycle."""
        self.signal.stop()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the loop thread, re-raising the failure that ended it."""
        if self._thread is None:
            raise RuntimeError("Input loop was not started")
        self._thread.join(timeout)
        if self.error is not None:
            raise self.error


def input_loop(
    bindings: Bindings[T],
    events: "queue.Queue[T]",
    grid: "Grid",
    stop: StopSignal,
) -> None:
    """Run an InputLoop on the calling thread until ``stop`` is set."""
    InputLoop(bindings, events, grid, stop).run()


def repl(
    bindings: Bindings[T],
    grid: "Grid",
    logic: Callable[[T], LoopControl],
    reader: Optional[BindingReader[T]] = None,
) -> None:
    """
    Read bindings and hand each event to ``logic`` on the calling thread.

    The loop ends exactly when ``logic`` returns ``LoopControl.STOP``. Raw
    mode is held for the duration and restored on every exit path.
    """
    keymap = _as_keymap(bindings)
    terminal = grid.terminal
    if reader is None:
        reader = BindingReader(terminal)
    with terminal.raw_mode():
        while True:
            event = reader.read_binding(keymap)
            if logic(event) is LoopControl.STOP:
                break
