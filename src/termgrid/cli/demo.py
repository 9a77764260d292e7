"""Interactive demos driving a grid from the keyboard."""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from termgrid.core.color import rgb6
from termgrid.core.grid import Grid
from termgrid.keys.input import Key, ctrl, key_display
from termgrid.keys.keymap import Action
from termgrid.keys.loop import InputLoop, LoopControl, StopSignal, repl
from termgrid.render.image import ImageRenderer
from termgrid.render.text import TextRenderer


logger = logging.getLogger(__name__)

BACKGROUND = rgb6(0, 0, 1)
STATUS_FG = rgb6(3, 3, 3)
STATUS_BG = rgb6(1, 1, 1)

# Colors the paint demo cycles through
BRUSHES: tuple[int, ...] = (
    rgb6(3, 0, 0),
    rgb6(3, 2, 0),
    rgb6(3, 3, 0),
    rgb6(0, 3, 0),
    rgb6(0, 3, 3),
    rgb6(0, 1, 3),
    rgb6(2, 0, 3),
    rgb6(3, 3, 3),
)

PAINT_ACTIONS: list[Action[str]] = [
    Action([Key.UP, "k"], "up"),
    Action([Key.DOWN, "j"], "down"),
    Action([Key.LEFT, "h"], "left"),
    Action([Key.RIGHT, "l"], "right"),
    Action([" "], "paint"),
    Action(["x", Key.DELETE], "erase"),
    Action(["c", Key.TAB], "color"),
    Action(["q", Key.ESCAPE, ctrl("d")], "quit"),
]


class PaintDemo:
    """
    Move a cursor around the grid and paint cells.

    The bottom row is a status bar, so the grid needs at least two rows.
    """

    def __init__(self, grid: Grid) -> None:
        if grid.height < 2:
            raise ValueError("Paint demo needs a grid at least 2 rows high")
        self.grid = grid
        self.canvas_height = grid.height - 1
        self.y = 0
        self.x = 0
        self.brush = 0
        self.painted: dict[tuple[int, int], int] = {}

    def handle(self, event: str) -> LoopControl:
        """Apply one event and redraw. Returns STOP on quit."""
        if event == "quit":
            return LoopControl.STOP
        if event == "up":
            self.y = max(0, self.y - 1)
        elif event == "down":
            self.y = min(self.canvas_height - 1, self.y + 1)
        elif event == "left":
            self.x = max(0, self.x - 1)
        elif event == "right":
            self.x = min(self.grid.width - 1, self.x + 1)
        elif event == "paint":
            self.painted[self.y, self.x] = BRUSHES[self.brush]
        elif event == "erase":
            self.painted.pop((self.y, self.x), None)
        elif event == "color":
            self.brush = (self.brush + 1) % len(BRUSHES)
        self.redraw()
        return LoopControl.LOOP

    def paint(self) -> None:
        """Write the current state into the grid's cells."""
        grid = self.grid
        for y in range(self.canvas_height):
            for x in range(grid.width):
                grid.set(y, x, ' ', STATUS_FG, self.painted.get((y, x), BACKGROUND))
        under = self.painted.get((self.y, self.x), BACKGROUND)
        grid.set(self.y, self.x, '@', BRUSHES[self.brush], under)

        status = f" {self.y},{self.x}  {key_display(Key.TAB)}/c color  space paint  q quit"
        status = status[:grid.width].ljust(grid.width)
        grid.text(self.canvas_height, 0, status, STATUS_FG, STATUS_BG)

    def redraw(self) -> None:
        self.paint()
        self.grid.draw()


def run_paint(grid: Grid, snapshot: Optional[Path] = None) -> None:
    """Run the paint demo until the user quits."""
    demo = PaintDemo(grid)
    grid.clear()
    demo.redraw()
    try:
        repl(PAINT_ACTIONS, grid, demo.handle)
    finally:
        grid.reset()
        grid.clear()
    if snapshot is not None:
        save_snapshot(grid, snapshot)


def save_snapshot(grid: Grid, path: Path) -> Path:
    """Save the grid as plain text (``.txt``) or an image (anything else)."""
    if path.suffix.lower() == ".txt":
        path.write_text(TextRenderer(preserve_whitespace=True).render(grid) + "\n", encoding="utf-8")
    else:
        ImageRenderer().save(grid, path)
    logger.info("snapshot saved to %s", path)
    return path


@dataclass(frozen=True)
class DemoEvent:
    """An event on the shared queue of the keys demo."""
    kind: str   # "key", "tick", or "quit"
    label: str = ""


def _key_actions() -> list[Action[DemoEvent]]:
    actions: list[Action[DemoEvent]] = [
        Action([key], DemoEvent("key", key_display(key))) for key in Key if key is not Key.ESCAPE
    ]
    for char in "abcdefghijklmnoprstuvwxyz0123456789":
        actions.append(Action([char], DemoEvent("key", char)))
    actions.append(Action(["q", Key.ESCAPE], DemoEvent("quit")))
    return actions


def _ticker(events: "queue.Queue[DemoEvent]", signal: StopSignal, interval: float) -> None:
    count = 0
    while not signal.wait(interval):
        count += 1
        events.put(DemoEvent("tick", str(count)))


def run_keys(grid: Grid, tick_interval: float = 1.0) -> None:
    """
    Show key events and timer ticks arriving on one queue.

    An InputLoop thread and a timer thread both feed the queue; this thread
    consumes it and redraws until ``q`` or Escape is read.
    """
    if grid.height < 2:
        raise ValueError("Keys demo needs a grid at least 2 rows high")
    events: "queue.Queue[DemoEvent]" = queue.Queue()
    signal = StopSignal()
    loop = InputLoop(_key_actions(), events, grid, signal)
    ticker = threading.Thread(
        target=_ticker, args=(events, signal, tick_interval), name="termgrid-ticker", daemon=True
    )
    log: list[str] = []
    ticks = "0"

    def redraw() -> None:
        grid.fill(' ', STATUS_FG, BACKGROUND)
        header = f" ticks {ticks}  press keys, q quits"
        grid.text(0, 0, header[:grid.width].ljust(grid.width), STATUS_FG, STATUS_BG)
        visible = log[-(grid.height - 1):]
        for row, line in enumerate(visible, start=1):
            grid.text(row, 0, line[:grid.width], rgb6(3, 3, 0), BACKGROUND)
        grid.draw()

    grid.clear()
    redraw()
    loop.start()
    ticker.start()
    try:
        while not signal.stopped:
            try:
                event = events.get(timeout=0.25)
            except queue.Empty:
                if not loop.running:
                    break
                continue
            if event.kind == "quit":
                signal.stop()
                continue
            if event.kind == "tick":
                ticks = event.label
            else:
                log.append(f" {event.label}")
            redraw()
    finally:
        signal.stop()
        ticker.join()
        loop.join()
        grid.reset()
        grid.clear()
