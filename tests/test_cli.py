"""Tests for the CLI and the interactive demos driven by scripted input."""

import json
import logging

import pytest
from typer.testing import CliRunner

from conftest import FakeTerminal
from termgrid.cli.app import create_app
from termgrid.cli.demo import BRUSHES, PaintDemo, run_keys, run_paint
from termgrid.codec.frame_parser import parse_frame
from termgrid.core.color import map6to8
from termgrid.core.constants import RESET_SEQUENCE
from termgrid.core.grid import new_grid
from termgrid.keys.loop import LoopControl
from termgrid.logging_setup import configure_logging
from termgrid.render.text import TextRenderer


runner = CliRunner()


class TestPaletteCommand:
    """Tests for `termgrid palette`."""

    def test_json(self) -> None:
        result = runner.invoke(create_app(), ["palette", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 64
        assert data[0] == {"color": 0, "rgb": [0, 0, 0], "index": 16}
        assert data[63] == {"color": 63, "rgb": [3, 3, 3], "index": 231}

    def test_table(self) -> None:
        result = runner.invoke(create_app(), ["palette"])
        assert result.exit_code == 0
        assert "231" in result.stdout


class TestPaintDemo:
    """Tests for the repl-driven paint demo."""

    def test_moves_and_paints(self) -> None:
        grid = new_grid(4, 6, FakeTerminal())
        demo = PaintDemo(grid)
        for event in ("right", "down", "paint", "color", "left"):
            assert demo.handle(event) is LoopControl.LOOP
        assert demo.painted == {(1, 1): BRUSHES[0]}
        assert (demo.y, demo.x, demo.brush) == (1, 0, 1)
        assert grid.get(1, 1).bg == map6to8(BRUSHES[0])
        assert grid.get(1, 0).char == '@'

    def test_cursor_stays_inside_canvas(self) -> None:
        grid = new_grid(3, 3, FakeTerminal())
        demo = PaintDemo(grid)
        for _ in range(5):
            demo.handle("down")
            demo.handle("right")
        # Bottom row is the status bar
        assert (demo.y, demo.x) == (1, 2)

    def test_quit(self) -> None:
        demo = PaintDemo(new_grid(2, 2, FakeTerminal()))
        assert demo.handle("quit") is LoopControl.STOP

    def test_run_paint_with_snapshot(self, tmp_path) -> None:
        terminal = FakeTerminal(["l", " ", "l", "q"])
        grid = new_grid(3, 8, terminal)
        path = tmp_path / "final.txt"
        run_paint(grid, snapshot=path)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "  @     "
        assert lines[2].startswith(" 0,2")
        assert terminal.raw is False
        assert RESET_SEQUENCE in terminal.written

    def test_frames_decode(self) -> None:
        terminal = FakeTerminal()
        grid = new_grid(3, 4, terminal)
        demo = PaintDemo(grid)
        demo.handle("down")
        rows = parse_frame(terminal.written)
        assert rows[1][0].char == '@'


class TestKeysDemo:
    """Tests for the threaded keys demo."""

    def test_key_and_quit(self) -> None:
        terminal = FakeTerminal(["a", "z", "q"])
        grid = new_grid(5, 20, terminal)
        run_keys(grid, tick_interval=0.05)

        text = TextRenderer().render(grid).splitlines()
        assert text[1] == " a"
        assert text[2] == " z"
        assert terminal.raw is False

    def test_needs_two_rows(self) -> None:
        terminal = FakeTerminal(["a", "q"])
        with pytest.raises(ValueError):
            run_keys(new_grid(1, 20, terminal), tick_interval=0.05)
        assert terminal.reads == 0
        assert terminal.written == ""


class TestLogging:
    """Tests for logging configuration."""

    def test_file_handler(self, tmp_path) -> None:
        log_file = tmp_path / "termgrid.log"
        logger = configure_logging("debug", log_file)
        try:
            logging.getLogger("termgrid.keys.loop").debug("hello")
            for handler in logger.handlers:
                handler.flush()
            assert "hello" in log_file.read_text(encoding="utf-8")
            assert len(logger.handlers) == 1
        finally:
            configure_logging("WARNING")

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging("INFO")
        logger = configure_logging("WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
