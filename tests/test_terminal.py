"""Tests for the real Terminal handle over pipes and in-memory streams."""

import io
import os
from typing import Iterator

import pytest

from termgrid.config import Settings
from termgrid.core.grid import new_grid
from termgrid.errors import IOFailure
from termgrid.term.terminal import Terminal, TerminalSize


@pytest.fixture
def pipe() -> Iterator[tuple[Terminal, int]]:
    """A Terminal reading from a pipe, plus the pipe's write end."""
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "r")
    terminal = Terminal(input=reader, output=io.StringIO())
    try:
        yield terminal, write_fd
    finally:
        reader.close()
        try:
            os.close(write_fd)
        except OSError:
            pass


class TestTerminalRead:
    """Tests for read_char."""

    def test_reads_characters_in_order(self, pipe: tuple[Terminal, int]) -> None:
        terminal, write_fd = pipe
        os.write(write_fd, b"ab")
        assert terminal.read_char() == "a"
        assert terminal.read_char(timeout=0) == "b"

    def test_timeout_returns_none(self, pipe: tuple[Terminal, int]) -> None:
        terminal, _ = pipe
        assert terminal.read_char(timeout=0.01) is None

    def test_utf8_split_across_writes(self, pipe: tuple[Terminal, int]) -> None:
        terminal, write_fd = pipe
        encoded = "é".encode("utf-8")
        os.write(write_fd, encoded[:1])
        assert terminal.read_char(timeout=0.01) is None
        os.write(write_fd, encoded[1:])
        assert terminal.read_char(timeout=1) == "é"

    def test_closed_input(self, pipe: tuple[Terminal, int]) -> None:
        terminal, write_fd = pipe
        os.close(write_fd)
        with pytest.raises(IOFailure):
            terminal.read_char()

    def test_no_file_descriptor(self) -> None:
        terminal = Terminal(input=io.StringIO("a"), output=io.StringIO())
        with pytest.raises(IOFailure):
            terminal.read_char()


class TestTerminalModes:
    """Tests for raw mode on a non-TTY input."""

    def test_raw_mode_is_noop_without_tty(self, pipe: tuple[Terminal, int]) -> None:
        terminal, _ = pipe
        with terminal.raw_mode():
            assert terminal.is_raw is False
        terminal.restore_mode()
        assert terminal.is_raw is False


class TestTerminalWrite:
    """Tests for write and grid integration."""

    def test_write_flushes(self) -> None:
        output = io.StringIO()
        Terminal(input=io.StringIO(), output=output).write("\x1b[2J")
        assert output.getvalue() == "\x1b[2J"

    def test_write_to_closed_stream(self) -> None:
        output = io.StringIO()
        output.close()
        with pytest.raises(IOFailure):
            Terminal(input=io.StringIO(), output=output).write("x")

    def test_io_failure_is_os_error(self) -> None:
        assert issubclass(IOFailure, OSError)

    def test_grid_draws_through_terminal(self) -> None:
        output = io.StringIO()
        grid = new_grid(1, 2, Terminal(input=io.StringIO(), output=output))
        grid.draw()
        assert len(output.getvalue()) == grid.frame_length

    def test_size_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def no_terminal() -> os.terminal_size:
            raise OSError("not a terminal")

        monkeypatch.setattr(os, "get_terminal_size", no_terminal)
        assert Terminal.size() == TerminalSize(24, 80)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.ambiguous_timeout == 0.1

    def test_overrides(self) -> None:
        settings = Settings.from_env({
            "TERMGRID_AMBIGUOUS_TIMEOUT": "0.25",
            "TERMGRID_POLL_INTERVAL": "0.5",
            "TERMGRID_LOG_LEVEL": "debug",
        })
        assert settings.ambiguous_timeout == 0.25
        assert settings.poll_interval == 0.5
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["fast", "0", "-1"])
    def test_bad_numbers(self, raw: str) -> None:
        with pytest.raises(ValueError, match="TERMGRID_POLL_INTERVAL"):
            Settings.from_env({"TERMGRID_POLL_INTERVAL": raw})
