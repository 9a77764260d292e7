"""Typer CLI application."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from termgrid.config import Settings
from termgrid.core.color import palette, split_channels
from termgrid.core.grid import new_grid
from termgrid.errors import TermGridError
from termgrid.logging_setup import configure_logging
from termgrid.term.terminal import Terminal


def _grid_size(height: Optional[int], width: Optional[int]) -> tuple[int, int]:
    size = Terminal.size()
    # Leave the last row free so the final newline does not scroll the screen
    return (height or max(2, size.rows - 1), width or size.cols)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termgrid",
        help="Colored character-cell grids and keyboard input for terminals.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def setup(
        log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level (default from TERMGRID_LOG_LEVEL)")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write logs to this file instead of stderr")] = None,
    ) -> None:
        """Configure logging for every command."""
        settings = Settings.from_env()
        configure_logging(log_level or settings.log_level, log_file)

    @app.command("palette")
    def palette_cmd(
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show how the 64 colors map onto the 256-color palette."""
        table = palette()

        if json_output:
            data = [
                {"color": c, "rgb": list(split_channels(c)), "index": index}
                for c, index in enumerate(table)
            ]
            print(json.dumps(data, indent=2))
            return

        view = Table(title="6-bit color → 256-color index")
        view.add_column("6-bit", justify="right")
        view.add_column("r g b", justify="center")
        view.add_column("index", justify="right")
        view.add_column("swatch")
        for c, index in enumerate(table):
            r, g, b = split_channels(c)
            view.add_row(str(c), f"{r} {g} {b}", f"{index:03d}", f"[on color({index})]      [/]")
        console.print(view)

    @app.command()
    def demo(
        height: Annotated[Optional[int], typer.Option("--height", min=2, help="Grid rows (default: terminal height)")] = None,
        width: Annotated[Optional[int], typer.Option("--width", min=1, help="Grid columns (default: terminal width)")] = None,
        snapshot: Annotated[Optional[Path], typer.Option("--snapshot", "-s", help="Save the final grid as .png or .txt")] = None,
    ) -> None:
        """Paint cells with the arrow keys (space paints, c changes color, q quits)."""
        from termgrid.cli.demo import run_paint

        rows, cols = _grid_size(height, width)
        try:
            run_paint(new_grid(rows, cols), snapshot)
        except TermGridError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        if snapshot is not None:
            console.print(f"[green]Saved snapshot → {snapshot}[/]")

    @app.command()
    def keys(
        height: Annotated[Optional[int], typer.Option("--height", min=2, help="Grid rows (default: terminal height)")] = None,
        width: Annotated[Optional[int], typer.Option("--width", min=1, help="Grid columns (default: terminal width)")] = None,
        tick: Annotated[float, typer.Option("--tick", min=0.05, help="Seconds between timer events")] = 1.0,
    ) -> None:
        """Show key presses and timer ticks sharing one event queue (q quits)."""
        from termgrid.cli.demo import run_keys

        rows, cols = _grid_size(height, width)
        try:
            run_keys(new_grid(rows, cols), tick)
        except TermGridError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    return app
