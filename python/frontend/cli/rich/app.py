"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.replay import replay, replay_steps
from backend.engine.search import SearchConfig, SearchResult, solve_by_astar
from backend.errors import SearchExhausted
from backend.loaders import load_board
from backend.models.board import Board
from backend.models.coordinate import Coordinate

console = Console()
logger = logging.getLogger(__name__)


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, moving: Coordinate | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid.

    The tile on *moving* (the one about to slide) is drawn inverted.
    """
    width = len(str(board.width * board.height - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif Coordinate(c, r) == moving:
                cells.append(f"[bold black on cyan]{val:>{width}}[/]")
            elif board.is_tile_correct(c, r):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_stats(result: SearchResult) -> Table:
    """Return a small table with the search counters."""
    stats = result.stats
    table = Table(
        title="Search",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
        show_header=False,
    )
    table.add_column(style="dim")
    table.add_column(justify="right", style="yellow")
    table.add_row("Status", result.status.value)
    table.add_row("Expanded", f"{stats.expanded:,}")
    table.add_row("Generated", f"{stats.generated:,}")
    table.add_row("Duplicates", f"{stats.duplicates:,}")
    table.add_row("Peak frontier", f"{stats.peak_frontier:,}")
    table.add_row("Time", f"{stats.elapsed * 1000:.1f} ms")
    return table


# -- output -------------------------------------------------------------------


def print_board_sequence(board: Board, result: SearchResult) -> None:
    """Print *board* before each move of the solution, then the solved board."""
    moves = result.move_sequence()
    for i, move, current in replay_steps(board, moves):
        h = current.manhattan()
        caption = Text()
        caption.append("Manhattan metric: ", style="dim")
        caption.append(str(h), style="bold yellow")
        caption.append("  cost = ", style="dim")
        caption.append(str(i + h), style="bold yellow")

        panel = Panel(
            Group(
                Align.center(render_board(current, move.source)),
                Align.center(caption),
            ),
            title=f"[bold cyan]{i + 1}. Move  {move}[/bold cyan]",
            border_style="bright_blue",
            padding=(0, 2),
        )
        console.print(panel)

    solved = Panel(
        Align.center(render_board(replay(board, moves))),
        title="[bold green]Solved board[/bold green]",
        border_style="bold green",
        padding=(0, 2),
    )
    console.print(solved)


# -- public entry point -------------------------------------------------------


def run(board_path: Path, config: SearchConfig) -> bool:
    """Solve the board in *board_path* and print the solution."""
    board = load_board(board_path)
    logger.info("Loaded %d×%d board from %s", board.width, board.height, board_path)

    console.print(
        Panel(
            Align.center(render_board(board)),
            title=f"[bold]Sliding Puzzle  {board.width}×{board.height}[/bold]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )
    with console.status("Searching…"):
        result = solve_by_astar(board, config)

    try:
        print_board_sequence(board, result)
    except SearchExhausted as exc:
        console.print(f"[red]No solution found.[/red] {exc}")
        console.print(render_stats(result))
        return False

    console.print(
        f"[bold green]Solved in {len(result.move_sequence())} moves![/bold green]"
    )
    console.print(render_stats(result))
    return True
