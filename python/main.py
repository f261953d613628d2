#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py                                   # default sample, Rich output
    python main.py samples/board-3x3-moresteps.txt   # solve a board file
    python main.py -f vanilla board.txt              # plain terminal output
    python main.py --max-expansions 100000 board.txt # bounded search
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
SAMPLES_DIR = PROJECT_ROOT / "samples"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.search import SearchConfig  # noqa: E402
from backend.errors import InvalidBoard  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(frontend: Frontend, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if frontend is Frontend.rich:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board_file: Path = typer.Argument(
        SAMPLES_DIR / "board-3x3-twosteps.txt",
        exists=True, dir_okay=False, readable=True,
        help="Board file: width and height, then the tokens row by row (0 = blank).",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend used to print the solution.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1, envvar="SLIDING_MAX_EXPANSIONS",
        help="Give up after expanding this many nodes.",
    ),
    max_frontier: Optional[int] = typer.Option(
        None, "--max-frontier",
        min=1, envvar="SLIDING_MAX_FRONTIER",
        help="Give up when the frontier grows beyond this many nodes.",
    ),
    no_dedup: bool = typer.Option(
        False, "--no-dedup",
        help="Do not skip boards that were already reached.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find a shortest solution of a sliding puzzle with A*."""
    _configure_logging(frontend, verbose)
    config = SearchConfig(
        max_expansions=max_expansions,
        max_frontier=max_frontier,
        detect_duplicates=not no_dedup,
    )

    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        solved = mod.run(board_path=board_file, config=config)
    except InvalidBoard as exc:
        typer.echo(f"Invalid board file {board_file}: {exc}", err=True)
        raise typer.Exit(code=2)

    if not solved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
