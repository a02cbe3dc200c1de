#!/usr/bin/env python3
"""Fifteen-puzzle search.

Usage::

    python main.py solve "123456789ABCD EF" BFS
    python main.py solve "123456789ABCD EF" GBFS h1
    python main.py solve "123456789ABCD EF" DLS 5 -f rich
    python main.py scramble -m 12 --seed 7
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.generator import DEFAULT_MOVES, Scrambler  # noqa: E402
from backend.engine.search import create_strategy  # noqa: E402
from frontend.cli.validation import banner, parse_option, parse_state  # noqa: E402


# -- registries ---------------------------------------------------------------


class Method(StrEnum):
    BFS = "BFS"
    DFS = "DFS"
    DLS = "DLS"
    GBFS = "GBFS"
    AStar = "AStar"


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def solve(
    state: str = typer.Argument(
        ..., help="16-character start state, row-major, blank as a space."
    ),
    method: Method = typer.Argument(..., help="Search method."),
    option: Optional[str] = typer.Argument(
        None, help="h1/h2 for GBFS and AStar, depth bound for DLS."
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Search for a goal configuration and print its statistics."""
    _configure_logging(verbose)

    try:
        initial_state = parse_state(state)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="STATE") from exc
    try:
        parsed = parse_option(method.value, option)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="OPTION") from exc

    strategy = create_strategy(method.value, initial_state, parsed)
    result = strategy.run()

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(banner(method.value, parsed), strategy.root, result)


@app.command()
def scramble(
    moves: int = typer.Option(
        DEFAULT_MOVES, "-m", "--moves",
        min=0,
        help="Number of random blank moves away from the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
) -> None:
    """Print a random solvable start state, quoted for the shell."""
    board = Scrambler.scramble(moves, seed=seed)
    print(f'"{board.state}"')


if __name__ == "__main__":
    app()
