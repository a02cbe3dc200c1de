"""Rich terminal frontend: board panel and statistics table.

Uses the ``rich`` library for styled output of a finished search run.
The last line is always the plain statistics line so the output stays
machine-readable.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.models.board import BLANK, SIZE, Board, Goal
from backend.models.result import Outcome, SearchResult

console = Console()

_OUTCOME_STYLE = {
    Outcome.SOLVED: "bold green",
    Outcome.EXHAUSTED: "bold yellow",
    Outcome.DEPTH_EXHAUSTED: "bold red",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    goal = Goal.A.value
    for r, row in enumerate(board.grid):
        cells: list[str] = []
        for c, symbol in enumerate(row):
            if symbol == BLANK:
                cells.append("[dim]·[/dim]")
            elif symbol == goal[r * SIZE + c]:
                cells.append(f"[bold green]{symbol}[/bold green]")
            else:
                cells.append(f"[bold white]{symbol}[/bold white]")
        table.add_row(*cells)

    return table


def _render_stats(result: SearchResult) -> Table:
    stats = Table(box=rich.box.ROUNDED, border_style="dim", show_header=False)
    stats.add_column(style="dim")
    stats.add_column(justify="right", style="yellow")
    outcome = Text(result.outcome.value, style=_OUTCOME_STYLE.get(result.outcome, ""))
    stats.add_row("Outcome", outcome)
    stats.add_row("Max depth", str(result.max_depth))
    stats.add_row("Nodes created", str(result.nodes_created))
    stats.add_row("Nodes expanded", str(result.nodes_expanded))
    stats.add_row("Max fringe size", str(result.max_fringe_size))
    return stats


# -- public entry point -------------------------------------------------------


def run(title: str, board: Board, result: SearchResult) -> None:
    """Print the start board, the run statistics and the statistics line."""
    panel = Panel(
        Group(
            Align.center(_render_board(board)),
            Text(""),
            Align.center(_render_stats(result)),
        ),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)
    console.print(str(result), markup=False, highlight=False)
