"""Priority ordering for the informed searches.

A heuristic maps a board to the smaller of its two per-goal scores; the
greedy and A* keys are built on top of it.  Lower keys are expanded first.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from backend.models.board import Board, Goal

Key = Callable[[Board], int]


class Heuristic(StrEnum):
    H1 = "h1"  # misplaced cells
    H2 = "h2"  # Manhattan distance


def misplaced(board: Board) -> int:
    return min(board.misplaced(goal) for goal in Goal)


def manhattan(board: Board) -> int:
    return min(board.manhattan(goal) for goal in Goal)


_EVALUATORS: dict[Heuristic, Key] = {
    Heuristic.H1: misplaced,
    Heuristic.H2: manhattan,
}


def evaluator(heuristic: Heuristic | str) -> Key:
    """Return the evaluation function for *heuristic* (``h1`` or ``h2``)."""
    return _EVALUATORS[Heuristic(heuristic)]


def greedy_key(heuristic: Heuristic | str) -> Key:
    return evaluator(heuristic)


def astar_key(heuristic: Heuristic | str) -> Key:
    h = evaluator(heuristic)

    def key(board: Board) -> int:
        return board.depth + h(board)

    return key
