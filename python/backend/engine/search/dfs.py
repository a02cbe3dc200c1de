"""Depth-first search."""

from __future__ import annotations

from backend.engine.search.base import SearchStrategy
from backend.engine.search.factory import register_strategy
from backend.models.board import STACK_ORDER, Board


@register_strategy
class DepthFirstSearch(SearchStrategy):
    """LIFO frontier.

    Successors are pushed up, left, down, right so the last pushed
    (right) is the first popped.
    """

    name = "DFS"
    expansion_order = STACK_ORDER

    def __init__(self, initial_state: str) -> None:
        self._stack: list[Board] = []
        super().__init__(initial_state)

    def _push(self, board: Board) -> None:
        self._stack.append(board)

    def _pop(self) -> Board:
        return self._stack.pop()

    def _fringe_size(self) -> int:
        return len(self._stack)
