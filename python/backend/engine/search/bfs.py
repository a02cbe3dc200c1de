"""Breadth-first search."""

from __future__ import annotations

from collections import deque

from backend.engine.search.base import SearchStrategy
from backend.engine.search.factory import register_strategy
from backend.models.board import QUEUE_ORDER, Board


@register_strategy
class BreadthFirstSearch(SearchStrategy):
    """FIFO frontier."""

    name = "BFS"
    expansion_order = QUEUE_ORDER

    def __init__(self, initial_state: str) -> None:
        self._queue: deque[Board] = deque()
        super().__init__(initial_state)

    def _push(self, board: Board) -> None:
        self._queue.append(board)

    def _pop(self) -> Board:
        return self._queue.popleft()

    def _fringe_size(self) -> int:
        return len(self._queue)
