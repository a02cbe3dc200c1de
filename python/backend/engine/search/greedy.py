"""Heuristic-ordered searches: greedy best-first and A*."""

from __future__ import annotations

import heapq
import itertools

from backend.engine.search.base import SearchStrategy
from backend.engine.search.factory import register_strategy
from backend.engine.search.ordering import Heuristic, Key, astar_key, greedy_key
from backend.models.board import QUEUE_ORDER, Board


class PrioritySearch(SearchStrategy):
    """Frontier ordered by ``key(board)``; ties pop in insertion order."""

    expansion_order = QUEUE_ORDER

    def __init__(self, initial_state: str, heuristic: Heuristic | str) -> None:
        self.heuristic = Heuristic(heuristic)
        self._key = self._make_key(self.heuristic)
        self._heap: list[tuple[int, int, Board]] = []
        self._counter = itertools.count()
        super().__init__(initial_state)

    @staticmethod
    def _make_key(heuristic: Heuristic) -> Key:
        raise NotImplementedError

    def _push(self, board: Board) -> None:
        heapq.heappush(self._heap, (self._key(board), next(self._counter), board))

    def _pop(self) -> Board:
        return heapq.heappop(self._heap)[2]

    def _fringe_size(self) -> int:
        return len(self._heap)


@register_strategy
class GreedySearch(PrioritySearch):
    """Greedy best-first: ordered by heuristic alone."""

    name = "GBFS"

    @staticmethod
    def _make_key(heuristic: Heuristic) -> Key:
        return greedy_key(heuristic)


@register_strategy
class AStarSearch(PrioritySearch):
    """A*: ordered by depth plus heuristic."""

    name = "AStar"

    @staticmethod
    def _make_key(heuristic: Heuristic) -> Key:
        return astar_key(heuristic)
