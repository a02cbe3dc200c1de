"""Depth-limited search."""

from __future__ import annotations

from backend.engine.search.dfs import DepthFirstSearch
from backend.engine.search.factory import register_strategy
from backend.models.result import Outcome


@register_strategy
class DepthLimitedSearch(DepthFirstSearch):
    """DFS that never queues a board deeper than ``limited_depth``.

    Running out of frontier without a goal reports the failure sentinel.
    """

    name = "DLS"

    def __init__(self, initial_state: str, limited_depth: int) -> None:
        if limited_depth < 0:
            raise ValueError(f"Depth bound must be non-negative, got {limited_depth}.")
        self.limited_depth = limited_depth
        super().__init__(initial_state)

    def _admit(self, child_depth: int) -> bool:
        return child_depth <= self.limited_depth

    def _exhausted_outcome(self) -> Outcome:
        return Outcome.DEPTH_EXHAUSTED
