"""Shared search loop for every frontier discipline."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from backend.models.board import Board, Direction
from backend.models.result import Outcome, SearchResult

logger = logging.getLogger(__name__)


class SearchStrategy(ABC):
    """One search run over a single start state.

    Subclasses provide the frontier (``_push`` / ``_pop`` /
    ``_fringe_size``) and the order in which successors are generated.
    Duplicates are filtered only against boards already expanded, so the
    same state may sit in the frontier more than once; only the first copy
    popped is expanded.
    """

    name: str = "base"
    expansion_order: tuple[Direction, ...] = ()

    def __init__(self, initial_state: str) -> None:
        self.root = Board.from_state(initial_state)
        self.visited: set[str] = set()
        self.status = Outcome.READY

        self.max_depth = 0
        self.nodes_created = 1
        self.nodes_expanded = 0

        self._push(self.root)
        self.max_fringe_size = self._fringe_size()

    # -- frontier -------------------------------------------------------------

    @abstractmethod
    def _push(self, board: Board) -> None: ...

    @abstractmethod
    def _pop(self) -> Board: ...

    @abstractmethod
    def _fringe_size(self) -> int: ...

    def _admit(self, child_depth: int) -> bool:
        """Whether a successor at *child_depth* may enter the frontier."""
        return True

    # -- main loop ------------------------------------------------------------

    def run(self) -> SearchResult:
        """Run the search to completion and return its statistics."""
        if self.status is not Outcome.READY:
            raise RuntimeError(f"{self.name} search has already run.")

        logger.debug("%s: starting from %r", self.name, self.root.state)
        self.status = Outcome.RUNNING

        while self._fringe_size():
            board = self._pop()
            if board.state in self.visited:
                continue
            self.visited.add(board.state)
            self.nodes_expanded += 1

            if board.is_goal():
                self.max_depth = board.depth
                self.status = Outcome.SOLVED
                break

            child_depth = board.depth + 1
            for child in board.successors(self.expansion_order):
                if child.state in self.visited:
                    continue
                if not self._admit(child_depth):
                    continue
                child.depth = child_depth
                self._push(child)
                self.nodes_created += 1

            self.max_fringe_size = max(self.max_fringe_size, self._fringe_size())
        else:
            self.status = self._exhausted_outcome()

        result = self._result()
        logger.debug(
            "%s: %s after %d expansions (%s)",
            self.name, self.status.value, self.nodes_expanded, result,
        )
        return result

    # -- helpers --------------------------------------------------------------

    def _exhausted_outcome(self) -> Outcome:
        return Outcome.EXHAUSTED

    def _result(self) -> SearchResult:
        if self.status is Outcome.DEPTH_EXHAUSTED:
            return SearchResult.failure()
        return SearchResult(
            max_depth=self.max_depth,
            nodes_created=self.nodes_created,
            nodes_expanded=self.nodes_expanded,
            max_fringe_size=self.max_fringe_size,
            outcome=self.status,
        )
