"""Search outcome record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Outcome(StrEnum):
    """Lifecycle of a single search run."""

    READY = "ready"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    DEPTH_EXHAUSTED = "depth-exhausted"


@dataclass(frozen=True)
class SearchResult:
    max_depth: int
    nodes_created: int
    nodes_expanded: int
    max_fringe_size: int
    outcome: Outcome

    @classmethod
    def failure(cls) -> SearchResult:
        """Sentinel reported when a depth-limited search finds no goal."""
        return cls(
            max_depth=-1,
            nodes_created=0,
            nodes_expanded=0,
            max_fringe_size=0,
            outcome=Outcome.DEPTH_EXHAUSTED,
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (
            self.max_depth,
            self.nodes_created,
            self.nodes_expanded,
            self.max_fringe_size,
        )

    def __str__(self) -> str:
        return ", ".join(str(v) for v in self.as_tuple())
