from backend.models.board import (
    QUEUE_ORDER,
    STACK_ORDER,
    Board,
    Direction,
    Goal,
)
from backend.models.result import Outcome, SearchResult

__all__ = [
    "Board",
    "Direction",
    "Goal",
    "Outcome",
    "QUEUE_ORDER",
    "STACK_ORDER",
    "SearchResult",
]
