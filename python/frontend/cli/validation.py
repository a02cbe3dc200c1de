"""Input checks for the command line, run before any search starts."""

from __future__ import annotations

from backend.engine.search.ordering import Heuristic
from backend.models.board import SIZE, SYMBOLS

HEURISTIC_METHODS = frozenset({"GBFS", "AStar"})
BARE_METHODS = frozenset({"BFS", "DFS"})


def parse_state(raw: str) -> str:
    """Return *raw* if it uses every puzzle symbol exactly once.

    Raises:
        ValueError: If the length or symbols are wrong.
    """
    if len(raw) != SIZE * SIZE or set(raw) != SYMBOLS:
        raise ValueError("Please specify valid initial state.")
    return raw


def parse_option(method: str, option: str | None) -> str | int | None:
    """Validate *option* for *method* and return it in its usable form.

    BFS and DFS take no option, GBFS and AStar take ``h1`` or ``h2``, and
    DLS takes a non-negative integer depth bound.
    """
    if method in BARE_METHODS:
        if option is not None:
            raise ValueError(
                "Please specify either 'GBFS', 'AStar', or 'DLS' search methods."
            )
        return None

    if not option:
        raise ValueError("Please specify valid options")

    if method in HEURISTIC_METHODS:
        if option not in {h.value for h in Heuristic}:
            raise ValueError("Please specify valid options")
        return option

    if method == "DLS":
        if not option.isdigit():
            raise ValueError("Please specify valid options")
        return int(option)

    raise ValueError(f"Unknown search method: {method}")


def banner(method: str, option: str | int | None) -> str:
    """Line printed before the statistics, e.g. ``GBFS h1`` or ``A* h2``."""
    label = "A*" if method == "AStar" else method
    return label if option is None else f"{label} {option}"
