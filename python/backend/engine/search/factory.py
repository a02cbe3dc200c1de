"""Registry of search strategies, keyed by their command-line name."""

from __future__ import annotations

from typing import TypeVar

from backend.engine.search.base import SearchStrategy

S = TypeVar("S", bound=type[SearchStrategy])

_STRATEGIES: dict[str, type[SearchStrategy]] = {}


def register_strategy(cls: S) -> S:
    """Class decorator adding *cls* to the registry under ``cls.name``."""
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(
    method: str, initial_state: str, option: str | int | None = None
) -> SearchStrategy:
    """Build a ready-to-run search for *method*.

    *option* is the heuristic (``h1``/``h2``) for GBFS and AStar, the depth
    bound for DLS, and unused otherwise.

    Raises:
        ValueError: If *method* is not registered or its option is missing.
    """
    if method not in _STRATEGIES:
        available = ", ".join(_STRATEGIES)
        raise ValueError(f"Unknown search method: {method}. Available: {available}")
    cls = _STRATEGIES[method]

    if method == "DLS":
        if option is None:
            raise ValueError("DLS requires a depth bound.")
        return cls(initial_state, int(option))
    if method in ("GBFS", "AStar"):
        if option is None:
            raise ValueError(f"{method} requires a heuristic (h1 or h2).")
        return cls(initial_state, option)
    return cls(initial_state)


def get_strategy_names() -> list[str]:
    return list(_STRATEGIES)
