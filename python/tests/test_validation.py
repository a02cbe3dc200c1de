"""Command-line input checks."""

from __future__ import annotations

import pytest

from frontend.cli.validation import banner, parse_option, parse_state
from conftest import GOAL_A, TWO_MOVES


# -- initial state ------------------------------------------------------------


@pytest.mark.parametrize("state", [GOAL_A, TWO_MOVES, " 123456789ABCDEF"])
def test_valid_states(state: str) -> None:
    assert parse_state(state) == state


@pytest.mark.parametrize(
    "state",
    [
        "",
        "123456789ABCDEF",  # too short
        "123456789ABCDEF  ",  # too long
        "1123456789ABCDE ",  # repeated symbol
        "123456789ABCDEFG",  # unknown symbol, no blank
        "123456789abcdef ",  # lower case
    ],
)
def test_invalid_states(state: str) -> None:
    with pytest.raises(ValueError, match="valid initial state"):
        parse_state(state)


# -- options ------------------------------------------------------------------


@pytest.mark.parametrize(
    "method, option, expected",
    [
        ("BFS", None, None),
        ("DFS", None, None),
        ("GBFS", "h1", "h1"),
        ("AStar", "h2", "h2"),
        ("DLS", "0", 0),
        ("DLS", "12", 12),
    ],
)
def test_valid_options(method: str, option: str | None, expected: object) -> None:
    assert parse_option(method, option) == expected


@pytest.mark.parametrize(
    "method, option",
    [
        ("BFS", "h1"),
        ("DFS", "3"),
        ("GBFS", None),
        ("GBFS", "h3"),
        ("AStar", ""),
        ("DLS", None),
        ("DLS", "-1"),
        ("DLS", "3x"),
        ("IDS", "1"),
    ],
)
def test_invalid_options(method: str, option: str | None) -> None:
    with pytest.raises(ValueError):
        parse_option(method, option)


# -- banner -------------------------------------------------------------------


@pytest.mark.parametrize(
    "method, option, expected",
    [
        ("BFS", None, "BFS"),
        ("DFS", None, "DFS"),
        ("GBFS", "h1", "GBFS h1"),
        ("AStar", "h2", "A* h2"),
        ("DLS", 5, "DLS 5"),
    ],
)
def test_banner(method: str, option: str | int | None, expected: str) -> None:
    assert banner(method, option) == expected
