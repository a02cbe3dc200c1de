"""Shared fixtures: start states whose search statistics are known."""

from __future__ import annotations

import pytest

GOAL_A = "123456789ABCDEF "
GOAL_B = "123456789ABCDFE "
# Blank one move left of goal A.
ONE_MOVE = "123456789ABCDE F"
# Blank two moves left of goal A.
TWO_MOVES = "123456789ABCD EF"


@pytest.fixture
def one_move() -> str:
    return ONE_MOVE


@pytest.fixture
def two_moves() -> str:
    return TWO_MOVES
