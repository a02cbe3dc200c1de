"""Search strategies: statistics, frontier discipline and lifecycle.

Expected numbers are worked out by hand from the successor orders
(right, down, left, up for queues; up, left, down, right for stacks) and
the rule that duplicates are dropped only once expanded.
"""

from __future__ import annotations

import pytest

from backend.engine.generator import Scrambler
from backend.engine.search import (
    AStarSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    DepthLimitedSearch,
    GreedySearch,
    create_strategy,
    get_strategy_names,
)
from backend.models.board import Board
from backend.models.result import Outcome, SearchResult
from conftest import GOAL_A, GOAL_B, ONE_MOVE, TWO_MOVES


# -- root already solved ------------------------------------------------------


@pytest.mark.parametrize(
    "method, option",
    [("BFS", None), ("DFS", None), ("DLS", 0), ("GBFS", "h1"), ("AStar", "h2")],
)
@pytest.mark.parametrize("state", [GOAL_A, GOAL_B], ids=["goal-a", "goal-b"])
def test_goal_root(method: str, option: str | int | None, state: str) -> None:
    result = create_strategy(method, state, option).run()
    assert result.as_tuple() == (0, 1, 1, 1)
    assert result.outcome is Outcome.SOLVED


# -- one move from the goal ---------------------------------------------------


@pytest.mark.parametrize(
    "method, option",
    [
        ("BFS", None),
        ("DFS", None),
        ("DLS", 1),
        ("GBFS", "h1"),
        ("GBFS", "h2"),
        ("AStar", "h1"),
        ("AStar", "h2"),
    ],
)
def test_one_move(one_move: str, method: str, option: str | int | None) -> None:
    result = create_strategy(method, one_move, option).run()
    assert result.as_tuple() == (1, 4, 2, 3)


# -- two moves from the goal --------------------------------------------------


def test_bfs_two_moves(two_moves: str) -> None:
    # Level 1 is fully expanded before the goal at level 2; the root is
    # regenerated from level 1 but skipped as already visited.
    result = BreadthFirstSearch(two_moves).run()
    assert str(result) == "2, 10, 5, 6"
    assert result.outcome is Outcome.SOLVED


def test_dfs_two_moves(two_moves: str) -> None:
    assert str(DepthFirstSearch(two_moves).run()) == "2, 6, 3, 4"


@pytest.mark.parametrize("heuristic", ["h1", "h2"])
def test_informed_two_moves(two_moves: str, heuristic: str) -> None:
    assert str(GreedySearch(two_moves, heuristic).run()) == "2, 6, 3, 4"
    assert str(AStarSearch(two_moves, heuristic).run()) == "2, 6, 3, 4"


def test_dls_bound_reaching_goal(two_moves: str) -> None:
    assert str(DepthLimitedSearch(two_moves, 2).run()) == "2, 6, 3, 4"


@pytest.mark.parametrize("bound", [0, 1])
def test_dls_bound_too_shallow(two_moves: str, bound: int) -> None:
    search = DepthLimitedSearch(two_moves, bound)
    result = search.run()
    assert str(result) == "-1, 0, 0, 0"
    assert result == SearchResult.failure()
    assert search.status is Outcome.DEPTH_EXHAUSTED


def test_dls_zero_bound_expands_only_root(one_move: str) -> None:
    search = DepthLimitedSearch(one_move, 0)
    assert search.run().as_tuple() == (-1, 0, 0, 0)
    assert search.nodes_expanded == 1
    assert search.nodes_created == 1
    assert search.visited == {one_move}


def test_dls_rejects_negative_bound(one_move: str) -> None:
    with pytest.raises(ValueError):
        DepthLimitedSearch(one_move, -1)


# -- frontier behaviour -------------------------------------------------------


def test_duplicate_in_frontier_expanded_once(one_move: str) -> None:
    search = BreadthFirstSearch(one_move)
    # A second copy of the root waits behind the first; it is popped after
    # the root was expanded and is dropped without being counted.
    search._push(Board.from_state(one_move))
    result = search.run()
    assert result.as_tuple() == (1, 4, 2, 4)


def test_visited_holds_expanded_states(two_moves: str) -> None:
    search = DepthFirstSearch(two_moves)
    search.run()
    assert search.visited == {two_moves, "123456789ABCDE F", GOAL_A}


# -- lifecycle ----------------------------------------------------------------


def test_ready_state(one_move: str) -> None:
    search = BreadthFirstSearch(one_move)
    assert search.status is Outcome.READY
    assert search.nodes_created == 1
    assert search.nodes_expanded == 0
    assert search.max_fringe_size == 1
    assert search.max_depth == 0
    assert search.visited == set()


def test_search_runs_once(one_move: str) -> None:
    search = BreadthFirstSearch(one_move)
    search.run()
    assert search.status is Outcome.SOLVED
    with pytest.raises(RuntimeError):
        search.run()


def test_instances_do_not_share_counters(one_move: str, two_moves: str) -> None:
    first = BreadthFirstSearch(two_moves).run()
    BreadthFirstSearch(one_move).run()
    again = BreadthFirstSearch(two_moves).run()
    assert first == again


# -- factory ------------------------------------------------------------------


def test_registered_methods() -> None:
    assert set(get_strategy_names()) == {"BFS", "DFS", "DLS", "GBFS", "AStar"}


def test_create_strategy_types(one_move: str) -> None:
    assert isinstance(create_strategy("BFS", one_move), BreadthFirstSearch)
    assert isinstance(create_strategy("DLS", one_move, "3"), DepthLimitedSearch)
    assert isinstance(create_strategy("AStar", one_move, "h1"), AStarSearch)


def test_create_strategy_errors(one_move: str) -> None:
    with pytest.raises(ValueError):
        create_strategy("IDS", one_move)
    with pytest.raises(ValueError):
        create_strategy("GBFS", one_move)
    with pytest.raises(ValueError):
        create_strategy("DLS", one_move)
    with pytest.raises(ValueError):
        create_strategy("GBFS", one_move, "h3")


# -- scrambled boards ---------------------------------------------------------


@pytest.mark.parametrize("seed", range(5))
def test_bfs_on_scrambled_board(seed: int) -> None:
    moves = 6
    start = Scrambler.scramble(moves, seed=seed).state
    result = BreadthFirstSearch(start).run()
    assert result.outcome is Outcome.SOLVED
    assert result.max_depth <= moves
    assert result.nodes_expanded <= result.nodes_created
    if result.max_depth > 0:
        assert result.max_fringe_size >= 1


@pytest.mark.parametrize("seed", range(5))
def test_informed_searches_solve_scrambled_board(seed: int) -> None:
    start = Scrambler.scramble(6, seed=seed).state
    for cls in (GreedySearch, AStarSearch):
        for heuristic in ("h1", "h2"):
            result = cls(start, heuristic).run()
            assert result.outcome is Outcome.SOLVED
            assert result.nodes_expanded <= result.nodes_created


def test_dls_below_shortest_depth_fails() -> None:
    start = Scrambler.scramble(4, seed=11).state
    depth = BreadthFirstSearch(start).run().max_depth
    assert depth > 0
    assert DepthLimitedSearch(start, depth - 1).run() == SearchResult.failure()
