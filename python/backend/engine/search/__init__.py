from backend.engine.search.base import SearchStrategy
from backend.engine.search.factory import create_strategy, get_strategy_names
from backend.engine.search.bfs import BreadthFirstSearch
from backend.engine.search.dfs import DepthFirstSearch
from backend.engine.search.dls import DepthLimitedSearch
from backend.engine.search.greedy import AStarSearch, GreedySearch, PrioritySearch
from backend.engine.search.ordering import Heuristic

__all__ = [
    "AStarSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DepthLimitedSearch",
    "GreedySearch",
    "Heuristic",
    "PrioritySearch",
    "SearchStrategy",
    "create_strategy",
    "get_strategy_names",
]
