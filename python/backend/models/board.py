"""Board model for the 4×4 sliding-tile search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum

SIZE = 4
BLANK = " "
SYMBOLS = frozenset("123456789ABCDEF" + BLANK)


class Direction(StrEnum):
    """Where the *blank* moves."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Queue-based searches (BFS, GBFS, A*).
QUEUE_ORDER: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
    Direction.UP,
)
# Stack-based searches (DFS, DLS); reversed by LIFO popping.
STACK_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.DOWN,
    Direction.RIGHT,
)


class Goal(Enum):
    """The two accepted solved configurations."""

    A = "123456789ABCDEF "
    B = "123456789ABCDFE "


def _targets(layout: str) -> dict[str, tuple[int, int]]:
    return {symbol: divmod(i, SIZE) for i, symbol in enumerate(layout)}


# Goal B deliberately measures against goal A's layout; see DESIGN.md.
_MANHATTAN_TARGETS: dict[Goal, dict[str, tuple[int, int]]] = {
    Goal.A: _targets(Goal.A.value),
    Goal.B: _targets(Goal.A.value),
}


@dataclass
class Board:
    """One puzzle configuration plus its cached heuristics.

    ``state`` is the only source of truth; ``grid`` and ``blank_pos`` are
    derived from it.  ``depth`` is assigned by the search loop.
    """

    state: str
    depth: int = 0
    blank_pos: tuple[int, int] = field(init=False)
    _misplaced: dict[Goal, int] = field(init=False, repr=False, compare=False)
    _manhattan: dict[Goal, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.blank_pos = divmod(self.state.index(BLANK), SIZE)
        self._misplaced = {goal: _count_misplaced(self.state, goal) for goal in Goal}
        self._manhattan = {goal: _sum_manhattan(self.state, goal) for goal in Goal}

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_state(cls, state: str) -> Board:
        """Create a root board from a 16-character row-major string.

        The string is assumed to be a valid permutation; see
        ``frontend.cli.validation.parse_state``.
        """
        return cls(state=state)

    @classmethod
    def from_grid(cls, grid: list[list[str]] | tuple[tuple[str, ...], ...]) -> Board:
        """Create a board from a 4×4 grid, regenerating ``state``."""
        return cls(state="".join("".join(row) for row in grid))

    def copy_with_swap(self, direction: Direction) -> Board:
        """Return a new board with the blank moved one cell in *direction*."""
        br, bc = self.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            raise ValueError(
                f"Cannot move blank {direction.value} from {self.blank_pos}."
            )
        cells = list(self.state)
        b, t = br * SIZE + bc, tr * SIZE + tc
        cells[b], cells[t] = cells[t], cells[b]
        return Board(state="".join(cells))

    # -- queries --------------------------------------------------------------

    @property
    def grid(self) -> tuple[tuple[str, ...], ...]:
        return tuple(
            tuple(self.state[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)
        )

    def can_move(self, direction: Direction) -> bool:
        br, bc = self.blank_pos
        dr, dc = direction.offset
        return 0 <= br + dr < SIZE and 0 <= bc + dc < SIZE

    def successors(self, order: tuple[Direction, ...]) -> list[Board]:
        """Boards reachable in one move, in *order*, skipping off-grid moves."""
        return [self.copy_with_swap(d) for d in order if self.can_move(d)]

    def is_goal(self) -> bool:
        """Check whether the board equals goal A or goal B."""
        check_a = check_b = True
        for i, symbol in enumerate(self.state):
            if check_a and symbol != Goal.A.value[i]:
                check_a = False
            if check_b and symbol != Goal.B.value[i]:
                check_b = False
            if not (check_a or check_b):
                return False
        return True

    def misplaced(self, goal: Goal) -> int:
        """Number of cells (blank included) that differ from *goal*."""
        return self._misplaced[goal]

    def manhattan(self, goal: Goal) -> int:
        """Summed grid distance of every cell to its target under *goal*."""
        return self._manhattan[goal]

    def __str__(self) -> str:
        return "".join(
            "[" + ", ".join(row) + "]\n" for row in self.grid
        )


# -- heuristic helpers ---------------------------------------------------------


def _count_misplaced(state: str, goal: Goal) -> int:
    return sum(1 for have, want in zip(state, goal.value) if have != want)


def _sum_manhattan(state: str, goal: Goal) -> int:
    targets = _MANHATTAN_TARGETS[goal]
    total = 0
    for i, symbol in enumerate(state):
        r, c = divmod(i, SIZE)
        gr, gc = targets[symbol]
        total += abs(r - gr) + abs(c - gc)
    return total
