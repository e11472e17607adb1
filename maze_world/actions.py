"""Movement directions.

:class:`Direction` is used both for carved adjacency links on a node and for
player move requests. ``NEIGHBOR_ORDER`` is the canonical enumeration order of
a node's links; searches expand neighbours in this order, so it determines the
shape of every depth-first traversal.
"""

from enum import StrEnum, auto
from typing import Dict, List, Tuple


class Direction(StrEnum):
    """Cardinal direction on the grid (``y`` grows downward)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_DIRECTIONS: List[Direction] = [
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
]

NEIGHBOR_ORDER: List[Direction] = [
    Direction.LEFT,
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
