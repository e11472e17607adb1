"""Grid math helpers.

Pure predicates and lookups over the node arena. Kept free of ``Maze`` so the
builder can use them before a ``Maze`` exists.
"""

from typing import Optional

from pyrsistent.typing import PMap

from maze_world.actions import DIRECTION_DELTAS, Direction
from maze_world.components import Node
from maze_world.types import Coord


def is_in_bounds(width: int, height: int, pos: Coord) -> bool:
    """Return True if ``pos`` lies within the ``width`` x ``height`` grid."""
    return 0 <= pos[0] < width and 0 <= pos[1] < height


def step_position(pos: Coord, direction: Direction) -> Coord:
    """Coordinate one tile away in ``direction`` (no bounds check)."""
    dx, dy = DIRECTION_DELTAS[direction]
    return (pos[0] + dx, pos[1] + dy)


def direction_between(a: Coord, b: Coord) -> Direction:
    """Direction leading from ``a`` to the adjacent coordinate ``b``.

    Raises:
        ValueError: If the coordinates are not orthogonally adjacent.
    """
    delta = (b[0] - a[0], b[1] - a[1])
    for direction, d in DIRECTION_DELTAS.items():
        if d == delta:
            return direction
    raise ValueError(f"{a} and {b} are not adjacent")


def linked_neighbor(
    nodes: PMap[Coord, Node], pos: Coord, direction: Direction
) -> Optional[Coord]:
    """Carved neighbour of ``pos`` in ``direction`` or ``None`` (wall/edge)."""
    node = nodes.get(pos)
    if node is None:
        return None
    return node.neighbor(direction)


def are_linked(nodes: PMap[Coord, Node], a: Coord, b: Coord) -> bool:
    """True if a carved passage joins ``a`` and ``b``."""
    node = nodes.get(a)
    return node is not None and b in node.links.values()
