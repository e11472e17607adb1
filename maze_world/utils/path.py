"""Path reconstruction from a came-from map.

The came-from map records, for each discovered node, the edge through which
it was first reached. Walking those edges backwards from the target yields the
path to the start, which is the one node without an entry.
"""

from pyrsistent import pvector
from pyrsistent.typing import PMap, PVector

from maze_world.components import Edge
from maze_world.errors import CorruptionError
from maze_world.types import Coord


def reconstruct_path(
    came_from: PMap[Coord, Edge],
    target: Coord,
    start: Coord = (0, 0),
) -> PVector[Coord]:
    """Return the path from ``target`` back to the start, target first.

    A well-formed chain visits each key at most once, so the walk is bounded
    by ``len(came_from) + 1`` nodes.

    Args:
        came_from: Node -> discovering edge.
        target: Node to walk back from.
        start: Expected terminal node. A walk ending anywhere else is a
            missing link and is reported as a broken chain.

    Returns:
        PVector[Coord]: ``[target, ..., start]``.

    Raises:
        CorruptionError: If the chain loops or ends at an unexpected node.
    """
    limit = len(came_from) + 1
    path = [target]
    current = target
    while current in came_from:
        if len(path) >= limit:
            raise CorruptionError(
                f"Came-from chain from {target} exceeds {limit} nodes (cycle)"
            )
        try:
            current = came_from[current].other(current)
        except ValueError as e:
            raise CorruptionError(str(e)) from e
        path.append(current)
    if current != start:
        raise CorruptionError(
            f"Came-from chain from {target} ends at {current}, expected {start}"
        )
    return pvector(path)
