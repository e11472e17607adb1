"""Node component.

A node is one maze cell. Its identity is its coordinate; carved adjacency is
stored as direction -> neighbour coordinate so the grid stays an arena of
nodes indexed by coordinate rather than a web of object references.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from maze_world.actions import NEIGHBOR_ORDER, Direction
from maze_world.types import Coord


@dataclass(frozen=True)
class Node:
    """Maze cell.

    Attributes:
        position: ``(x, y)`` coordinate (0,0 at top-left).
        links: Carved openings; a direction is present only where an edge was
            selected by the maze builder.
    """

    position: Coord
    links: PMap[Direction, Coord] = pmap()

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def neighbor(self, direction: Direction) -> Optional[Coord]:
        """Coordinate reachable through ``direction`` or ``None`` for a wall."""
        return self.links.get(direction)

    def neighbors(self) -> List[Coord]:
        """Linked neighbours in LEFT, UP, RIGHT, DOWN order."""
        return [self.links[d] for d in NEIGHBOR_ORDER if d in self.links]

    def link(self, direction: Direction, other: Coord) -> "Node":
        return replace(self, links=self.links.set(direction, other))
