"""Traversal component.

Snapshot of one incremental search. Each search owns its frontier, visited
set and came-from map, so a breadth-first and a depth-first search over the
same maze never observe each other's bookkeeping.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pdeque, pmap, pset, pvector
from pyrsistent.typing import PDeque, PMap, PSet, PVector

from maze_world.components.edge import Edge
from maze_world.types import Coord, TraversalKind, TraversalStatus


@dataclass(frozen=True)
class Traversal:
    """Incremental BFS/DFS state.

    Attributes:
        kind: ``BFS`` pops the frontier from the left (queue), ``DFS`` from the
            right (stack).
        frontier: Pending nodes. A node may appear more than once; duplicates
            are discarded lazily when popped.
        visited: Nodes already expanded.
        came_from: Node -> edge that first discovered it. The start node never
            appears as a key.
        current: Node popped by the most recent step.
        status: Lifecycle marker; only ``IN_PROGRESS`` searches advance.
        path: Target-to-start path, filled once ``SOLVED``.
        steps: Number of elements popped so far.
    """

    kind: TraversalKind
    frontier: PDeque[Coord] = pdeque()
    visited: PSet[Coord] = pset()
    came_from: PMap[Coord, Edge] = pmap()
    current: Optional[Coord] = None
    status: TraversalStatus = TraversalStatus.IN_PROGRESS
    path: PVector[Coord] = pvector()
    steps: int = 0

    @property
    def in_progress(self) -> bool:
        return self.status == TraversalStatus.IN_PROGRESS

    @property
    def solved(self) -> bool:
        return self.status == TraversalStatus.SOLVED
