"""Core immutable ``Maze`` dataclass.

This module defines the frozen :class:`Maze` object that represents one
generated maze together with everything the player and the searches have done
to it so far. All transitions are pure functions that take a ``Maze`` and
return a *new* one; nothing is mutated in place.

Design notes:

* The grid is an **arena**: ``nodes`` maps every coordinate to its
  :class:`~maze_world.components.Node`, and links between nodes are
  coordinates rather than object references.
* ``edges`` keeps every candidate edge (carved or not) so walls can be
    enumerated; ``carved`` is the selected spanning tree.
* ``solution`` is the canonical target-to-start path computed once by the
    one-shot solver at generation time and used to judge wrong moves.
* At most one incremental search is attached through ``traversal``; starting
    a new one replaces it wholesale (its visited set and came-from map go
    with it).
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pyrsistent import pmap, pset, pvector
from pyrsistent.typing import PMap, PSet, PVector

from maze_world.components import Edge, Node, Player, Traversal
from maze_world.config import MazeConfig
from maze_world.types import Coord


@dataclass(frozen=True)
class Maze:
    """Immutable maze world.

    Attributes:
        width (int): Columns.
        height (int): Rows.
        config (MazeConfig): Configuration the maze was generated from.
        nodes (PMap[Coord, Node]): Node arena keyed by coordinate.
        edges (PVector[Edge]): All candidate edges in construction order.
        carved (PVector[Edge]): Spanning-tree edges selected by the builder.
        solution (PVector[Coord]): Canonical path, target first, start last.
        player (Player): Player cursor.
        traversal (Traversal | None): Active incremental search, if any.
        seed (int | None): Seed the generating RNG was created from.
    """

    width: int
    height: int
    config: MazeConfig
    nodes: PMap[Coord, Node] = pmap()
    edges: PVector[Edge] = pvector()
    carved: PVector[Edge] = pvector()
    solution: PVector[Coord] = pvector()
    player: Player = Player(position=(0, 0))
    traversal: Optional[Traversal] = None
    seed: Optional[int] = None

    # Derived lookup, rebuilt whenever ``solution`` is replaced via __post_init__.
    solution_set: PSet[Coord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "solution_set", pset(self.solution))

    @property
    def start(self) -> Coord:
        return (0, 0)

    @property
    def target(self) -> Coord:
        return (self.width - 1, self.height - 1)

    @property
    def node_count(self) -> int:
        return self.width * self.height

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse summary of the maze for diagnostics.

        Collections are reported by size and empty or ``None`` fields are
        skipped, so the result stays small even for large grids.

        Returns:
            PMap[str, Any]: Field name to value (or collection length).
        """
        description: PMap[str, Any] = pmap()
        for name in ("width", "height", "seed"):
            value = getattr(self, name)
            if value is not None:
                description = description.set(name, value)
        description = description.set("bias", str(self.config.bias))
        for name in ("nodes", "edges", "carved", "solution"):
            size = len(getattr(self, name))
            if size:
                description = description.set(name, size)
        description = description.set("player", self.player.position)
        description = description.set("wrong_moves", self.player.wrong_moves)
        if self.traversal is not None:
            description = description.set(
                "traversal",
                pmap(
                    {
                        "kind": str(self.traversal.kind),
                        "status": str(self.traversal.status),
                        "steps": self.traversal.steps,
                    }
                ),
            )
        return description
