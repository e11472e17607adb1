"""Edge component.

Immutable weighted pair of adjacent nodes. Candidate edges are built with
``a`` as the left or upper endpoint; came-from edges are built with ``a`` as
the discovering node. Code that needs "the other end" should use
:meth:`Edge.other` rather than rely on either convention.
"""

from dataclasses import dataclass
from typing import FrozenSet

from maze_world.types import Coord


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge.

    Attributes:
        a: First endpoint.
        b: Second endpoint.
        weight: Carving priority; lower weights are selected first.
    """

    a: Coord
    b: Coord
    weight: int = 0

    def other(self, node: Coord) -> Coord:
        """Return the endpoint opposite ``node``.

        Raises:
            ValueError: If ``node`` is not an endpoint of this edge.
        """
        if node == self.a:
            return self.b
        if node == self.b:
            return self.a
        raise ValueError(f"{node} is not an endpoint of {self}")

    @property
    def key(self) -> FrozenSet[Coord]:
        """Unordered endpoint pair, independent of weight and orientation."""
        return frozenset((self.a, self.b))

    @property
    def is_horizontal(self) -> bool:
        return self.a[1] == self.b[1]
