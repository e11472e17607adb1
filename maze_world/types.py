"""Common type aliases and enumerations.

``Coord`` is the identity of a maze node: its ``(x, y)`` grid coordinate.
Every persistent map in the engine (node arena, came-from map, union-find
parents, visited sets) is keyed by it.
"""

from enum import StrEnum, auto
from typing import Tuple

Coord = Tuple[int, int]


class Bias(StrEnum):
    """Corridor bias applied to candidate edge weights during carving.

    ``VERTICAL`` forces every down edge to weight 0, ``HORIZONTAL`` every
    right edge, so Kruskal's algorithm selects that axis first.
    """

    NONE = auto()
    VERTICAL = auto()
    HORIZONTAL = auto()


class TraversalKind(StrEnum):
    """Frontier discipline of an incremental search."""

    BFS = auto()
    DFS = auto()


class TraversalStatus(StrEnum):
    """Lifecycle of an incremental search.

    Members:
        IN_PROGRESS: Further steps may expand the frontier.
        SOLVED: The target was popped and its path reconstructed.
        EXHAUSTED: The frontier emptied without reaching the target.
    """

    IN_PROGRESS = auto()
    SOLVED = auto()
    EXHAUSTED = auto()
