"""Candidate grid construction.

Builds the node arena and the list of every potential passage (one edge per
orthogonally adjacent pair) with random carving weights. Nothing is carved
here; see :mod:`maze_world.levels.maze` for the spanning-tree selection.
"""

import random
from typing import Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from maze_world.components import Edge, Node
from maze_world.errors import ConfigurationError
from maze_world.types import Bias, Coord

MAX_WEIGHT = 1_000_000
"""Exclusive upper bound of random edge weights."""


def build_nodes(width: int, height: int) -> PMap[Coord, Node]:
    """Allocate ``width`` x ``height`` unlinked nodes keyed by coordinate."""
    return pmap(
        {(x, y): Node(position=(x, y)) for x in range(width) for y in range(height)}
    )


def build_edges(
    width: int, height: int, rng: random.Random, bias: Bias = Bias.NONE
) -> PVector[Edge]:
    """Create one weighted edge per adjacent pair.

    Nodes are scanned column by column (``x`` outer, ``y`` inner); each node
    emits its right edge and then its down edge where that neighbour exists.
    A weight is always drawn, even when the bias overrides it with 0, so the
    RNG stream is the same for every bias.

    Args:
        width (int): Columns.
        height (int): Rows.
        rng (random.Random): Source of edge weights.
        bias (Bias): Axis whose edges are forced to weight 0.

    Returns:
        PVector[Edge]: Candidate edges, ``a`` being the left/upper endpoint.
    """
    edges: list[Edge] = []
    for x in range(width):
        for y in range(height):
            if x < width - 1:
                weight = rng.randrange(MAX_WEIGHT)
                if bias == Bias.HORIZONTAL:
                    weight = 0
                edges.append(Edge((x, y), (x + 1, y), weight))
            if y < height - 1:
                weight = rng.randrange(MAX_WEIGHT)
                if bias == Bias.VERTICAL:
                    weight = 0
                edges.append(Edge((x, y), (x, y + 1), weight))
    return pvector(edges)


def build_grid(
    width: int, height: int, rng: random.Random, bias: Bias = Bias.NONE
) -> Tuple[PMap[Coord, Node], PVector[Edge]]:
    """Return the fresh node arena and candidate edges for a grid.

    Raises:
        ConfigurationError: If either dimension is not positive. Checked before
            anything is allocated.
    """
    if width <= 0 or height <= 0:
        raise ConfigurationError(f"Maze size must be positive, got {width}x{height}")
    return build_nodes(width, height), build_edges(width, height, rng, bias)
