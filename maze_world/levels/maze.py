"""Perfect maze generation (Kruskal's algorithm).

Pipeline:

1. :func:`~maze_world.levels.grid.build_grid` creates nodes and weighted
   candidate edges.
2. :func:`carve` stable-sorts the candidates by weight and keeps each edge that
   joins two different union-find components, yielding a spanning tree of
   exactly ``node_count - 1`` edges, then writes the adjacency links.
3. :func:`generate` wraps both, runs the one-shot solver for the canonical
   path and places the player on the start node.

Given the same seed the result is identical: weights come from a seeded
``random.Random`` and ties keep input order.
"""

import logging
import random
from dataclasses import replace
from typing import Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PMap, PVector

from maze_world.actions import OPPOSITE
from maze_world.components import Edge, Node, Player
from maze_world.config import MazeConfig
from maze_world.levels.grid import build_grid
from maze_world.state import Maze
from maze_world.systems.traversal import solve
from maze_world.types import Coord
from maze_world.utils.grid import direction_between
from maze_world.utils.union_find import find, make_sets, union

logger = logging.getLogger(__name__)


def select_tree_edges(
    nodes: PMap[Coord, Node], edges: PVector[Edge]
) -> PVector[Edge]:
    """Kruskal selection of spanning-tree edges.

    Scanning stops as soon as ``len(nodes) - 1`` edges are chosen; no later
    edge could join two components, so the result equals a full scan.
    """
    parents = make_sets(nodes.keys())
    needed = len(nodes) - 1
    tree: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(tree) >= needed:
            break
        root_a = find(parents, edge.a)
        root_b = find(parents, edge.b)
        if root_a == root_b:
            continue
        tree.append(edge)
        parents = union(parents, root_a, root_b)
    return pvector(tree)


def connect(nodes: PMap[Coord, Node], edge: Edge) -> PMap[Coord, Node]:
    """Open the passage ``edge`` on both endpoints.

    Horizontal pairs are linked LEFT/RIGHT, vertical pairs UP/DOWN.
    """
    direction = direction_between(edge.a, edge.b)
    node_a = nodes[edge.a].link(direction, edge.b)
    node_b = nodes[edge.b].link(OPPOSITE[direction], edge.a)
    return nodes.set(edge.a, node_a).set(edge.b, node_b)


def carve(
    nodes: PMap[Coord, Node], edges: PVector[Edge]
) -> Tuple[PMap[Coord, Node], PVector[Edge]]:
    """Select a spanning tree and materialize its links.

    Args:
        nodes (PMap[Coord, Node]): Unlinked node arena.
        edges (PVector[Edge]): Candidate edges.

    Returns:
        Tuple[PMap[Coord, Node], PVector[Edge]]: Linked arena and the
        ``len(nodes) - 1`` tree edges in selection order.
    """
    tree = select_tree_edges(nodes, edges)
    for edge in tree:
        nodes = connect(nodes, edge)
    return nodes, tree


def generate(config: MazeConfig, rng: Optional[random.Random] = None) -> Maze:
    """Build a complete maze: grid, carved tree, canonical path and player.

    Args:
        config (MazeConfig): Size, bias and seed. Validated before allocation.
        rng (random.Random | None): Weight source. Defaults to
            ``random.Random(config.seed)``; sessions pass their own generator
            so that successive mazes differ while staying reproducible.

    Returns:
        Maze: Fresh maze with no traversal attached.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    config.validate()
    if rng is None:
        rng = random.Random(config.seed)
    nodes, edges = build_grid(config.width, config.height, rng, config.bias)
    nodes, carved = carve(nodes, edges)
    maze = Maze(
        width=config.width,
        height=config.height,
        config=config,
        nodes=nodes,
        edges=edges,
        carved=carved,
        player=Player(position=(0, 0)),
        seed=config.seed,
    )
    maze = replace(maze, solution=solve(maze))
    logger.debug(
        "Generated %dx%d maze (bias=%s): %d candidate edges, %d carved, path length %d",
        config.width,
        config.height,
        config.bias,
        len(edges),
        len(carved),
        len(maze.solution),
    )
    return maze

