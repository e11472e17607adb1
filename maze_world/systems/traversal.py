"""Incremental breadth-first / depth-first search.

Each call to :func:`step_traversal` performs exactly one pop-and-expand so an
external driver can animate a search one tick at a time and interleave other
work between ticks. BFS and DFS share the step; only the end of the frontier
that is popped differs (left for the BFS queue, right for the DFS stack).

Step semantics:

* A popped node that is already visited is discarded without expansion. This
  prunes the duplicate frontier entries that insertion does not guard
  against.
* Popping the target reconstructs the path from the came-from map and ends
  the search as ``SOLVED``.
* Otherwise every linked, unvisited neighbour is pushed and, if it has no
  came-from entry yet, gets one pointing back at the popped node (first
  discovery wins). The popped node is then marked visited.
* Stepping an empty frontier ends the search as ``EXHAUSTED``; stepping a
  finished search returns it unchanged.

:func:`solve` runs the same depth-first search to completion with private
bookkeeping; it is used once per maze to compute the canonical path.
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple

from pyrsistent import pdeque, pvector
from pyrsistent.typing import PDeque, PVector

from maze_world.components import Edge, Traversal
from maze_world.state import Maze
from maze_world.types import Coord, TraversalKind, TraversalStatus
from maze_world.utils.path import reconstruct_path

logger = logging.getLogger(__name__)


def start_traversal(maze: Maze, kind: TraversalKind) -> Traversal:
    """Fresh search whose frontier holds only the start node."""
    return Traversal(kind=TraversalKind(kind), frontier=pdeque([maze.start]))


def _pop(traversal: Traversal) -> Tuple[Coord, PDeque[Coord]]:
    frontier = traversal.frontier
    if traversal.kind == TraversalKind.BFS:
        return frontier.left, frontier.popleft()
    return frontier.right, frontier.pop()


def step_traversal(maze: Maze, traversal: Traversal) -> Traversal:
    """Advance ``traversal`` by one pop-and-expand.

    Args:
        maze (Maze): Carved maze being searched.
        traversal (Traversal): Search state before the step.

    Returns:
        Traversal: Search state after the step.

    Raises:
        CorruptionError: If the came-from map cannot be walked back to the
            start once the target is reached.
    """
    if not traversal.in_progress:
        return traversal

    if not traversal.frontier:
        return replace(traversal, status=TraversalStatus.EXHAUSTED)

    current, frontier = _pop(traversal)
    steps = traversal.steps + 1

    if current in traversal.visited:
        return replace(traversal, frontier=frontier, current=current, steps=steps)

    visited = traversal.visited.add(current)

    if current == maze.target:
        path = reconstruct_path(traversal.came_from, current, maze.start)
        logger.debug(
            "%s reached target after %d steps, path length %d",
            traversal.kind,
            steps,
            len(path),
        )
        return replace(
            traversal,
            frontier=frontier,
            visited=visited,
            current=current,
            status=TraversalStatus.SOLVED,
            path=path,
            steps=steps,
        )

    came_from = traversal.came_from
    for neighbor in maze.nodes[current].neighbors():
        if neighbor in visited:
            continue
        frontier = frontier.append(neighbor)
        if neighbor not in came_from:
            came_from = came_from.set(neighbor, Edge(current, neighbor, 0))

    return replace(
        traversal,
        frontier=frontier,
        visited=visited,
        came_from=came_from,
        current=current,
        steps=steps,
    )


def run_to_completion(
    maze: Maze, traversal: Traversal, max_steps: Optional[int] = None
) -> Traversal:
    """Step until the search is no longer in progress.

    ``max_steps`` bounds the number of steps taken by this call; ``None``
    means unbounded (every search over a finite maze terminates).
    """
    taken = 0
    while traversal.in_progress and (max_steps is None or taken < max_steps):
        traversal = step_traversal(maze, traversal)
        taken += 1
    return traversal


def solve(maze: Maze) -> PVector[Coord]:
    """One-shot depth-first solve returning the canonical path.

    Uses its own traversal, so nothing attached to ``maze`` is touched.

    Returns:
        PVector[Coord]: Target-to-start path, or an empty vector when the
        target is unreachable.
    """
    traversal = run_to_completion(maze, start_traversal(maze, TraversalKind.DFS))
    if not traversal.solved:
        logger.debug("Solver exhausted frontier without reaching %s", maze.target)
        return pvector()
    return traversal.path
