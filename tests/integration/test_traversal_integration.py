import pytest

from maze_world.config import MazeConfig
from maze_world.levels.maze import generate
from maze_world.systems.traversal import run_to_completion, start_traversal, step_traversal
from maze_world.types import TraversalKind


@pytest.mark.parametrize("kind", [TraversalKind.BFS, TraversalKind.DFS])
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_search_path_matches_canonical_path(kind: TraversalKind, seed: int) -> None:
    maze = generate(MazeConfig(width=15, height=10, seed=seed))
    traversal = run_to_completion(maze, start_traversal(maze, kind))
    assert traversal.solved
    # A perfect maze has exactly one simple path.
    assert traversal.path == maze.solution


@pytest.mark.parametrize("kind", [TraversalKind.BFS, TraversalKind.DFS])
def test_came_from_points_at_visited_discoverer(kind: TraversalKind) -> None:
    maze = generate(MazeConfig(width=10, height=10, seed=6))
    traversal = start_traversal(maze, kind)
    for _ in range(40):
        traversal = step_traversal(maze, traversal)
        assert maze.start not in traversal.came_from
        for node, edge in traversal.came_from.items():
            parent = edge.other(node)
            assert parent in traversal.visited
            assert node in maze.nodes[parent].links.values()


def test_steps_interleave_between_independent_searches() -> None:
    maze = generate(MazeConfig(width=8, height=8, seed=4))
    bfs = start_traversal(maze, TraversalKind.BFS)
    dfs = start_traversal(maze, TraversalKind.DFS)
    while bfs.in_progress or dfs.in_progress:
        bfs = step_traversal(maze, bfs)
        dfs = step_traversal(maze, dfs)
    assert bfs.path == dfs.path == maze.solution
