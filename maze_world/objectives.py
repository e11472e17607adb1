"""Objective predicates.

Pure checks over a :class:`~maze_world.state.Maze` answering whether the maze
counts as solved. The external driver calls these after each tick or move;
no transition evaluates them on its own.
"""

from maze_world.state import Maze


def player_won(maze: Maze) -> bool:
    """Player stands on the target node."""
    return maze.player.position == maze.target


def search_solved(maze: Maze) -> bool:
    """The attached incremental search has reached the target."""
    return maze.traversal is not None and maze.traversal.solved


def is_solved(maze: Maze) -> bool:
    """Either the player or the running search has reached the target."""
    return player_won(maze) or search_solved(maze)
