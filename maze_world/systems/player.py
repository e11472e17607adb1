"""Player movement system.

Moves the player cursor one carved passage at a time:

1. If the current node has a link in the requested direction the player moves
    there, and the move counts as wrong when the destination is not on the
    canonical path.
2. Otherwise (no carved link, or an unrecognized direction) the request
    is a no-op: position and counter are unchanged.

Either way the resulting location joins the player's trail. Winning (standing
on the target) is evaluated by :mod:`maze_world.objectives`, not here.
"""

from dataclasses import replace

from maze_world.actions import Direction
from maze_world.state import Maze


def move_player(maze: Maze, direction: Direction) -> Maze:
    """Attempt to move the player one tile.

    Args:
        maze (Maze): Current maze.
        direction (Direction): Requested direction.

    Returns:
        Maze: Maze with the updated player.
    """
    player = maze.player
    try:
        direction = Direction(direction)
    except ValueError:
        destination = None
    else:
        destination = maze.nodes[player.position].neighbor(direction)
    if destination is None:
        player = replace(player, trail=player.trail.add(player.position))
        return replace(maze, player=player)

    wrong_moves = player.wrong_moves
    if destination not in maze.solution_set:
        wrong_moves += 1
    player = replace(
        player,
        position=destination,
        wrong_moves=wrong_moves,
        trail=player.trail.add(destination),
    )
    return replace(maze, player=player)


def score_message(maze: Maze) -> str:
    """Human readable wrong-move tally."""
    return f"You made {maze.player.wrong_moves} wrong moves"
