"""Dense array export of node flags.

Packs every :class:`~maze_world.query.NodeView` into one ``uint16`` bitmask
per cell so renderers and learning code can consume the whole maze as a
``(height, width)`` array. Walls are exported separately as two boolean
arrays (east and south side of each cell).
"""

from enum import IntFlag

import numpy as np
import numpy.typing as npt

from maze_world.actions import Direction
from maze_world.query import NodeView, ViewConfig, node_views
from maze_world.state import Maze

UInt16Array = npt.NDArray[np.uint16]
BoolArray = npt.NDArray[np.bool_]


class NodeFlag(IntFlag):
    NONE = 0
    START = 1 << 0
    TARGET = 1 << 1
    VISITED_BFS = 1 << 2
    VISITED_DFS = 1 << 3
    SEARCH_PATH = 1 << 4
    SOLUTION_PATH = 1 << 5
    PLAYER_TRAIL = 1 << 6
    CURRENT = 1 << 7
    PLAYER = 1 << 8


_VIEW_FLAGS = [
    ("is_start", NodeFlag.START),
    ("is_target", NodeFlag.TARGET),
    ("visited_bfs", NodeFlag.VISITED_BFS),
    ("visited_dfs", NodeFlag.VISITED_DFS),
    ("on_search_path", NodeFlag.SEARCH_PATH),
    ("on_solution_path", NodeFlag.SOLUTION_PATH),
    ("visited_by_player", NodeFlag.PLAYER_TRAIL),
    ("is_current", NodeFlag.CURRENT),
    ("is_player", NodeFlag.PLAYER),
]


def node_flags(view: NodeView) -> NodeFlag:
    flags = NodeFlag.NONE
    for attr, flag in _VIEW_FLAGS:
        if getattr(view, attr):
            flags |= flag
    return flags


def node_flag_array(maze: Maze, view: ViewConfig = ViewConfig()) -> UInt16Array:
    """Return a ``(height, width)`` array of :class:`NodeFlag` bitmasks."""
    out: UInt16Array = np.zeros((maze.height, maze.width), dtype=np.uint16)
    for node in node_views(maze, view):
        out[node.y, node.x] = int(node_flags(node))
    return out


def wall_arrays(maze: Maze) -> tuple[BoolArray, BoolArray]:
    """Interior walls as ``(east, south)`` boolean arrays of shape (height, width).

    ``east[y, x]`` is True when no passage leads right from ``(x, y)``;
    ``south[y, x]`` likewise downward. The outer border counts as wall.
    """
    east: BoolArray = np.ones((maze.height, maze.width), dtype=np.bool_)
    south: BoolArray = np.ones((maze.height, maze.width), dtype=np.bool_)
    for (x, y), node in maze.nodes.items():
        if Direction.RIGHT in node.links:
            east[y, x] = False
        if Direction.DOWN in node.links:
            south[y, x] = False
    return east, south
