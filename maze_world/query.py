"""Read-only query surface for presentation layers.

Renderers never inspect ``Maze`` internals directly; they enumerate
:class:`NodeView` records and the carved / wall edge lists produced here.
Visibility toggles are passed explicitly through :class:`ViewConfig` instead of
living in global state.
"""

from dataclasses import dataclass, replace
from typing import List

from maze_world.components import Edge
from maze_world.state import Maze
from maze_world.types import Coord, TraversalKind


@dataclass(frozen=True)
class ViewConfig:
    """What a renderer is allowed to see.

    Attributes:
        show_search: Expose visited/path flags of the running search.
        show_solution: Expose membership in the canonical path.
    """

    show_search: bool = True
    show_solution: bool = False

    def toggled(self) -> "ViewConfig":
        """Flip search visibility."""
        return replace(self, show_search=not self.show_search)


@dataclass(frozen=True)
class NodeView:
    position: Coord
    is_start: bool = False
    is_target: bool = False
    visited_bfs: bool = False
    visited_dfs: bool = False
    on_search_path: bool = False
    on_solution_path: bool = False
    visited_by_player: bool = False
    is_current: bool = False
    is_player: bool = False

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]


def node_view(maze: Maze, pos: Coord, view: ViewConfig = ViewConfig()) -> NodeView:
    """Flags of a single node under ``view``."""
    traversal = maze.traversal if view.show_search else None
    visited = traversal is not None and pos in traversal.visited
    kind = traversal.kind if traversal is not None else None
    return NodeView(
        position=pos,
        is_start=pos == maze.start,
        is_target=pos == maze.target,
        visited_bfs=visited and kind == TraversalKind.BFS,
        visited_dfs=visited and kind == TraversalKind.DFS,
        on_search_path=traversal is not None and pos in traversal.path,
        on_solution_path=view.show_solution and pos in maze.solution_set,
        visited_by_player=pos in maze.player.trail,
        is_current=traversal is not None and traversal.current == pos,
        is_player=maze.player.position == pos,
    )


def node_views(maze: Maze, view: ViewConfig = ViewConfig()) -> List[NodeView]:
    """All nodes in row-major order (``y`` outer, ``x`` inner)."""
    return [
        node_view(maze, (x, y), view)
        for y in range(maze.height)
        for x in range(maze.width)
    ]


def carved_edges(maze: Maze) -> List[Edge]:
    """Passages of the maze (spanning-tree edges)."""
    return list(maze.carved)


def wall_edges(maze: Maze) -> List[Edge]:
    """Candidate edges that were not carved, i.e. interior walls."""
    carved = {edge.key for edge in maze.carved}
    return [edge for edge in maze.edges if edge.key not in carved]
