"""Stateful maze session for external drivers.

Every engine transition is a pure function over :class:`~maze_world.state.Maze`.
A driver (game loop, UI, test harness) usually wants a single mutable handle
instead; :class:`MazeSession` holds the current ``Maze`` and its RNG and
exposes the lifecycle, traversal, player and query operations as methods.

Usage:

``session = new_maze(20, 15, Bias.NONE, seed=7)``
``session.start_traversal(TraversalKind.BFS)``
``while session.step_traversal().in_progress: ...``

Calls must be serialized by the driver (one step per tick); nothing here
blocks or spawns work.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import List, Optional

from maze_world.actions import Direction
from maze_world.components import Edge, Traversal
from maze_world.config import MazeConfig
from maze_world.levels.maze import generate
from maze_world.objectives import is_solved, player_won
from maze_world.query import NodeView, ViewConfig, carved_edges, node_views, wall_edges
from maze_world.state import Maze
from maze_world.systems.player import move_player, score_message
from maze_world.systems.traversal import start_traversal, step_traversal
from maze_world.types import Bias, Coord, TraversalKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    in_progress: bool
    solved: bool
    current: Optional[Coord]


@dataclass(frozen=True)
class MoveResult:
    location: Coord
    wrong_moves: int


class MazeSession:
    """Mutable handle around the current immutable ``Maze``.

    Parameters mirror :class:`~maze_world.config.MazeConfig`. The session owns
    one ``random.Random(config.seed)``; :meth:`reset_maze` keeps drawing from
    it, so a seeded session replays the same sequence of mazes.
    """

    def __init__(self, config: MazeConfig = MazeConfig()):
        self.config: MazeConfig = config.validate()
        self._rng = random.Random(config.seed)
        self.maze: Maze = generate(self.config, self._rng)

    # -------- Lifecycle --------

    def reset_maze(self) -> Maze:
        """Discard all state and generate a fresh maze."""
        self.maze = generate(self.config, self._rng)
        logger.debug("Session reset: %s", dict(self.maze.description))
        return self.maze

    # -------- Traversal --------

    @property
    def traversal(self) -> Optional[Traversal]:
        return self.maze.traversal

    def start_traversal(self, kind: TraversalKind, restart: bool = False) -> Traversal:
        """Attach a new BFS/DFS search starting at the start node.

        While a search is running further starts are ignored unless
        ``restart`` is set, and the running search is returned with its own
        ``kind`` even when a different ``kind`` was requested. A finished
        search may always be replaced.
        """
        current = self.maze.traversal
        if current is not None and current.in_progress and not restart:
            logger.debug(
                "Start of %s search ignored: %s search still running", kind, current.kind
            )
            return current
        traversal = start_traversal(self.maze, kind)
        self.maze = replace(self.maze, traversal=traversal)
        return traversal

    def step_traversal(self) -> StepResult:
        """Advance the attached search by one step (no-op without a search)."""
        traversal = self.maze.traversal
        if traversal is None:
            return StepResult(in_progress=False, solved=False, current=None)
        traversal = step_traversal(self.maze, traversal)
        self.maze = replace(self.maze, traversal=traversal)
        return StepResult(
            in_progress=traversal.in_progress,
            solved=traversal.solved,
            current=traversal.current,
        )

    # -------- Player --------

    def move_player(self, direction: Direction) -> MoveResult:
        self.maze = move_player(self.maze, direction)
        player = self.maze.player
        return MoveResult(location=player.position, wrong_moves=player.wrong_moves)

    @property
    def player_won(self) -> bool:
        return player_won(self.maze)

    @property
    def is_solved(self) -> bool:
        return is_solved(self.maze)

    @property
    def score(self) -> str:
        return score_message(self.maze)

    # -------- Queries --------

    def nodes(self, view: ViewConfig = ViewConfig()) -> List[NodeView]:
        return node_views(self.maze, view)

    def carved_edges(self) -> List[Edge]:
        return carved_edges(self.maze)

    def wall_edges(self) -> List[Edge]:
        return wall_edges(self.maze)


def new_maze(
    width: int, height: int, bias: Bias = Bias.NONE, seed: Optional[int] = None
) -> MazeSession:
    """Create a session over a freshly generated maze.

    Raises:
        ConfigurationError: If the size is not positive or the bias unknown.
    """
    return MazeSession(MazeConfig(width=width, height=height, bias=bias, seed=seed))
