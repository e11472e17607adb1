"""Gymnasium environment wrapper for the maze player.

The agent controls the player cursor. Observations pair the node flag array
with the wall arrays; reward is ``-1`` for every wrong move (a step onto a
node off the canonical path) and ``+1`` on reaching the target, which
terminates the episode. Bumping into a wall is a no-op with zero reward.

Observation schema:

``{"flags": uint16 (H, W), "east_walls": bool (H, W), "south_walls": bool (H, W)}``

Usage:

``env = MazeEnv(width=10, height=8, seed=3)``
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from maze_world.actions import MOVE_DIRECTIONS
from maze_world.config import MazeConfig
from maze_world.objectives import player_won
from maze_world.query import ViewConfig
from maze_world.session import MazeSession
from maze_world.types import Bias
from maze_world.utils.array import node_flag_array, wall_arrays

ObsType = Dict[str, Any]


class MazeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` over a :class:`~maze_world.session.MazeSession`.

    The action space is ``Discrete(4)`` indexing ``MOVE_DIRECTIONS`` (UP, DOWN,
    LEFT, RIGHT).
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        width: int = 20,
        height: int = 15,
        bias: Bias = Bias.NONE,
        seed: Optional[int] = None,
        show_solution: bool = False,
    ):
        self.config = MazeConfig(width=width, height=height, bias=bias, seed=seed)
        self.session = MazeSession(self.config)
        self.view = ViewConfig(show_search=False, show_solution=show_solution)

        self.observation_space = spaces.Dict(
            {
                "flags": spaces.Box(
                    low=0, high=np.iinfo(np.uint16).max, shape=(height, width), dtype=np.uint16
                ),
                "east_walls": spaces.MultiBinary([height, width]),
                "south_walls": spaces.MultiBinary([height, width]),
            }
        )
        self.action_space = spaces.Discrete(len(MOVE_DIRECTIONS))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode on a fresh maze.

        Arguments:
            seed: If given, re-seeds the session so the episode is reproducible.
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.config = MazeConfig(
                width=self.config.width,
                height=self.config.height,
                bias=self.config.bias,
                seed=seed,
            )
            self.session = MazeSession(self.config)
        else:
            self.session.reset_maze()
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Move the player one tile.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if not 0 <= int(action) < len(MOVE_DIRECTIONS):
            raise ValueError(f"Invalid action: {action}")
        before = self.session.maze.player.wrong_moves
        result = self.session.move_player(MOVE_DIRECTIONS[int(action)])
        reward = -float(result.wrong_moves - before)
        terminated = player_won(self.session.maze)
        if terminated:
            reward += 1.0
        return self._get_obs(), reward, terminated, False, self._get_info()

    def _get_obs(self) -> ObsType:
        east, south = wall_arrays(self.session.maze)
        return {
            "flags": node_flag_array(self.session.maze, self.view),
            "east_walls": east.astype(np.int8),
            "south_walls": south.astype(np.int8),
        }

    def _get_info(self) -> Dict[str, object]:
        player = self.session.maze.player
        return {
            "position": player.position,
            "wrong_moves": player.wrong_moves,
            "solution_length": len(self.session.maze.solution),
        }
