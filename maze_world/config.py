"""Maze configuration.

``MazeConfig`` replaces ambient global settings: size, corridor bias and RNG
seed are passed explicitly into generation. Defaults reproduce the classic
20x15 world.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from maze_world.errors import ConfigurationError
from maze_world.types import Bias


@dataclass(frozen=True)
class MazeConfig:
    """Parameters for building one maze.

    Attributes:
        width: Number of columns (must be positive).
        height: Number of rows (must be positive).
        bias: Corridor bias applied to candidate edge weights.
        seed: Optional RNG seed; ``None`` draws from system entropy.
    """

    width: int = 20
    height: int = 15
    bias: Bias = Bias.NONE
    seed: Optional[int] = None

    def validate(self) -> "MazeConfig":
        """Return ``self`` if usable, else raise :class:`ConfigurationError`."""
        if not isinstance(self.width, int) or not isinstance(self.height, int):
            raise ConfigurationError(
                f"Maze size must be integers, got {self.width!r}x{self.height!r}"
            )
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Maze size must be positive, got {self.width}x{self.height}"
            )
        if self.bias not in tuple(Bias):
            raise ConfigurationError(f"Unknown bias: {self.bias!r}")
        return self

    @property
    def node_count(self) -> int:
        return self.width * self.height

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MazeConfig":
        """Build a config from plain data (e.g. parsed JSON/TOML).

        ``bias`` may be given as the enum value string (``"vertical"``).
        Unknown keys are ignored.
        """
        bias_value = data.get("bias", Bias.NONE)
        try:
            bias = Bias(bias_value)
        except ValueError as e:
            raise ConfigurationError(f"Unknown bias: {bias_value!r}") from e
        config = cls(
            width=data.get("width", cls.width),
            height=data.get("height", cls.height),
            bias=bias,
            seed=data.get("seed"),
        )
        return config.validate()
