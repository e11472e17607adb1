# tests/unit/test_config.py

import pytest

from maze_world.config import MazeConfig
from maze_world.errors import ConfigurationError, MazeError
from maze_world.types import Bias


def test_defaults_match_classic_world() -> None:
    config = MazeConfig()
    assert (config.width, config.height) == (20, 15)
    assert config.bias == Bias.NONE
    assert config.node_count == 300
    assert config.validate() is config


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-3, 4)])
def test_validate_rejects_non_positive_size(width: int, height: int) -> None:
    with pytest.raises(ConfigurationError):
        MazeConfig(width=width, height=height).validate()


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        MazeConfig(width=0).validate()
    assert issubclass(ConfigurationError, MazeError)


def test_validate_rejects_unknown_bias() -> None:
    with pytest.raises(ConfigurationError):
        MazeConfig(bias="diagonal").validate()  # type: ignore[arg-type]


def test_from_mapping() -> None:
    config = MazeConfig.from_mapping({"width": 4, "height": 3, "bias": "vertical", "seed": 5})
    assert config == MazeConfig(width=4, height=3, bias=Bias.VERTICAL, seed=5)


def test_from_mapping_defaults_and_errors() -> None:
    assert MazeConfig.from_mapping({}) == MazeConfig()
    with pytest.raises(ConfigurationError):
        MazeConfig.from_mapping({"bias": "sideways"})
    with pytest.raises(ConfigurationError):
        MazeConfig.from_mapping({"width": 0})
