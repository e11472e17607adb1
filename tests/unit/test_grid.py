# tests/unit/test_grid.py

import random

import pytest

from maze_world.actions import Direction
from maze_world.components import Edge
from maze_world.errors import ConfigurationError
from maze_world.levels.grid import MAX_WEIGHT, build_edges, build_grid, build_nodes
from maze_world.types import Bias
from maze_world.utils.grid import direction_between, is_in_bounds, step_position


@pytest.mark.parametrize("width, height", [(1, 1), (1, 4), (4, 1), (3, 3), (20, 15)])
def test_build_grid_counts(width: int, height: int) -> None:
    nodes, edges = build_grid(width, height, random.Random(0))
    assert len(nodes) == width * height
    assert len(edges) == (width - 1) * height + width * (height - 1)
    assert all(len(node.links) == 0 for node in nodes.values())


def test_edges_are_unique_adjacent_pairs() -> None:
    _, edges = build_grid(6, 5, random.Random(1))
    keys = [edge.key for edge in edges]
    assert len(keys) == len(set(keys))
    for edge in edges:
        assert edge.a != edge.b
        dx, dy = abs(edge.a[0] - edge.b[0]), abs(edge.a[1] - edge.b[1])
        assert dx + dy == 1
        assert 0 <= edge.weight < MAX_WEIGHT


def test_edge_order_is_right_then_down_column_major() -> None:
    edges = build_edges(2, 2, random.Random(0))
    assert [(e.a, e.b) for e in edges] == [
        ((0, 0), (1, 0)),
        ((0, 0), (0, 1)),
        ((0, 1), (1, 1)),
        ((1, 0), (1, 1)),
    ]


@pytest.mark.parametrize(
    "bias, zero_horizontal, zero_vertical",
    [
        (Bias.HORIZONTAL, True, False),
        (Bias.VERTICAL, False, True),
    ],
)
def test_bias_forces_axis_weights_to_zero(
    bias: Bias, zero_horizontal: bool, zero_vertical: bool
) -> None:
    edges = build_edges(8, 8, random.Random(3), bias)
    horizontal = [e.weight for e in edges if e.is_horizontal]
    vertical = [e.weight for e in edges if not e.is_horizontal]
    assert all(w == 0 for w in horizontal) == zero_horizontal
    assert all(w == 0 for w in vertical) == zero_vertical


def test_bias_does_not_shift_rng_stream() -> None:
    plain = build_edges(5, 5, random.Random(9))
    biased = build_edges(5, 5, random.Random(9), Bias.VERTICAL)
    for p, b in zip(plain, biased):
        if p.is_horizontal:
            assert p.weight == b.weight


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_build_grid_rejects_non_positive_size(width: int, height: int) -> None:
    with pytest.raises(ConfigurationError):
        build_grid(width, height, random.Random(0))


def test_build_nodes_positions() -> None:
    nodes = build_nodes(3, 2)
    assert set(nodes) == {(x, y) for x in range(3) for y in range(2)}
    assert nodes[(2, 1)].x == 2 and nodes[(2, 1)].y == 1


def test_edge_other_and_key() -> None:
    edge = Edge((0, 0), (1, 0), 5)
    assert edge.other((0, 0)) == (1, 0)
    assert edge.other((1, 0)) == (0, 0)
    assert edge.key == Edge((1, 0), (0, 0), 99).key
    with pytest.raises(ValueError):
        edge.other((2, 2))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((1, 1), (1, 0), Direction.UP),
        ((1, 1), (1, 2), Direction.DOWN),
        ((1, 1), (0, 1), Direction.LEFT),
        ((1, 1), (2, 1), Direction.RIGHT),
    ],
)
def test_direction_between(a: tuple[int, int], b: tuple[int, int], expected: Direction) -> None:
    assert direction_between(a, b) == expected
    assert step_position(a, expected) == b


def test_direction_between_non_adjacent_raises() -> None:
    with pytest.raises(ValueError):
        direction_between((0, 0), (2, 0))


def test_is_in_bounds() -> None:
    assert is_in_bounds(3, 2, (2, 1))
    assert not is_in_bounds(3, 2, (3, 1))
    assert not is_in_bounds(3, 2, (0, -1))
