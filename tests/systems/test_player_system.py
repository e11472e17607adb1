import pytest

from maze_world.actions import Direction
from maze_world.objectives import is_solved, player_won, search_solved
from maze_world.systems.player import move_player, score_message
from tests.test_utils import SNAKE_SOLUTION, directions_along, make_maze, make_snake_maze

# 2x2: (0,0)-(1,0) and (0,0)-(0,1)-(1,1); canonical path goes down, not right.
SIDE_PASSAGES = [((0, 0), (1, 0)), ((0, 0), (0, 1)), ((0, 1), (1, 1))]


def test_move_off_path_counts_wrong_move() -> None:
    maze = make_maze(2, 2, SIDE_PASSAGES)
    assert list(maze.solution) == [(1, 1), (0, 1), (0, 0)]
    maze = move_player(maze, Direction.RIGHT)
    assert maze.player.position == (1, 0)
    assert maze.player.wrong_moves == 1


def test_move_into_wall_is_noop() -> None:
    maze = move_player(make_maze(2, 2, SIDE_PASSAGES), Direction.RIGHT)
    moved = move_player(maze, Direction.DOWN)
    assert moved.player.position == (1, 0)
    assert moved.player.wrong_moves == 1


@pytest.mark.parametrize("direction", [Direction.UP, Direction.LEFT])
def test_move_off_grid_is_noop(direction: Direction) -> None:
    maze = move_player(make_maze(2, 2, SIDE_PASSAGES), direction)
    assert maze.player.position == (0, 0)
    assert maze.player.wrong_moves == 0
    assert (0, 0) in maze.player.trail


def test_move_along_path_counts_nothing() -> None:
    maze = make_maze(2, 2, SIDE_PASSAGES)
    maze = move_player(maze, Direction.DOWN)
    assert maze.player.position == (0, 1)
    assert maze.player.wrong_moves == 0


def test_returning_to_path_is_not_wrong() -> None:
    maze = make_maze(2, 2, SIDE_PASSAGES)
    maze = move_player(maze, Direction.RIGHT)
    maze = move_player(maze, Direction.LEFT)
    assert maze.player.position == (0, 0)
    assert maze.player.wrong_moves == 1


def test_trail_records_locations() -> None:
    maze = make_maze(2, 2, SIDE_PASSAGES)
    for direction in (Direction.DOWN, Direction.RIGHT):
        maze = move_player(maze, direction)
    assert set(maze.player.trail) == {(0, 1), (1, 1)}


def test_walking_solution_wins_without_wrong_moves() -> None:
    maze = make_snake_maze()
    for direction in directions_along(list(reversed(SNAKE_SOLUTION))):
        assert not player_won(maze)
        maze = move_player(maze, direction)
    assert player_won(maze)
    assert is_solved(maze)
    assert not search_solved(maze)
    assert maze.player.wrong_moves == 0


def test_move_accepts_direction_string() -> None:
    maze = move_player(make_maze(2, 2, SIDE_PASSAGES), "down")  # type: ignore[arg-type]
    assert maze.player.position == (0, 1)


@pytest.mark.parametrize("direction", ["north", "", "UP"])
def test_unrecognized_direction_is_noop(direction: str) -> None:
    maze = move_player(make_maze(2, 2, SIDE_PASSAGES), Direction.RIGHT)
    moved = move_player(maze, direction)  # type: ignore[arg-type]
    assert moved.player.position == (1, 0)
    assert moved.player.wrong_moves == 1
    assert moved.player.trail == maze.player.trail.add((1, 0))


def test_score_message() -> None:
    maze = move_player(make_maze(2, 2, SIDE_PASSAGES), Direction.RIGHT)
    assert score_message(maze) == "You made 1 wrong moves"
