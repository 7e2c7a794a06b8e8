import pytest

from maze_solver.errors import (EmptyPath, IllegalMove, LoopDetected, PathValidationError,
                                WrongEntry, WrongExit)
from maze_solver.eval_core.parser import read_solution_file
from maze_solver.eval_core.validator import Validator, validate_path
from maze_solver.maze_core.grid import Grid
from maze_solver.maze_core.loader import read_maze_file


def test_correct_solution(small_grid):
    assert validate_path(small_grid, [(0, 0), (1, 0), (1, 1)]) is None


def test_correct_solution_from_file(res_dir):
    grid = read_maze_file(res_dir / "5x7.maze")
    validate_path(grid, read_solution_file(res_dir / "5x7.soln"))


@pytest.mark.parametrize("path, error", [
    ([(1, 0), (0, 0)], WrongExit),
    ([(1, 0), (1, 1)], WrongEntry),
    ([(0, 0), (0, 1), (1, 1)], IllegalMove),
    ([(0, 0), (1, 1)], IllegalMove),
    ([(0, 0), (1, 0), (0, 0), (1, 0), (1, 1)], LoopDetected),
    ([], EmptyPath),
])
def test_invalid_paths(small_grid, path, error):
    with pytest.raises(error):
        validate_path(small_grid, path)


def test_path_outside_maze():
    grid = Grid.from_rows([[True, True]])
    with pytest.raises(IllegalMove):
        validate_path(grid, [(0, 0), (1, 0), (1, 1), (0, 1)])


def test_single_cell_path():
    validate_path(Grid.from_rows([[True]]), [(0, 0)])
    with pytest.raises(WrongExit):
        validate_path(Grid.from_rows([[True, False]]), [(0, 0)])
    with pytest.raises(WrongEntry):
        validate_path(Grid.from_rows([[False]]), [(0, 0)])


def test_path_ending_on_wall():
    grid = Grid.from_rows([[True, False],
                           [True, False]])
    with pytest.raises(IllegalMove):
        validate_path(grid, [(0, 0), (1, 0), (1, 1)])


def test_path_starting_on_wall():
    grid = Grid.from_rows([[False, False],
                           [True, True]])
    with pytest.raises(WrongEntry):
        validate_path(grid, [(0, 0), (1, 0), (1, 1)])


def test_exit_checked_before_moves(small_grid):
    # both a teleport and a wrong exit: the exit check reports first
    with pytest.raises(WrongExit):
        validate_path(small_grid, [(0, 0), (1, 1), (1, 0)])


def test_move_checked_before_loop():
    grid = Grid.from_rows([[True, True, True]])
    with pytest.raises(IllegalMove):
        validate_path(grid, [(0, 2), (0, 0), (0, 1), (0, 2)])


def test_caller_path_not_mutated(small_grid):
    path = [(0, 0), (1, 0), (1, 1)]
    validate_path(small_grid, path)
    assert path == [(0, 0), (1, 0), (1, 1)]


def test_errors_carry_code_and_reason(small_grid):
    with pytest.raises(PathValidationError) as exc:
        validate_path(small_grid, [(0, 0), (1, 0), (0, 0), (1, 0), (1, 1)])
    assert exc.value.code == "loop_detected"
    assert "(1, 0)" in exc.value.reason


def test_validator_reports_instead_of_raising(small_grid):
    v = Validator(small_grid)
    bad = v.validate([(1, 0), (0, 0)])
    assert bad["ok"] is False
    assert bad["code"] == "wrong_exit"
    assert bad["error"].startswith("wrong_exit: ")

    good = v.validate([(0, 0), (1, 0), (1, 1)])
    assert good == {"ok": True, "length": 2, "optimal": True, "overlap": 1.0}


def test_validator_optimality_and_overlap():
    grid = Grid.from_rows([[True, True],
                           [True, True]])
    v = Validator(grid, shortest_path=[(0, 0), (0, 1), (1, 1)])
    res = v.validate([(0, 0), (1, 0), (1, 1)])
    assert res["ok"] and res["optimal"]
    assert res["overlap"] == pytest.approx(2 / 4)

    wide = Grid.from_rows([[True, True, True],
                           [True, True, True]])
    res = Validator(wide).validate([(0, 0), (1, 0), (1, 1), (0, 1), (0, 2), (1, 2)])
    assert res["ok"]
    assert res["length"] == 5
    assert res["optimal"] is False


def test_validator_on_unsolvable_grid(res_dir):
    grid = read_maze_file(res_dir / "blocked.maze")
    v = Validator(grid)
    assert v.shortest_path == []
    assert v.validate([(0, 0)])["code"] == "wrong_exit"
