from pathlib import Path

import pytest

from maze_solver.maze_core.grid import Grid

RES = Path(__file__).resolve().parent / "res"


@pytest.fixture
def res_dir() -> Path:
    return RES


@pytest.fixture
def small_grid() -> Grid:
    return Grid.from_rows([[True, False],
                           [True, True]])
