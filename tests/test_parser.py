import pytest

from maze_solver.errors import FileOpenFailure, MalformedSolutionFormat
from maze_solver.eval_core.parser import (SolutionParser, format_path, read_solution_file,
                                          write_solution_file)


def test_stack_notation():
    res = SolutionParser().parse("{r0c0, r1c0, r1c1}\n")
    assert res.mode == "stack"
    assert res.path == [(0, 0), (1, 0), (1, 1)]


def test_tuple_notation():
    res = SolutionParser().parse("[(0,0), (1, 0),(1,1)]")
    assert res.mode == "coords"
    assert res.path == [(0, 0), (1, 0), (1, 1)]


def test_json_notation():
    res = SolutionParser().parse("[[0, 0], [1, 0]]")
    assert res.mode == "json_list"
    assert res.path == [(0, 0), (1, 0)]


def test_empty_containers():
    assert SolutionParser().parse("{}").path == []
    assert SolutionParser().parse("[]").path == []


@pytest.mark.parametrize("text", [
    "",
    "r0c0, r1c0",
    "{r0c0 r1c0}",
    "[(0,0),(1,0)",
    "[[0, 0, 1]]",
    "[[true, 0]]",
    "go right then down",
])
def test_malformed(text):
    with pytest.raises(MalformedSolutionFormat):
        SolutionParser().parse(text)


def test_read_files_agree(res_dir):
    assert read_solution_file(res_dir / "5x7.soln") == read_solution_file(res_dir / "5x7_tuples.soln")
    assert len(read_solution_file(res_dir / "5x7.soln")) == 15


def test_missing_solution_file(tmp_path):
    with pytest.raises(FileOpenFailure):
        read_solution_file(tmp_path / "missing.soln")


def test_write_then_read(tmp_path):
    path = [(0, 0), (0, 1), (1, 1)]
    out = write_solution_file(tmp_path / "a.soln", path)
    assert out.read_text(encoding="utf-8") == "{r0c0, r0c1, r1c1}\n"
    assert read_solution_file(out) == path


def test_format_modes():
    path = [(0, 0), (1, 0)]
    assert format_path(path, "coords") == "[(0,0),(1,0)]"
    assert format_path(path, "json_list") == "[[0, 0], [1, 0]]"
    with pytest.raises(ValueError):
        format_path(path, "yaml")
