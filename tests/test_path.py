from maze_solver.maze_core.path import PathNode


def test_extend_does_not_mutate_prefix():
    base = PathNode.from_locations([(0, 0), (0, 1)])
    left = base.extend((1, 1))
    right = base.extend((0, 2))
    assert base.to_list() == [(0, 0), (0, 1)]
    assert left.to_list() == [(0, 0), (0, 1), (1, 1)]
    assert right.to_list() == [(0, 0), (0, 1), (0, 2)]
    assert left.parent is right.parent is base


def test_length_and_last():
    node = PathNode.from_locations([(0, 0), (1, 0), (1, 1)])
    assert len(node) == 3
    assert node.last == (1, 1)


def test_membership():
    node = PathNode.from_locations([(0, 0), (1, 0)])
    assert (1, 0) in node
    assert (0, 0) in node
    assert (1, 1) not in node


def test_from_empty_is_none():
    assert PathNode.from_locations([]) is None
