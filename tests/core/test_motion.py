from grid_planner.core.motion import get_motion
from grid_planner.core.node import Node, manhattan


def test_four_unit_moves_in_order():
    moves = [(m.x, m.y, m.cost) for m in get_motion()]
    assert moves == [(0, 1, 1), (1, 0, 1), (0, -1, 1), (-1, 0, 1)]


def test_no_diagonals():
    origin = Node(0, 0)
    assert all(manhattan(origin, m) == 1 for m in get_motion())


def test_fresh_list_each_call():
    first = get_motion()
    first.clear()
    assert len(get_motion()) == 4
