from morris.enums import Direction
from morris.topology import INDEX, LABELS, NODES, NUM_POSITIONS, index_of, is_adjacent

OPPOSITE = {
    Direction.ABOVE: Direction.BELOW,
    Direction.BELOW: Direction.ABOVE,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def test_positions():
    assert NUM_POSITIONS == 24
    assert len(set(LABELS)) == 24
    assert all(INDEX[label] == i for i, label in enumerate(LABELS))


def test_index_of():
    assert index_of("a7") == 0
    assert index_of("g1") == 23
    assert index_of("a8") is None
    assert index_of("") is None
    assert index_of("A7") is None
    assert index_of(None) is None
    assert index_of(3) is None


def test_neighbours_are_symmetric():
    for idx, node in enumerate(NODES):
        for direction in Direction:
            neighbour = node.neighbour(direction)
            if neighbour is not None:
                assert NODES[neighbour].neighbour(OPPOSITE[direction]) == idx, (
                    LABELS[idx], direction, LABELS[neighbour]
                )


def test_node_neighbours():
    d7 = NODES[INDEX["d7"]]
    assert d7.above is None
    assert d7.left == INDEX["a7"]
    assert d7.right == INDEX["g7"]
    assert d7.below == INDEX["d6"]
    assert d7.adjacent() == (INDEX["a7"], INDEX["g7"], INDEX["d6"])

    b4 = NODES[INDEX["b4"]]
    assert b4.neighbour(Direction.ABOVE) == INDEX["b6"]
    assert b4.neighbour(Direction.LEFT) == INDEX["a4"]
    assert b4.neighbour(Direction.RIGHT) == INDEX["c4"]
    assert b4.neighbour(Direction.BELOW) == INDEX["b2"]

    g1 = NODES[INDEX["g1"]]
    assert g1.adjacent() == (INDEX["g4"], INDEX["d1"])


def test_degrees():
    degrees = sorted(len(node.adjacent()) for node in NODES)
    # 12 corners, 8 T-junctions on the outer and inner square, 4 crossings
    assert degrees == [2] * 12 + [3] * 8 + [4] * 4
    assert sum(degrees) == 2 * 32


def test_spokes_do_not_cross_the_centre():
    assert not is_adjacent(INDEX["d5"], INDEX["d3"])
    assert not is_adjacent(INDEX["c4"], INDEX["e4"])
    assert is_adjacent(INDEX["d6"], INDEX["d5"])
    assert is_adjacent(INDEX["e4"], INDEX["f4"])


def test_sixteen_lines_of_three():
    # every line of three is walked once from each end
    walks = 0
    for node in NODES:
        for direction in Direction:
            first = node.neighbour(direction)
            if first is not None and NODES[first].neighbour(direction) is not None:
                walks += 1
    assert walks == 2 * 16
