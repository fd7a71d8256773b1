# File: morris/mills.py
#
# Mill detection from each node's local neighbourhood. A position is in a mill
# when it is the middle of three (both neighbours along one axis held) or an
# end of three (the next two nodes in one direction held). Only the two
# neighbours are inspected, never the queried node itself.
from .enums import Direction, Occupancy
from .topology import NODES

MILL_LENGTH = 3


def _held(states, idx, color):
    return idx is not None and states[idx] is Occupancy.of(color)


def middle_of_mill(states, color, idx):
    node = NODES[idx]
    # horizontal
    if _held(states, node.left, color) and _held(states, node.right, color):
        return True
    # vertical
    if _held(states, node.above, color) and _held(states, node.below, color):
        return True
    return False


def check_direction(states, color, idx, direction):
    """True if the two nodes following idx in `direction` are both held by color."""
    current = idx
    for _ in range(MILL_LENGTH - 1):
        current = NODES[current].neighbour(direction)
        if not _held(states, current, color):
            return False
    return True


def edge_of_mill(states, color, idx):
    return any(check_direction(states, color, idx, d) for d in Direction)


def in_mill(states, color, idx):
    return middle_of_mill(states, color, idx) or edge_of_mill(states, color, idx)
