# File: morris/topology.py
#
# The fixed board: three nested squares joined by four spokes.
#
#  7 a7-----------d7-----------g7
#    |           |           |
#  6 |   b6-------d6-------f6   |
#    |   |       |       |   |
#  5 |   |   c5---d5---e5   |   |
#    |   |   |       |   |   |
#  4 a4---b4---c4       e4---f4---g4
#    |   |   |       |   |   |
#  3 |   |   c3---d3---e3   |   |
#    |   |       |       |   |
#  2 |   b2-------d2-------f2   |
#    |           |           |
#  1 a1-----------d1-----------g1
#    a   b   c   d   e   f   g
from collections import namedtuple

# index order of every per-position array in the project
LABELS = (
    "a7", "d7", "g7",
    "b6", "d6", "f6",
    "c5", "d5", "e5",
    "a4", "b4", "c4", "e4", "f4", "g4",
    "c3", "d3", "e3",
    "b2", "d2", "f2",
    "a1", "d1", "g1",
)

NUM_POSITIONS = len(LABELS)

INDEX = {label: i for i, label in enumerate(LABELS)}

# --- NEIGHBOURS: above, left, right, below ---
_ADJACENCY = {
    "a7": (None, None, "d7", "a4"),
    "d7": (None, "a7", "g7", "d6"),
    "g7": (None, "d7", None, "g4"),
    "b6": (None, None, "d6", "b4"),
    "d6": ("d7", "b6", "f6", "d5"),
    "f6": (None, "d6", None, "f4"),
    "c5": (None, None, "d5", "c4"),
    "d5": ("d6", "c5", "e5", None),
    "e5": (None, "d5", None, "e4"),
    "a4": ("a7", None, "b4", "a1"),
    "b4": ("b6", "a4", "c4", "b2"),
    "c4": ("c5", "b4", None, "c3"),
    "e4": ("e5", None, "f4", "e3"),
    "f4": ("f6", "e4", "g4", "f2"),
    "g4": ("g7", "f4", None, "g1"),
    "c3": ("c4", None, "d3", None),
    "d3": (None, "c3", "e3", "d2"),
    "e3": ("e4", "d3", None, None),
    "b2": ("b4", None, "d2", None),
    "d2": ("d3", "b2", "f2", "d1"),
    "f2": ("f4", "d2", None, None),
    "a1": ("a4", None, "d1", None),
    "d1": ("d2", "a1", "g1", None),
    "g1": ("g4", "d1", None, None),
}


class Node(namedtuple("Node", ["above", "left", "right", "below"])):
    """Neighbour indices of one position; a missing neighbour is None."""

    __slots__ = ()

    def neighbour(self, direction):
        return self[direction.value]

    def adjacent(self):
        return tuple(n for n in self if n is not None)


NODES = tuple(
    Node(*(None if n is None else INDEX[n] for n in _ADJACENCY[label]))
    for label in LABELS
)


def index_of(position):
    """Index of a position label, or None when it is not on the board."""
    if not isinstance(position, str):
        return None
    return INDEX.get(position)


def is_adjacent(a, b):
    return b in NODES[a].adjacent()
