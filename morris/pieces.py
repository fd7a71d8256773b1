# File: morris/pieces.py

PIECES_PER_PLAYER = 9


class Pieces:
    """Counts and positions of one player's pieces.

    Only updated after the matching Board operation succeeded, so it mirrors
    the board without validating anything itself.
    """

    def __init__(self, total=PIECES_PER_PLAYER):
        self.unplaced = total
        self.placed = 0
        self.positions = set()

    def place_piece(self, position):
        if self.unplaced > 0:
            self.unplaced -= 1
            self.placed += 1
            self.positions.add(position)

    def remove_piece(self, position):
        if self.placed > 0:
            self.placed -= 1
            self.positions.discard(position)

    def move_piece(self, start, end):
        self.positions.discard(start)
        self.positions.add(end)

    def counts(self):
        return {"unplaced": self.unplaced, "placed": self.placed}

    def __repr__(self):
        return (
            f"Pieces(unplaced={self.unplaced}, placed={self.placed}, "
            f"positions={sorted(self.positions)})"
        )
