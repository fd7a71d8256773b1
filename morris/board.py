# File: morris/board.py
import logging

from . import mills
from .enums import Occupancy
from .errors import (
    MovingError,
    MovingErrorCode,
    PlacingError,
    PlacingErrorCode,
    RemovingError,
    RemovingErrorCode,
)
from .topology import LABELS, NODES, NUM_POSITIONS, index_of, is_adjacent

logger = logging.getLogger(__name__)

_MESSAGES = {
    PlacingErrorCode.INVALID_POSITION: "Invalid position",
    PlacingErrorCode.PLACE_AT_OCCUPIED: "Position is already occupied",
    MovingErrorCode.INVALID_MOVE_FROM: "Invalid first position",
    MovingErrorCode.MOVE_TO_SAME: "The two positions are identical",
    MovingErrorCode.INVALID_MOVE_TO: "Invalid second position",
    MovingErrorCode.MOVE_FROM_EMPTY: "The starting position has no piece to move",
    MovingErrorCode.MOVE_FROM_WRONG_COLOR: "The starting position holds the other color",
    MovingErrorCode.MOVE_TO_OCCUPIED: "The target position is already occupied",
    MovingErrorCode.NOT_ADJACENT: "The positions are not adjacent",
    RemovingErrorCode.INVALID_POSITION: "Invalid position",
    RemovingErrorCode.REMOVE_FROM_EMPTY: "Cannot remove from an empty position",
    RemovingErrorCode.REMOVE_FROM_WRONG_COLOR: "Position holds the other color",
    RemovingErrorCode.REMOVE_FROM_MILL: "Cannot remove a piece that is in a mill",
}


class Board:
    """Occupancy of the 24 positions.

    Positions are addressed by label ("a7", "d1", ...). Every mutating
    operation validates first and raises before touching any state, so a
    failed call never changes the board.
    """

    def __init__(self):
        self._states = [Occupancy.EMPTY] * NUM_POSITIONS

    # --- QUERIES ---

    def state_at(self, position):
        """Occupancy at a position, or None for an unknown label."""
        idx = index_of(position)
        if idx is None:
            return None
        return self._states[idx]

    def occupancy(self):
        return tuple(self._states)

    def positions_of(self, color):
        target = Occupancy.of(color)
        return {LABELS[i] for i, s in enumerate(self._states) if s is target}

    def in_mill(self, color, position):
        idx = index_of(position)
        if idx is None:
            return False
        return mills.in_mill(self._states, color, idx)

    def can_move(self, color, position):
        idx = index_of(position)
        if idx is None or self._states[idx] is not Occupancy.of(color):
            return False
        return any(self._states[n] is Occupancy.EMPTY for n in NODES[idx].adjacent())

    # --- RULE LOGIC (Validators) ---

    def placing_error(self, color, position):
        idx = index_of(position)
        if idx is None:
            return PlacingErrorCode.INVALID_POSITION
        if self._states[idx] is not Occupancy.EMPTY:
            return PlacingErrorCode.PLACE_AT_OCCUPIED
        return None

    def moving_error(self, color, start, end, flying):
        start_idx = index_of(start)
        if start_idx is None:
            return MovingErrorCode.INVALID_MOVE_FROM
        if start == end:
            return MovingErrorCode.MOVE_TO_SAME
        end_idx = index_of(end)
        if end_idx is None:
            return MovingErrorCode.INVALID_MOVE_TO

        start_state = self._states[start_idx]
        if start_state is Occupancy.EMPTY:
            return MovingErrorCode.MOVE_FROM_EMPTY
        if start_state is not Occupancy.of(color):
            return MovingErrorCode.MOVE_FROM_WRONG_COLOR
        if self._states[end_idx] is not Occupancy.EMPTY:
            return MovingErrorCode.MOVE_TO_OCCUPIED
        if not flying and not is_adjacent(start_idx, end_idx):
            return MovingErrorCode.NOT_ADJACENT
        return None

    def removing_error(self, color, position, check_for_mills):
        idx = index_of(position)
        if idx is None:
            return RemovingErrorCode.INVALID_POSITION
        state = self._states[idx]
        if state is Occupancy.EMPTY:
            return RemovingErrorCode.REMOVE_FROM_EMPTY
        if state is not Occupancy.of(color):
            return RemovingErrorCode.REMOVE_FROM_WRONG_COLOR
        if check_for_mills and mills.in_mill(self._states, color, idx):
            return RemovingErrorCode.REMOVE_FROM_MILL
        return None

    # --- ACTIONS (Executors) ---

    def place(self, color, position):
        code = self.placing_error(color, position)
        if code is not None:
            logger.debug("place %s at %r rejected: %s", color.value, position, code.value)
            raise PlacingError(
                _MESSAGES[code], code=code,
                context={"color": color.value, "position": position},
            )

        self._states[index_of(position)] = Occupancy.of(color)
        logger.debug("placed %s at %s", color.value, position)

    def move(self, color, start, end, flying=False):
        code = self.moving_error(color, start, end, flying)
        if code is not None:
            logger.debug(
                "move %s %r->%r rejected: %s", color.value, start, end, code.value
            )
            raise MovingError(
                _MESSAGES[code], code=code,
                context={"color": color.value, "from": start, "to": end},
            )

        self._states[index_of(start)] = Occupancy.EMPTY
        self._states[index_of(end)] = Occupancy.of(color)
        logger.debug("moved %s %s->%s%s", color.value, start, end, " (flying)" if flying else "")

    def remove(self, color, position, check_for_mills=True):
        """Remove a piece of `color`, the color being captured."""
        code = self.removing_error(color, position, check_for_mills)
        if code is not None:
            logger.debug("remove %s at %r rejected: %s", color.value, position, code.value)
            raise RemovingError(
                _MESSAGES[code], code=code,
                context={"color": color.value, "position": position},
            )

        self._states[index_of(position)] = Occupancy.EMPTY
        logger.debug("removed %s at %s", color.value, position)
