# File: morris/game.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board
from .enums import Color, Phase
from .errors import InvalidActionError, InvalidStateError
from .pieces import PIECES_PER_PLAYER, Pieces
from .topology import INDEX, LABELS, NODES

logger = logging.getLogger(__name__)

# --- RULE CONSTANTS ---
FLYING_THRESHOLD = 3
MIN_PIECES = 3


class EndReason(Enum):
    TOO_FEW_PIECES = "too_few_pieces"
    BLOCKED = "blocked"
    BOTH_BLOCKED = "both_blocked"


@dataclass(frozen=True)
class Outcome:
    """How a finished game ended. `winner` is None for a draw."""

    winner: Optional[Color]
    reason: EndReason

    @property
    def is_draw(self):
        return self.winner is None


class MorrisGame:
    """Turn and phase state machine for one match.

    A main action (placement or move) that closes a mill leaves the game with
    a pending removal for the same player; the turn passes only after the
    removal. Illegal actions raise a MorrisError and change nothing.
    """

    def __init__(self, first=Color.WHITE):
        self.first = first
        self.reset()

    def reset(self):
        self.board = Board()
        self.pieces = {
            Color.WHITE: Pieces(PIECES_PER_PLAYER),
            Color.BLACK: Pieces(PIECES_PER_PLAYER),
        }
        self.turn = self.first
        self.phase = Phase.PLACING
        self.pending_removal = False
        return self.get_state()

    def get_state(self):
        return {
            "board": self.board.occupancy(),
            "turn": self.turn,
            "phase": self.phase,
            "pending_removal": self.pending_removal,
            "counts": {color: p.counts() for color, p in self.pieces.items()},
            "positions": {color: set(p.positions) for color, p in self.pieces.items()},
        }

    # --- RULE LOGIC (Validators) ---

    def is_flying(self, color):
        return self.pieces[color].placed <= FLYING_THRESHOLD

    def removal_checks_mills(self):
        """False when every opponent piece sits in a mill, lifting mill protection."""
        opponent = self.turn.other()
        return not all(
            self.board.in_mill(opponent, p) for p in self.pieces[opponent].positions
        )

    def is_valid_place(self, position):
        if self.phase is not Phase.PLACING or self.pending_removal:
            return False
        return self.board.placing_error(self.turn, position) is None

    def is_valid_move(self, start, end):
        if self.phase is not Phase.MOVING or self.pending_removal:
            return False
        if not self.is_running():
            return False
        flying = self.is_flying(self.turn)
        return self.board.moving_error(self.turn, start, end, flying) is None

    def valid_moves(self):
        """Every legal (start, end) pair for the player to move, in board order."""
        if self.phase is not Phase.MOVING or self.pending_removal or not self.is_running():
            return []
        flying = self.is_flying(self.turn)
        moves = []
        for start in sorted(self.pieces[self.turn].positions, key=INDEX.get):
            if flying:
                targets = LABELS
            else:
                targets = [LABELS[n] for n in NODES[INDEX[start]].adjacent()]
            for end in targets:
                if self.board.moving_error(self.turn, start, end, flying) is None:
                    moves.append((start, end))
        return moves

    def is_valid_remove(self, position):
        if not self.pending_removal:
            return False
        code = self.board.removing_error(
            self.turn.other(), position, self.removal_checks_mills()
        )
        return code is None

    # --- ACTIONS (Executors) ---

    def apply_place(self, position):
        """Place a piece for the player to move. Returns True if a mill formed."""
        self._require_main_action(Phase.PLACING)

        self.board.place(self.turn, position)
        self.pieces[self.turn].place_piece(position)
        return self._after_main_action(position)

    def apply_move(self, start, end):
        """Move a piece for the player to move. Returns True if a mill formed."""
        self._require_main_action(Phase.MOVING)
        if not self.is_running():
            raise InvalidActionError("The game is over", context={"phase": self.phase.value})

        self.board.move(self.turn, start, end, self.is_flying(self.turn))
        self.pieces[self.turn].move_piece(start, end)
        return self._after_main_action(end)

    def apply_remove(self, position):
        """Capture an opponent piece after a mill."""
        if not self.pending_removal:
            raise InvalidActionError(
                "No mill was formed, nothing to remove",
                context={"turn": self.turn.value, "position": position},
            )

        opponent = self.turn.other()
        self.board.remove(opponent, position, self.removal_checks_mills())
        self.pieces[opponent].remove_piece(position)
        self.pending_removal = False
        self._switch_turn_logic()

    # --- INTERNAL HELPERS ---

    def _require_main_action(self, phase):
        if self.pending_removal:
            raise InvalidActionError(
                "A piece must be removed first", context={"turn": self.turn.value}
            )
        if self.phase is not phase:
            raise InvalidActionError(
                f"Not allowed during the {self.phase.value} phase",
                context={"phase": self.phase.value},
            )

    def _after_main_action(self, position):
        if not self.board.in_mill(self.turn, position):
            self._switch_turn_logic()
            return False

        logger.info("%s formed a mill at %s", self.turn.value, position)
        if not self.pieces[self.turn.other()].positions:
            # nothing on the board to capture
            logger.info("%s has no piece to remove", self.turn.other().value)
            self._switch_turn_logic()
        else:
            self.pending_removal = True
        return True

    def _switch_turn_logic(self):
        self.turn = self.turn.other()
        if (
            self.phase is Phase.PLACING
            and self.pieces[Color.WHITE].unplaced == 0
            and self.pieces[Color.BLACK].unplaced == 0
        ):
            self.phase = Phase.MOVING
            logger.info("all pieces placed, moving phase begins")

        if not self.is_running():
            logger.info(
                "game over: white %d placed, black %d placed",
                self.pieces[Color.WHITE].placed,
                self.pieces[Color.BLACK].placed,
            )

    # --- TERMINATION ---

    def can_move(self, color):
        # 18 pieces at most on 24 positions, so a flying player always has a target
        if self.is_flying(color):
            return True
        return any(self.board.can_move(color, p) for p in self.pieces[color].positions)

    def can_play(self, color):
        return self.pieces[color].placed >= MIN_PIECES and self.can_move(color)

    def is_running(self):
        if self.phase is Phase.PLACING or self.pending_removal:
            return True
        return self.can_play(Color.WHITE) and self.can_play(Color.BLACK)

    def outcome(self):
        """None while the game runs, otherwise the Outcome."""
        if self.is_running():
            return None

        for color in (Color.WHITE, Color.BLACK):
            if self.pieces[color].placed < MIN_PIECES:
                return Outcome(color.other(), EndReason.TOO_FEW_PIECES)

        white_moves = self.can_move(Color.WHITE)
        black_moves = self.can_move(Color.BLACK)
        if not white_moves and black_moves:
            return Outcome(Color.BLACK, EndReason.BLOCKED)
        if white_moves and not black_moves:
            return Outcome(Color.WHITE, EndReason.BLOCKED)
        if not white_moves and not black_moves:
            return Outcome(None, EndReason.BOTH_BLOCKED)

        raise InvalidStateError(
            "Invalid end state of game",
            context={
                "white": self.pieces[Color.WHITE].counts(),
                "black": self.pieces[Color.BLACK].counts(),
            },
        )
