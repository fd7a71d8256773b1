"""Nine Men's Morris for two players at one terminal.

During placing, type one position (e.g. "a7"). During moving, type two
positions without a space (e.g. "a7a4"). After a mill, type the position of the
opponent piece to remove.
"""
import argparse
import logging
import sys

from morris.enums import Color, Phase
from morris.errors import (
    InvalidStateError,
    MovingError,
    MovingErrorCode,
    PlacingError,
    PlacingErrorCode,
    RemovingError,
    RemovingErrorCode,
)
from morris.game import EndReason, MorrisGame
from morris.render import render_game

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    PlacingErrorCode.INVALID_POSITION: "ERROR: Invalid position - {position}!",
    PlacingErrorCode.PLACE_AT_OCCUPIED: "ERROR: Position {position} is already occupied!",
    MovingErrorCode.INVALID_MOVE_FROM: "ERROR: Invalid first position - {start}!",
    MovingErrorCode.INVALID_MOVE_TO: "ERROR: Invalid second position - {end}!",
    MovingErrorCode.MOVE_TO_SAME: "ERROR: The two positions are identical!",
    MovingErrorCode.MOVE_FROM_EMPTY: "ERROR: The starting position {start} doesn't have a piece to move!",
    MovingErrorCode.MOVE_FROM_WRONG_COLOR: "ERROR: The starting position {start} isn't occupied by you!",
    MovingErrorCode.MOVE_TO_OCCUPIED: "ERROR: The target position {end} is already occupied!",
    MovingErrorCode.NOT_ADJACENT: "ERROR: Can't move from {start} to {end}!",
    RemovingErrorCode.INVALID_POSITION: "ERROR: Invalid position - {position}!",
    RemovingErrorCode.REMOVE_FROM_EMPTY: "ERROR: Cannot remove from empty position {position}!",
    RemovingErrorCode.REMOVE_FROM_WRONG_COLOR: "ERROR: Cannot remove your own pieces (from position {position})!",
    RemovingErrorCode.REMOVE_FROM_MILL: "ERROR: Cannot remove from opponent's mills (from position {position})!",
}

INSTRUCTIONS = """
INSTRUCTIONS:
Pieces are shown as ○ (white) and ● (black); empty positions as ·.
- Placing phase: type one position (e.g. 'a7') to place a piece there.
- Moving phase: type two positions (e.g. 'a7a4') to move a piece from the first
  to the second, which must be adjacent and empty. With only 3 pieces left you
  may move to any empty position ('fly').
After forming a mill, type the position of an opponent piece to remove it.
Invalid input prints an error and the same player is asked again.
"""


def print_header():
    print("=" * 40)
    print("        NINE MEN'S MORRIS        ")
    print("=" * 40)


def read_token(prompt=""):
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        sys.exit(0)


def split_move(token):
    """'a7a4' -> ('a7', 'a4'); None unless the token has exactly 4 symbols."""
    if len(token) != 4:
        return None
    return token[:2], token[2:]


def ask_first_player():
    while True:
        answer = read_token("Who should move first? (white or black)? ").lower()
        if answer == "white":
            return Color.WHITE
        if answer == "black":
            return Color.BLACK
        print("ERROR: Invalid input!")


def prompt_place(game):
    print(f"{game.turn} player, PLACE your piece:")
    while True:
        position = read_token()
        try:
            return game.apply_place(position), position
        except PlacingError as e:
            print(ERROR_MESSAGES[e.code].format(position=position))


def prompt_move(game):
    if game.is_flying(game.turn):
        print(f"{game.turn} player, MOVE your piece to any position ('fly'):")
    else:
        print(f"{game.turn} player, MOVE your piece to an adjacent position:")

    while True:
        positions = split_move(read_token())
        if positions is None:
            print("ERROR: Invalid input - must be 4 symbols (e.g. a7a4)!")
            continue
        start, end = positions
        try:
            return game.apply_move(start, end), end
        except MovingError as e:
            print(ERROR_MESSAGES[e.code].format(start=start, end=end))


def prompt_remove(game):
    print(f"{game.turn} player, REMOVE opponent's piece:")
    while True:
        position = read_token()
        try:
            game.apply_remove(position)
            return position
        except RemovingError as e:
            print(ERROR_MESSAGES[e.code].format(position=position))


def describe_outcome(outcome):
    if outcome.is_draw:
        return "DRAW - neither player can move their pieces!"

    winner = outcome.winner.value.upper()
    loser = outcome.winner.other().value
    if outcome.reason is EndReason.TOO_FEW_PIECES:
        return f"VICTORY for {winner} player - {loser} player has less than 3 pieces!"
    return f"VICTORY for {winner} player - {loser} player cannot move their pieces!"


def run_match(game):
    while game.is_running():
        print(render_game(game))

        if game.phase is Phase.PLACING:
            mill, _ = prompt_place(game)
        else:
            mill, _ = prompt_move(game)

        if mill and game.pending_removal:
            print(render_game(game))
            print(f"{game.turn} player FORMED A MILL!")
            prompt_remove(game)

    print(render_game(game))
    try:
        outcome = game.outcome()
    except InvalidStateError as e:
        logger.error("%s", e)
        print("ERROR: invalid end state of game!")
        return None
    print(describe_outcome(outcome))
    return outcome


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Nine Men's Morris in the terminal.")
    parser.add_argument("--first", choices=["white", "black"], help="color that moves first")
    parser.add_argument("--log-level", default="WARNING", help="logging level (e.g. DEBUG)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print_header()
    print(INSTRUCTIONS)
    first = Color(args.first) if args.first else ask_first_player()
    return run_match(MorrisGame(first=first))


if __name__ == "__main__":
    main()
