"""Shared fixtures for the morris tests."""

import pytest

from morris.board import Board
from morris.enums import Color, Phase
from morris.game import MorrisGame
from morris.pieces import Pieces


def _make_game(
    white=(),
    black=(),
    phase=Phase.MOVING,
    turn=Color.WHITE,
    white_unplaced=0,
    black_unplaced=0,
):
    """Build a game in an arbitrary position, keeping board and trackers in sync."""
    game = MorrisGame(first=turn)
    for color, positions, unplaced in (
        (Color.WHITE, white, white_unplaced),
        (Color.BLACK, black, black_unplaced),
    ):
        pieces = Pieces(total=len(positions) + unplaced)
        for position in positions:
            game.board.place(color, position)
            pieces.place_piece(position)
        game.pieces[color] = pieces
    game.phase = phase
    return game


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def game():
    return MorrisGame()


@pytest.fixture
def make_game():
    return _make_game


@pytest.fixture
def mill_board():
    """White mill on the a-file plus a1-d1-g1, black mill on the e-file."""
    board = Board()
    for position in ("a7", "a4", "a1", "d1", "g1", "g7"):
        board.place(Color.WHITE, position)
    for position in ("e3", "e4", "e5", "d3"):
        board.place(Color.BLACK, position)
    return board


# Nine pieces each, no mills, placed alternately from white.
WHITE_OPENING = ("a7", "d7", "a4", "b6", "d6", "c5", "e4", "f4", "c3")
BLACK_OPENING = ("g7", "f6", "d5", "b4", "c4", "g4", "a1", "d1", "e3")


@pytest.fixture
def placed_game():
    game = MorrisGame()
    for white, black in zip(WHITE_OPENING, BLACK_OPENING):
        assert game.apply_place(white) is False
        assert game.apply_place(black) is False
    return game
