# File: morris/render.py
from .enums import GLYPHS, Color, Phase
from .topology import LABELS

_TEMPLATE = """\
 7 {a7}-----------{d7}-----------{g7}
   |           |           |
 6 |   {b6}-------{d6}-------{f6}   |
   |   |       |       |   |
 5 |   |   {c5}---{d5}---{e5}   |   |
   |   |   |       |   |   |
 4 {a4}---{b4}---{c4}       {e4}---{f4}---{g4}
   |   |   |       |   |   |
 3 |   |   {c3}---{d3}---{e3}   |   |
   |   |       |       |   |
 2 |   {b2}-------{d2}-------{f2}   |
   |           |           |
 1 {a1}-----------{d1}-----------{g1}
   a   b   c   d   e   f   g
"""


def render_board(board):
    """Draw the board with one glyph per position (· empty, ○ white, ● black)."""
    cells = {label: GLYPHS[state] for label, state in zip(LABELS, board.occupancy())}
    return _TEMPLATE.format(**cells)


def render_pieces(color, pieces):
    return (
        f"{color.value}: {pieces.unplaced} unplaced, {pieces.placed} placed, "
        f"at {sorted(pieces.positions)}"
    )


def render_game(game):
    lines = [render_pieces(color, game.pieces[color]) for color in (Color.WHITE, Color.BLACK)]
    lines.append(render_board(game.board))
    status = f"Turn: {game.turn}   Phase: {game.phase.value}"
    if game.phase is Phase.MOVING and game.is_flying(game.turn):
        status += "   (flying)"
    lines.append(status)
    return "\n".join(lines)
