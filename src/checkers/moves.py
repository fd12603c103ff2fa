"""
Reading moves and checking them against the movement rules.

Only the simple step is implemented: a man moves one square diagonally forward onto an empty square.
Captures, jumps and king moves are not part of the rules (yet), so they are always rejected.
"""

import re
from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.checkers.pieces import MAN_OF_COLOR, Token
from src.checkers.square import Square
from src.core.shared_types import Color

# two squares separated by exactly one whitespace character, ex. "e3 d4"
MOVE_PATTERN = re.compile(r"([a-h][1-8])\s([a-h][1-8])", re.IGNORECASE)

# Row direction a man moves in: white starts at the bottom (row 7) and walks towards row 0
FORWARD: dict[Color, int] = {
    Color.BLANC: -1,
    Color.NOIR: 1,
}


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Token: ...
    def is_empty(self, square: Square) -> bool: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_algebraic(cls, from_sq: str, to_sq: str) -> Self:
        return cls(Square.from_algebraic(from_sq), Square.from_algebraic(to_sq))

    def to_text(self) -> str:
        return f"{self.from_square.to_algebraic()} {self.to_square.to_algebraic()}"


def parse_move(text: str) -> Optional[Move]:
    """
    Read a move like "e3 d4" (case-insensitive).

    Returns None if the text does not have exactly that shape: no loose parsing of extra spaces, other separators, etc.
    """
    match = MOVE_PATTERN.fullmatch(text)
    if match is None:
        return None
    from_sq, to_sq = match.groups()
    return Move.from_algebraic(from_sq, to_sq)


def is_legal(board: Board, move: Move, color: Color) -> bool:
    """
    Decide if the player with the `color` pieces may make this move. Does not touch the board.
    ----

    1. both squares on the board
    2. destination is empty (no captures)
    3. the piece is a man of the color to move
    4. it advances exactly one row and steps exactly one column sideways
    """
    from_sq, to_sq = move.from_square, move.to_square
    if not (from_sq.is_within_bounds() and to_sq.is_within_bounds()):
        return False

    if not board.is_empty(to_sq):
        return False

    if board.piece(from_sq) != MAN_OF_COLOR[color]:
        return False

    return is_forward_step(move, color)


def is_forward_step(move: Move, color: Color) -> bool:
    """One diagonal step in the direction the men of `color` walk"""
    row_step = move.to_square.row - move.from_square.row
    col_step = move.to_square.col - move.from_square.col
    return row_step == FORWARD[color] and abs(col_step) == 1
