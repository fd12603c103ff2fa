"""Defines the tokens that can occupy a square of the checkers board"""

from enum import Enum, auto

from src.core.shared_types import Color


class Token(Enum):
    EMPTY = auto()
    WHITE_MAN = auto()
    BLACK_MAN = auto()
    # NOTE: kings are reserved. No move promotes a man, and kings are never allowed to move.
    WHITE_KING = auto()
    BLACK_KING = auto()

    @property
    def symbol(self) -> str:
        return TOKEN_SYMBOLS[self]


TOKEN_SYMBOLS: dict[Token, str] = {
    Token.EMPTY: "🟩",
    Token.WHITE_MAN: "⚪",
    Token.BLACK_MAN: "⚫",
    Token.WHITE_KING: "🔵",
    Token.BLACK_KING: "🔴",
}

# The only token each color is allowed to move
MAN_OF_COLOR: dict[Color, Token] = {
    Color.BLANC: Token.WHITE_MAN,
    Color.NOIR: Token.BLACK_MAN,
}
