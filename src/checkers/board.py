"""The checkers board: an 8x8 grid of tokens, plus how to display and store it."""

from dataclasses import dataclass
from string import ascii_lowercase
from typing import Self

from src.checkers.pieces import Token
from src.checkers.square import BOARD_DIMENSIONS, Square

# Men fill the dark squares of the three rows closest to each player
BLACK_STARTING_ROWS = range(0, 3)
WHITE_STARTING_ROWS = range(5, 8)


def is_dark_square(square: Square) -> bool:
    return (square.row + square.col) % 2 == 1


@dataclass
class Board:
    grid: list[list[Token]]

    @classmethod
    def starting_position(cls) -> Self:
        """Fresh board: 12 black men on rows 0-2, 12 white men on rows 5-7, always on dark squares."""
        n_rows, n_cols = BOARD_DIMENSIONS
        grid = [[Token.EMPTY] * n_cols for _ in range(n_rows)]
        for row in range(n_rows):
            for col in range(n_cols):
                if not is_dark_square(Square(row, col)):
                    continue
                if row in BLACK_STARTING_ROWS:
                    grid[row][col] = Token.BLACK_MAN
                elif row in WHITE_STARTING_ROWS:
                    grid[row][col] = Token.WHITE_MAN
        return cls(grid)

    @classmethod
    def empty(cls) -> Self:
        n_rows, n_cols = BOARD_DIMENSIONS
        return cls([[Token.EMPTY] * n_cols for _ in range(n_rows)])

    @classmethod
    def from_rows(cls, rows: list[list[str]]) -> Self:
        """Rebuild from the stored token names (ex. 'white_man'). Raises KeyError/ValueError on anything else."""
        if len(rows) != BOARD_DIMENSIONS[0] or any(
            len(row) != BOARD_DIMENSIONS[1] for row in rows
        ):
            raise ValueError(
                f"Board must have {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} squares."
            )
        return cls([[Token[name.upper()] for name in row] for row in rows])

    def to_rows(self) -> list[list[str]]:
        return [[token.name.lower() for token in row] for row in self.grid]

    def render(self) -> str:
        """
        Human readable board
        ----

        ```
          a b c d e f g h
        8 🟩 ⚫ 🟩 ⚫ 🟩 ⚫ 🟩 ⚫
        ...
        1 ⚪ 🟩 ⚪ 🟩 ⚪ 🟩 ⚪ 🟩
        ```
        """
        lines = ["  " + " ".join(ascii_lowercase[: BOARD_DIMENSIONS[1]]) + "\n"]
        for row_idx, row in enumerate(self.grid):
            rank = BOARD_DIMENSIONS[0] - row_idx
            cells = "".join(f"{token.symbol} " for token in row)
            lines.append(f"{rank} {cells}\n")
        return "".join(lines)

    def piece(self, square: Square) -> Token:
        return self.grid[square.row][square.col]

    def place_piece(self, token: Token, square: Square) -> None:
        self.grid[square.row][square.col] = token

    def remove_piece(self, square: Square) -> None:
        self.place_piece(Token.EMPTY, square)

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) == Token.EMPTY

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Update the position on the board (no rules are checked here)"""
        token_that_moved = self.piece(from_square)
        self.place_piece(token_that_moved, to_square)
        self.remove_piece(from_square)
