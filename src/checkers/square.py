"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

# Checkers board is 8x8 (rows, columns)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """Row 0 is the top of the board (black side, rank 8), column 0 is the a-file."""

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' maps to (0, 0) and 'h1' maps to (7, 7)"""
        col = ord(sq[0].lower()) - ord("a")
        row = BOARD_DIMENSIONS[0] - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.col]}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )
