"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating the business logic required to play a turn of checkers -->
passes this information to the service layer, which can then pass it onwards to the API layer.

NOTE: there is no end-of-game detection. Once created, a game stays in progress and only the turn alternates.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Self

from src.checkers.board import Board
from src.checkers.moves import Move, is_legal, parse_move
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    InvalidMoveFormatError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Color


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def build_game_id(player_blanc: str, player_noir: str, created_at: datetime) -> str:
    """Game key: both player names and the creation time in milliseconds, ex. 'alice-bob-1700000000000'"""
    created_ms = (created_at - EPOCH) // timedelta(milliseconds=1)
    return f"{player_blanc}-{player_noir}-{created_ms}"


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[Color, str]
    turn: Color
    in_progress: bool

    @classmethod
    def new_game(cls, player_blanc: str, player_noir: str) -> Self:
        """White ('blanc') always opens the game."""
        return cls(
            board=Board.starting_position(),
            players={Color.BLANC: player_blanc, Color.NOIR: player_noir},
            turn=Color.BLANC,
            in_progress=True,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.turn not in {color.value for color in Color}:
            raise GameStateError(
                f"Invalid turn color: {model.turn!r}. \nPick one from {','.join(Color)}"
            )
        missing_colors = [color for color in Color if color not in model.players]
        if missing_colors:
            raise GameStateError(
                f"No player registered for {','.join(missing_colors)}."
            )
        try:
            board = Board.from_rows(model.board)
        except (KeyError, ValueError) as e:
            raise GameStateError(f"Stored board cannot be read: {e}") from e

        return cls(
            board=board,
            players={color: model.players[color] for color in Color},
            turn=Color(model.turn),
            in_progress=model.in_progress,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_rows(),
            players={str(color): name for color, name in self.players.items()},
            turn=str(self.turn),
            in_progress=self.in_progress,
        )

    def make_move(self, move_text: str, player: str) -> Move:
        """
        Attempt to make a move
        -----

        1. the game must be in progress
        2. it must be the player's turn (checked before looking at the board at all)
        3. the text must read as a move
        4. the move must be legal
        5. update the board and pass the turn
        """
        # make sure the game is (still) in progress
        if not self.in_progress:
            raise GameStateError("Game is not in progress.")

        # make sure it is your turn
        self._assert_your_turn(player)

        move = parse_move(move_text)
        if move is None:
            raise InvalidMoveFormatError(
                f"Cannot read {move_text!r} as a move. Expected two squares like 'e3 d4'."
            )

        if not is_legal(self.board, move, self.turn):
            raise IllegalMoveError(f"Move not allowed: {move.to_text()}")

        self.apply(move)
        return move

    def apply(self, move: Move) -> None:
        """Move the piece and pass the turn. Legality must have been checked already."""
        self.board.move_piece(move.from_square, move.to_square)
        self.turn = self.turn.opponent()

    def render(self) -> str:
        return self.board.render()

    @property
    def player_to_move(self) -> str:
        return self.players[self.turn]

    # -- PRIVATE HELPERS ---
    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before making a move."""
        if player != self.player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {self.player_to_move} to make a move first."
            )
