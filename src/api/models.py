"""Requests and Response models"""

from pydantic import BaseModel, ConfigDict, Field

TurnColor = str
PlayerName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """player1 gets the white pieces ('blanc'), player2 the black ones ('noir')."""

    player1: PlayerName
    player2: PlayerName


class MoveRequest(BaseModel):
    move: str
    player: PlayerName


# --- RESPONSE MODELS ---
class CreateGameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_id: str = Field(alias="gameId")
    message: str


class MoveResponse(BaseModel):
    message: str
    board: str


class GameResponse(BaseModel):
    board: str
    turn: TurnColor
    players: dict[TurnColor, PlayerName]


class GameSummary(BaseModel):
    id: str
    players: dict[TurnColor, PlayerName]
    turn: TurnColor


class PlayerStatsResponse(BaseModel):
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
