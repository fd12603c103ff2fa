"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
TurnColor = str
PlayerName = str
TokenName = str


@dataclass
class GameModel:
    """Transport-safe representation of a checkers game used between API, Service, DB, and Game layers."""

    board: list[list[TokenName]]
    players: dict[TurnColor, PlayerName]
    turn: TurnColor
    in_progress: bool


@dataclass
class PlayerStatsModel:
    """Win/loss tally of a single player"""

    wins: int = 0
    losses: int = 0
