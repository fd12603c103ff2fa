"""Protocol repositories (implemented with JSON documents and with SQLAlchemy)"""

from typing import Protocol

from src.core.models import GameModel, PlayerStatsModel


class GameRepository(Protocol):
    """Persistence layer orchestration for games"""

    def get_game(self, game_id: str) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game_id: str, game: GameModel) -> GameModel:
        """Store new game under the given ID and return the stored data."""
        ...

    def update_game(self, game_id: str, game: GameModel) -> GameModel | None:
        """Overwrite an existing record."""
        ...

    def list_games(self) -> dict[str, GameModel]:
        """All recorded games by ID."""
        ...


class PlayerStatsRepository(Protocol):
    """Persistence layer orchestration for the win/loss tallies"""

    def get_stats(self, player_id: str) -> PlayerStatsModel | None:
        """Get stats of a player, if record exists. Must not create a record."""
        ...

    def save_stats(self, player_id: str, stats: PlayerStatsModel) -> PlayerStatsModel:
        """Create or overwrite the record of a player."""
        ...
