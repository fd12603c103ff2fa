"""Implementation of the repositories using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameModel, PlayerStatsModel
from src.db.schema import DBGame, DBPlayerStats


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: str) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game_id: str, game: GameModel) -> GameModel:
        """Store new game under the given ID and return the stored data."""
        if self._fetch_game(game_id):
            raise RepositoryError(f"Game with {game_id=} already exists.")
        game_db = DBGame(
            id=game_id,
            board=game.board,
            players=game.players,
            turn=game.turn,
            in_progress=game.in_progress,
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def update_game(self, game_id: str, game: GameModel) -> GameModel | None:
        """Overwrite an existing record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_db.board = game.board
        game_db.players = game.players
        game_db.turn = game.turn
        game_db.in_progress = game.in_progress
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def list_games(self) -> dict[str, GameModel]:
        games_db = self.db.scalars(select(DBGame).order_by(DBGame.created_at))
        return {game_db.id: self._to_model(game_db) for game_db in games_db}

    def _fetch_game(self, game_id: str) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            board=[list(row) for row in game_db.board],
            players=dict(game_db.players),
            turn=game_db.turn,
            in_progress=game_db.in_progress,
        )


class SQLPlayerStatsRepository:
    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_stats(self, player_id: str) -> PlayerStatsModel | None:
        stats_db = self.db.get(DBPlayerStats, player_id)
        if stats_db:
            return PlayerStatsModel(wins=stats_db.wins, losses=stats_db.losses)
        return None

    def save_stats(self, player_id: str, stats: PlayerStatsModel) -> PlayerStatsModel:
        """Create or overwrite the record of a player."""
        stats_db = self.db.get(DBPlayerStats, player_id)
        if stats_db is None:
            stats_db = DBPlayerStats(player_id=player_id)
            self.db.add(stats_db)
        stats_db.wins = stats.wins
        stats_db.losses = stats.losses
        self.db.commit()
        return PlayerStatsModel(wins=stats_db.wins, losses=stats_db.losses)
