"""
Implementation of the repositories using JSON documents on disk.

Each document is a mapping of ID -> full record. It is loaded once at startup and rewritten as a whole on every change.
"""

import logging
import threading
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from src.core.exceptions import RepositoryError
from src.core.models import GameModel, PlayerStatsModel

logger = logging.getLogger(__name__)

GAMES_FILENAME = "games.json"
PLAYERS_FILENAME = "players.json"

RecordT = TypeVar("RecordT")


class JsonDocument(Generic[RecordT]):
    """Load/save-all capability for one JSON file holding {id: record}"""

    def __init__(self, path: Path, record_type: type[RecordT]) -> None:
        self.path = path
        self._adapter = TypeAdapter(dict[str, record_type])

    def load(self) -> dict[str, RecordT]:
        """A missing file is an empty document."""
        if not self.path.exists():
            return {}
        try:
            return self._adapter.validate_json(self.path.read_bytes())
        except ValidationError as e:
            raise RepositoryError(f"Cannot read {self.path}: {e}") from e

    def save_all(self, records: dict[str, RecordT]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(self._adapter.dump_json(records, indent=2))
        except OSError as e:
            raise RepositoryError(f"Cannot write {self.path}: {e}") from e
        logger.debug("Saved %d records to %s", len(records), self.path)


class JsonGameRepository:
    """Games kept in memory and flushed to games.json on every write"""

    def __init__(self, document: JsonDocument[GameModel]) -> None:
        self.document = document
        self._games = document.load()
        self._lock = threading.Lock()
        logger.info("Loaded %d games from %s", len(self._games), document.path)

    @classmethod
    def in_directory(cls, save_dir: Path) -> "JsonGameRepository":
        return cls(JsonDocument(save_dir / GAMES_FILENAME, GameModel))

    def get_game(self, game_id: str) -> GameModel | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def create_game(self, game_id: str, game: GameModel) -> GameModel:
        """Store new game under the given ID and return the stored data."""
        with self._lock:
            if game_id in self._games:
                raise RepositoryError(f"Game with {game_id=} already exists.")
            records = {**self._games, game_id: game}
            self.document.save_all(records)
            self._games = records
        return game

    def update_game(self, game_id: str, game: GameModel) -> GameModel | None:
        """Overwrite an existing record."""
        with self._lock:
            if game_id not in self._games:
                return None
            records = {**self._games, game_id: game}
            self.document.save_all(records)
            self._games = records
        return game

    def list_games(self) -> dict[str, GameModel]:
        with self._lock:
            return dict(self._games)


class JsonPlayerStatsRepository:
    """Player stats kept in memory and flushed to players.json on every write"""

    def __init__(self, document: JsonDocument[PlayerStatsModel]) -> None:
        self.document = document
        self._stats = document.load()
        self._lock = threading.Lock()

    @classmethod
    def in_directory(cls, save_dir: Path) -> "JsonPlayerStatsRepository":
        return cls(JsonDocument(save_dir / PLAYERS_FILENAME, PlayerStatsModel))

    def get_stats(self, player_id: str) -> PlayerStatsModel | None:
        return self._stats.get(player_id)

    def save_stats(self, player_id: str, stats: PlayerStatsModel) -> PlayerStatsModel:
        with self._lock:
            records = {**self._stats, player_id: stats}
            self.document.save_all(records)
            self._stats = records
        return stats
