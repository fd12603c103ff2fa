"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import threading
from datetime import datetime, timedelta, timezone

from src.api.models import (
    CreateGameRequest,
    CreateGameResponse,
    GameResponse,
    GameSummary,
    MessageResponse,
    MoveRequest,
    MoveResponse,
    PlayerStatsResponse,
)
from src.checkers.game import Game, build_game_id
from src.core.exceptions import GameNotFoundError, RepositoryError
from src.core.models import GameModel, PlayerStatsModel
from src.db.repository import GameRepository, PlayerStatsRepository

logger = logging.getLogger(__name__)

GAME_CREATED_MESSAGE = "Nouvelle partie créée et sauvegardée !"
MOVE_PLAYED_MESSAGE = "Coup joué et sauvegardé !"
STATS_RESET_MESSAGE = "Stats réinitialisées."


class GameLocks:
    """One lock per game ID, so a read-validate-write cycle on a game never interleaves with another one."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def __call__(self, game_id: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks.setdefault(game_id, threading.Lock())


class CheckersService:
    """Orchestration of layers for checkers games."""

    def __init__(
        self,
        repository: GameRepository,
        stats_repository: PlayerStatsRepository,
    ) -> None:
        self.repo = repository
        self.stats_repo = stats_repository
        self._game_lock = GameLocks()
        self._create_lock = threading.Lock()

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> CreateGameResponse:
        """Two players start a game. First player plays white.

        The key is the creation millisecond. If that key is taken (same players, same millisecond), the next free millisecond is used.
        """
        new_game = Game.new_game(
            player_blanc=request.player1, player_noir=request.player2
        )
        with self._create_lock:
            created_at = datetime.now(timezone.utc)
            game_id = build_game_id(request.player1, request.player2, created_at)
            while self.repo.get_game(game_id) is not None:
                created_at += timedelta(milliseconds=1)
                game_id = build_game_id(request.player1, request.player2, created_at)
            self.repo.create_game(game_id, new_game.to_model())
        logger.info("Created game %s", game_id)
        return CreateGameResponse(game_id=game_id, message=GAME_CREATED_MESSAGE)

    def make_move(self, game_id: str, request: MoveRequest) -> MoveResponse:
        """Make a move attempt."""
        with self._game_lock(game_id):
            # Retrieve persisted GameModel from repository
            stored_model = self._fetch_game(game_id)
            if not stored_model.in_progress:
                raise GameNotFoundError(
                    f"Game with {game_id=} is no longer in progress."
                )

            # Create a new Game instance from the retrieved GameModel
            game = Game.from_model(stored_model)

            # Attempt the move (raises if it is not allowed)
            move = game.make_move(request.move, request.player)

            # store in repository
            if self.repo.update_game(game_id, game.to_model()) is None:
                raise RepositoryError(f"Game with {game_id=} could not be updated.")

        logger.debug("Game %s: %s played %s", game_id, request.player, move.to_text())
        return MoveResponse(message=MOVE_PLAYED_MESSAGE, board=game.render())

    def get_game_state(self, game_id: str) -> GameResponse:
        """Retrieve current game state (also for games that are no longer in progress)."""
        game = Game.from_model(self._fetch_game(game_id))
        return GameResponse(
            board=game.render(),
            turn=str(game.turn),
            players={str(color): name for color, name in game.players.items()},
        )

    def list_active_games(self) -> list[GameSummary]:
        """Show all games still in progress."""
        return [
            GameSummary(id=game_id, players=model.players, turn=model.turn)
            for game_id, model in self.repo.list_games().items()
            if model.in_progress
        ]

    def get_player_stats(self, player_id: str) -> PlayerStatsResponse:
        """Unknown players have a clean record. Nothing gets stored for them."""
        stats = self.stats_repo.get_stats(player_id) or PlayerStatsModel()
        return PlayerStatsResponse(wins=stats.wins, losses=stats.losses)

    def reset_player_stats(self, player_id: str) -> MessageResponse:
        self.stats_repo.save_stats(player_id, PlayerStatsModel(wins=0, losses=0))
        logger.info("Reset stats of player %s", player_id)
        return MessageResponse(message=STATS_RESET_MESSAGE)

    # -- Internal helpers --
    def _fetch_game(self, game_id: str) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model
