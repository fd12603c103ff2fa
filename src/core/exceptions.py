"""
Custom exceptions shared by all layers.

The domain and service layers raise these, only the API layer turns them into HTTP responses.
"""


class CheckersError(Exception):
    """Top-level exception of this project"""


# --- DOMAIN / GAME ERRORS ---
class GameError(CheckersError):
    """Anything that goes wrong while playing a game"""


class GameStateError(GameError):
    """The game is in a state that does not allow the requested action (or its stored state is corrupt)."""


class GameNotFoundError(GameStateError):
    """No game with this ID, or the game is no longer in progress."""


class NotYourTurnError(GameError):
    """The acting player is not the one registered for the color to move."""


class InvalidMoveFormatError(GameError):
    """Move text could not be read as '<square> <square>'."""


class IllegalMoveError(GameError):
    """Well formed move that the rules do not allow."""


# --- OTHER LAYERS ---
class RepositoryError(CheckersError):
    """Persistence layer could not read or write a record."""

