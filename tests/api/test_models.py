"""Unit tests for src/api/models.py"""

import pytest
from pydantic import ValidationError

from src.api.models import CreateGameRequest, CreateGameResponse, MoveRequest


# -- Validation - CreateGameRequest --
def test_valid_players() -> None:
    request = CreateGameRequest(player1="don't hate the player", player2="hate the game")
    assert request.player1 == "don't hate the player"
    assert request.player2 == "hate the game"


@pytest.mark.parametrize("name", ["", "   "])
def test_any_player_name_is_accepted(name: str) -> None:
    """Names are free text, even empty ones."""
    request = CreateGameRequest(player1=name, player2="opponent")
    assert request.player1 == name


def test_missing_player() -> None:
    with pytest.raises(ValidationError):
        _ = CreateGameRequest.model_validate({"player1": "alone"})


# -- Validation - MoveRequest --
def test_move_text_is_not_parsed_here() -> None:
    """A malformed move is still a valid request: the game decides it cannot be read."""
    request = MoveRequest(move="e3-d4", player="alice")
    assert request.move == "e3-d4"


# -- Responses --
def test_game_id_serialized_as_camel_case() -> None:
    response = CreateGameResponse(game_id="a-b-1", message="ok")
    assert response.model_dump(by_alias=True) == {"gameId": "a-b-1", "message": "ok"}
