"""HTTP routes. The only layer that knows about status codes."""

import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.models import (
    CreateGameRequest,
    CreateGameResponse,
    ErrorResponse,
    GameResponse,
    GameSummary,
    MessageResponse,
    MoveRequest,
    MoveResponse,
    PlayerStatsResponse,
)
from src.core.exceptions import (
    CheckersError,
    GameNotFoundError,
    GameStateError,
    IllegalMoveError,
    InvalidMoveFormatError,
    NotYourTurnError,
    RepositoryError,
)
from src.services.checkers_service import CheckersService

logger = logging.getLogger(__name__)

GAME_NOT_FOUND_MESSAGE = "Partie non trouvée."

# status code and user facing message for every error the lower layers raise
ERROR_RESPONSES: dict[type[CheckersError], tuple[int, str]] = {
    GameNotFoundError: (404, "Partie introuvable ou terminée."),
    NotYourTurnError: (403, "Ce n'est pas votre tour."),
    InvalidMoveFormatError: (400, "Format de coup invalide."),
    IllegalMoveError: (400, "Coup invalide."),
    GameStateError: (500, "État de la partie illisible."),
    RepositoryError: (500, "Erreur de sauvegarde."),
}

router = APIRouter()


def get_service(request: Request) -> CheckersService:
    return request.app.state.service


@router.post("/game", response_model=CreateGameResponse)
def create_game(
    body: CreateGameRequest, service: CheckersService = Depends(get_service)
) -> CreateGameResponse:
    return service.create_new_game(body)


@router.post("/game/{game_id}/move", response_model=MoveResponse)
def make_move(
    game_id: str, body: MoveRequest, service: CheckersService = Depends(get_service)
) -> MoveResponse:
    return service.make_move(game_id, body)


@router.get(
    "/game/{game_id}",
    response_model=GameResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_game(game_id: str, service: CheckersService = Depends(get_service)):
    try:
        return service.get_game_state(game_id)
    except GameNotFoundError:
        logger.info("Game %s not found", game_id)
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error=GAME_NOT_FOUND_MESSAGE).model_dump(),
        )


@router.get("/games", response_model=list[GameSummary])
def list_games(service: CheckersService = Depends(get_service)) -> list[GameSummary]:
    return service.list_active_games()


@router.get("/player/{player_id}/stats", response_model=PlayerStatsResponse)
def get_player_stats(
    player_id: str, service: CheckersService = Depends(get_service)
) -> PlayerStatsResponse:
    return service.get_player_stats(player_id)


@router.post("/player/{player_id}/reset", response_model=MessageResponse)
def reset_player_stats(
    player_id: str, service: CheckersService = Depends(get_service)
) -> MessageResponse:
    return service.reset_player_stats(player_id)


# -- Error translation --
def handle_checkers_error(request: Request, exc: Exception) -> JSONResponse:
    """Turn the typed errors of the service/domain layers into {"error": message} responses."""
    status_code, message = next(
        (
            response
            for exc_type, response in ERROR_RESPONSES.items()
            if isinstance(exc, exc_type)
        ),
        (500, "Erreur interne."),
    )
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


def create_app(service: CheckersService) -> FastAPI:
    """The service (and the repositories inside it) live as long as the app does."""
    app = FastAPI(title="Checkers API")
    app.state.service = service
    app.include_router(router)
    app.add_exception_handler(CheckersError, handle_checkers_error)
    return app
