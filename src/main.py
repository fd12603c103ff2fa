"""Process entry point: wires configuration, persistence, service and API together."""

import logging

import uvicorn
from fastapi import FastAPI

from src.api.routes import create_app
from src.core.config import Settings, load_settings
from src.core.log_setup import configure_logging
from src.core.shared_types import Storage
from src.db.database import create_db_engine, create_session
from src.db.json_repository import JsonGameRepository, JsonPlayerStatsRepository
from src.db.sql_repository import SQLGameRepository, SQLPlayerStatsRepository
from src.services.checkers_service import CheckersService

logger = logging.getLogger(__name__)


def build_service(settings: Settings) -> CheckersService:
    """Repositories are built once and live for the whole process."""
    settings.save_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage == Storage.SQL:
        session = create_session(create_db_engine(settings.database_url))
        return CheckersService(
            SQLGameRepository(session), SQLPlayerStatsRepository(session)
        )
    return CheckersService(
        JsonGameRepository.in_directory(settings.save_dir),
        JsonPlayerStatsRepository.in_directory(settings.save_dir),
    )


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger.info("Using %s storage", settings.storage)
    return create_app(build_service(settings))


def main() -> None:
    settings = load_settings()
    app = build_app(settings)
    logger.info("Checkers API listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
