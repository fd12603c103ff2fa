"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

from pathlib import Path
from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.json_repository import JsonGameRepository, JsonPlayerStatsRepository
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def json_game_repo(tmp_path: Path) -> JsonGameRepository:
    """Game repository writing into a fresh temporary save directory."""
    return JsonGameRepository.in_directory(tmp_path)


@pytest.fixture
def json_stats_repo(tmp_path: Path) -> JsonPlayerStatsRepository:
    return JsonPlayerStatsRepository.in_directory(tmp_path)
