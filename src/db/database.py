"""Generate database sessions"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker

from src.db.schema import Base


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Engine for the configured URL, with all tables created."""
    connect_args = (
        {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    )
    engine = create_engine(database_url, echo=echo, connect_args=connect_args)

    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return engine


def create_session(engine: Engine) -> scoped_session[Session]:
    """Thread-local sessions: request handlers run in a thread pool."""
    SessionLocal = sessionmaker(bind=engine)
    return scoped_session(SessionLocal)
