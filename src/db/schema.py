"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[str] = mapped_column(primary_key=True)
    board: Mapped[list[list[str]]] = mapped_column(JSON)
    players: Mapped[dict[str, str]] = mapped_column(JSON)
    turn: Mapped[str]
    in_progress: Mapped[bool] = mapped_column(default=True)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class DBPlayerStats(Base):
    __tablename__ = "player_stats"
    player_id: Mapped[str] = mapped_column(primary_key=True)
    wins: Mapped[int] = mapped_column(default=0)
    losses: Mapped[int] = mapped_column(default=0)
