"""Runtime configuration, read from environment variables (with defaults that run locally out of the box)."""

import os
from dataclasses import dataclass
from pathlib import Path

from src.core.shared_types import Storage

DEFAULT_SAVE_DIR = "./saves"


@dataclass(frozen=True)
class Settings:
    save_dir: Path
    storage: Storage
    database_url: str
    host: str
    port: int
    log_level: str


def load_settings() -> Settings:
    """Build the settings once at startup."""
    save_dir = Path(os.getenv("CHECKERS_SAVE_DIR", DEFAULT_SAVE_DIR))
    return Settings(
        save_dir=save_dir,
        storage=Storage(os.getenv("CHECKERS_STORAGE", Storage.JSON).lower()),
        database_url=os.getenv(
            "CHECKERS_DATABASE_URL", f"sqlite:///{save_dir / 'checkers.db'}"
        ),
        host=os.getenv("CHECKERS_HOST", "0.0.0.0"),
        port=int(os.getenv("CHECKERS_PORT", "3000")),
        log_level=os.getenv("CHECKERS_LOG_LEVEL", "INFO").upper(),
    )
