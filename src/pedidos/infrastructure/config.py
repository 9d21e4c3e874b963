"""Runtime configuration, read from environment variables.

    PEDIDOS_DATABASE_URL   SQLAlchemy URL (default: SQLite file under ./data)
    PEDIDOS_LOG_LEVEL      logging level name (default: INFO)
    PEDIDOS_SQL_ECHO       "1"/"true" to log every SQL statement
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str = "INFO"
    sql_echo: bool = False


def load_settings() -> Settings:
    return Settings(
        database_url=os.environ.get(
            "PEDIDOS_DATABASE_URL", f"sqlite:///{_DATA_DIR / 'pedidos.db'}"
        ),
        log_level=os.environ.get("PEDIDOS_LOG_LEVEL", "INFO").upper(),
        sql_echo=os.environ.get("PEDIDOS_SQL_ECHO", "").lower() in ("1", "true", "yes"),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
