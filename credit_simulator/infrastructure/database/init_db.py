"""Create the simulations table (and the SQLite data directory if needed)

Usage:
    python -m credit_simulator.infrastructure.database.init_db
"""

import logging
import sys
from pathlib import Path
from typing import Union

from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.exc import SQLAlchemyError

from credit_simulator.config import settings
from credit_simulator.infrastructure.database.models import Base
from credit_simulator.infrastructure.database.session import engine as default_engine
from credit_simulator.infrastructure.observability.logging import setup_logging

logger = logging.getLogger(__name__)


def ensure_sqlite_directory(database_url: Union[str, URL]) -> None:
    """File-backed SQLite cannot create missing parent directories itself"""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return
    if url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def init_db(engine: Engine = default_engine) -> None:
    """Create all tables that do not exist yet"""
    ensure_sqlite_directory(engine.url)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created or already exist", extra={"database": engine.url.database})


if __name__ == "__main__":
    setup_logging(settings.log_level)
    try:
        init_db()
    except SQLAlchemyError:
        logger.exception("Database setup failed")
        sys.exit(1)
