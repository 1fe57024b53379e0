import logging
from dataclasses import dataclass

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from advisor.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class ConnectionCheck:
    url: str
    connected: bool
    error: str | None = None


def make_engine(url: str | None = None) -> Engine:
    return create_engine(url or settings.database_url, pool_pre_ping=True)


def check_connection(url: str | None = None) -> ConnectionCheck:
    """Open a connection and run ``SELECT 1``.

    The catalog lives in memory; this only reports whether the configured
    database is reachable.
    """
    target = url or settings.database_url
    engine = make_engine(target)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database connection to %s failed: %s", engine.url, exc)
        return ConnectionCheck(url=str(engine.url), connected=False, error=str(exc))
    finally:
        engine.dispose()
    return ConnectionCheck(url=str(engine.url), connected=True)
