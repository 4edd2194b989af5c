"""
Database module for SQLAlchemy configuration.
Provides the engine factory and the shared table metadata.
"""

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from twodo.config import get_settings
from twodo.core.exceptions import StoreUnavailableError

metadata = MetaData()


def make_engine(database_url: str | None = None, echo: bool = False) -> Engine:
    """Create an engine for the configured database URL."""
    url = database_url or get_settings().DATABASE_URL

    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    try:
        return create_engine(url, echo=echo, connect_args=connect_args)
    except SQLAlchemyError as exc:
        raise StoreUnavailableError("Invalid database URL", details={"error": str(exc)}) from exc
