"""
Database configuration.

Engine creation for the SQLAlchemy repository.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
import logging

from orderflow.settings.modules.database_settings import DatabaseSettings


logger = logging.getLogger(__name__)


def is_in_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def create_engine_from_settings(settings: DatabaseSettings) -> Engine:
    """
    Create SQLAlchemy engine.

    An in-memory SQLite database only lives as long as its connection, so
    it gets a single shared connection (StaticPool).

    Args:
        settings: Database settings

    Returns:
        Configured engine
    """
    logger.info(f"Creating database engine: {settings.url}")

    if is_in_memory_sqlite(settings.url):
        return create_engine(
            settings.url,
            echo=settings.echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        settings.url,
        echo=settings.echo,
        pool_pre_ping=True,  # Test connections before using
    )
