from __future__ import annotations

from pydantic import Field

from orderflow.settings.base import OrderflowBaseSettings


class DatabaseSettings(OrderflowBaseSettings):
    """
    Database settings for the SQLAlchemy repository.

    The default URL is an in-memory SQLite database standing in for
    PostgreSQL; nothing is written to disk.
    """

    url: str = Field("sqlite+pysqlite:///:memory:", alias="ORDERFLOW_DATABASE_URL")
    echo: bool = Field(False, alias="ORDERFLOW_DATABASE_ECHO")
