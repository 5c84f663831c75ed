"""Database infrastructure for the finance dashboard.

This module exposes helpers to create and reuse SQLAlchemy engines connected
to the record store database. It belongs to the infrastructure layer because
it deals with external systems (SQLite or PostgreSQL).
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from wealth_dashboard.application.ports.database import DatabaseEnginePort
from wealth_dashboard.infrastructure.settings import DashboardSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and
            credentials).

    Returns:
        Engine: A SQLAlchemy engine with connection health checks enabled.
    """
    return create_engine(db_url, pool_pre_ping=True, future=True)


_engines: dict[str, Engine] = {}


def get_records_engine(db_url: str | None = None) -> Engine:
    """Get a per-URL singleton engine for the record store database.

    Args:
        db_url: Optional URL; defaults to the configured ``FINANCE_DB_URL``.

    Returns:
        Engine: Lazily initialized engine connected to the record store.
    """
    resolved = db_url or DashboardSettings.from_env().database_url
    if resolved not in _engines:
        _engines[resolved] = _create_engine(resolved)
    return _engines[resolved]


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application code depends only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_records_engine(self) -> Engine:
        """Get the engine for the record store database.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """
        return get_records_engine(self._db_url)


__all__ = ["get_records_engine", "SqlAlchemyDatabaseEngineAdapter"]
