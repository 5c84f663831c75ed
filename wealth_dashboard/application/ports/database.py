"""Database ports for the finance dashboard.

This module defines the application-layer protocol for accessing the
database engine backing the record store. Infrastructure implementations are
expected to provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine for record storage."""

    def get_records_engine(self) -> Engine:
        """Get the engine for the record store database.

        Returns:
            Engine: SQLAlchemy engine holding the record collections.
        """


__all__ = ["DatabaseEnginePort"]
