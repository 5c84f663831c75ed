"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from wealth_dashboard.infrastructure.logging.logger import get_app_logger
from wealth_dashboard.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for selecting and locating the record store.

    Attributes:
        backend: Record store backend identifier (sqlalchemy or memory).
        database_url: SQLAlchemy URL of the record store database.
    """

    backend: str = "sqlalchemy"
    database_url: str = "sqlite:///data/finance.db"

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables and an optional .env.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("RECORD_STORE_BACKEND", "sqlalchemy")
        backend = backend.strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            get_app_logger().warning(
                f"Unknown RECORD_STORE_BACKEND '{backend}', "
                "falling back to sqlalchemy"
            )
            backend = "sqlalchemy"
        raw_url = os.getenv("FINANCE_DB_URL", "").strip()
        database_url = raw_url or cls._default_database_url()
        return cls(backend=backend, database_url=database_url)

    @staticmethod
    def _default_database_url() -> str:
        """Return a SQLite URL inside the project ``data/`` directory.

        Returns:
            str: SQLite URL; the directory is created when missing.
        """
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'finance.db'}"


__all__ = ["DashboardSettings", "SUPPORTED_BACKENDS"]
