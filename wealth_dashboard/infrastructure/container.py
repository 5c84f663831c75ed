"""Composition root for wiring infrastructure adapters."""

from wealth_dashboard.application.ports.database import DatabaseEnginePort
from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.application.use_cases.watch_financial_metrics import (
    FinancialMetricsMonitor,
)
from wealth_dashboard.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from wealth_dashboard.infrastructure.logging.logger import get_app_logger
from wealth_dashboard.infrastructure.record_store import (
    InMemoryRecordStore,
    SqlAlchemyRecordStore,
)
from wealth_dashboard.infrastructure.settings import DashboardSettings


def build_database_adapter(
    settings: DashboardSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or DashboardSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url)


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> RecordStorePort:
    """Return the configured record store."""
    resolved = settings or DashboardSettings.from_env()
    if resolved.backend == "memory":
        return InMemoryRecordStore(logger=get_app_logger())
    resolved_db = db_port or build_database_adapter(resolved)
    return SqlAlchemyRecordStore(resolved_db, logger=get_app_logger())


def build_metrics_monitor(
    record_store: RecordStorePort | None = None,
) -> FinancialMetricsMonitor:
    """Return an inactive metrics monitor bound to the record store."""
    resolved_store = record_store or build_record_store()
    return FinancialMetricsMonitor(resolved_store, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_metrics_monitor",
]
