"""Tests for the composition root."""

from unittest.mock import MagicMock

from wealth_dashboard.application.use_cases.watch_financial_metrics import (
    FinancialMetricsMonitor,
)
from wealth_dashboard.infrastructure import container
from wealth_dashboard.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from wealth_dashboard.infrastructure.record_store import (
    InMemoryRecordStore,
    SqlAlchemyRecordStore,
)
from wealth_dashboard.infrastructure.settings import DashboardSettings


def test_build_database_adapter_uses_settings_url():
    adapter = container.build_database_adapter(
        DashboardSettings(database_url="sqlite:///x.db")
    )

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)
    assert adapter._db_url == "sqlite:///x.db"


def test_build_record_store_selects_backend():
    memory = container.build_record_store(
        settings=DashboardSettings(backend="memory")
    )
    db_port = MagicMock()
    sql = container.build_record_store(
        db_port=db_port,
        settings=DashboardSettings(backend="sqlalchemy"),
    )

    assert isinstance(memory, InMemoryRecordStore)
    assert isinstance(sql, SqlAlchemyRecordStore)
    assert sql._db_port is db_port


def test_build_record_store_reads_environment(monkeypatch):
    monkeypatch.setenv("RECORD_STORE_BACKEND", "memory")

    assert isinstance(container.build_record_store(), InMemoryRecordStore)


def test_build_metrics_monitor_is_inactive():
    store = InMemoryRecordStore(logger=MagicMock())

    monitor = container.build_metrics_monitor(store)

    assert isinstance(monitor, FinancialMetricsMonitor)
    assert monitor.active is False
