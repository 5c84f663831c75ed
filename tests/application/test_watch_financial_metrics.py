"""Tests for the FinancialMetricsMonitor."""

from datetime import date
from decimal import Decimal
import json
from unittest.mock import MagicMock

import pytest

from wealth_dashboard.application.use_cases.manage_records import (
    ManageRecordsUseCase,
)
from wealth_dashboard.application.use_cases.watch_financial_metrics import (
    FinancialMetricsMonitor,
)
from wealth_dashboard.infrastructure.record_store import InMemoryRecordStore

TODAY = date(2024, 5, 15)


def _monitor(store, **kwargs) -> FinancialMetricsMonitor:
    return FinancialMetricsMonitor(
        store,
        logger=MagicMock(),
        clock=lambda: TODAY,
        **kwargs,
    )


def test_snapshot_requires_activation():
    monitor = _monitor(InMemoryRecordStore(logger=MagicMock()))

    with pytest.raises(RuntimeError):
        _ = monitor.snapshot


def test_activate_computes_initial_snapshot(end_to_end_payloads):
    store = InMemoryRecordStore(logger=MagicMock())
    for key, records in end_to_end_payloads.items():
        store.save(key, records)

    monitor = _monitor(store)
    metrics = monitor.activate()

    assert monitor.active is True
    assert metrics.net_worth == Decimal("8500")
    assert monitor.activate() is metrics


def test_any_write_triggers_a_recompute(income_payload, bill_payload):
    store = InMemoryRecordStore(logger=MagicMock())
    updates = []
    monitor = _monitor(store, on_update=updates.append)
    monitor.activate()

    ManageRecordsUseCase(store, "income", logger=MagicMock()).add(
        income_payload
    )
    assert monitor.snapshot.total_monthly_income == Decimal("5000")

    ManageRecordsUseCase(store, "bills", logger=MagicMock()).add(bill_payload)
    assert monitor.snapshot.total_bills == Decimal("300")
    assert monitor.snapshot.net_monthly_income == Decimal("4700")
    assert len(updates) == 3


def test_write_to_unrelated_key_reloads_everything(income_payload):
    store = InMemoryRecordStore(logger=MagicMock())
    monitor = _monitor(store)
    monitor.activate()

    # Another writer changed income without a notification of its own.
    store._payloads["income"] = json.dumps([income_payload])
    assert monitor.snapshot.total_monthly_income == Decimal("0")

    store.save("documents", [{"id": "doc-1"}])

    assert monitor.snapshot.total_monthly_income == Decimal("5000")


def test_deactivate_stops_recomputing(income_payload):
    store = InMemoryRecordStore(logger=MagicMock())
    monitor = _monitor(store)
    monitor.activate()
    monitor.deactivate()

    store.save("income", [income_payload])

    assert monitor.active is False
    assert monitor.snapshot.total_monthly_income == Decimal("0")
    monitor.deactivate()


def test_context_manager_activates_and_deactivates(income_payload):
    store = InMemoryRecordStore(logger=MagicMock())

    with _monitor(store) as monitor:
        store.put_raw("income", json.dumps([income_payload]))
        assert monitor.snapshot.total_monthly_income == Decimal("5000")

    assert monitor.active is False
    store.save("income", [])
    assert monitor.snapshot.total_monthly_income == Decimal("5000")


def test_snapshot_recomputes_when_the_month_rolls_over():
    store = InMemoryRecordStore(logger=MagicMock())
    store.save(
        "transactions",
        [
            {
                "id": "tx-1",
                "type": "expense",
                "amount": 50,
                "category": "Food",
                "date": "2024-05-10",
                "isRecurring": False,
            }
        ],
    )
    current = {"today": date(2024, 5, 31)}
    updates = []
    monitor = FinancialMetricsMonitor(
        store,
        logger=MagicMock(),
        clock=lambda: current["today"],
        on_update=updates.append,
    )
    monitor.activate()
    assert monitor.snapshot.total_monthly_expenses == Decimal("50")
    assert monitor.snapshot.net_monthly_income == Decimal("-50")

    current["today"] = date(2024, 6, 1)

    assert monitor.snapshot.total_monthly_expenses == Decimal("0")
    assert monitor.snapshot.net_monthly_income == Decimal("0")
    assert len(updates) == 2


def test_same_month_reads_reuse_the_snapshot(income_payload):
    store = InMemoryRecordStore(logger=MagicMock())
    current = {"today": date(2024, 5, 1)}
    monitor = FinancialMetricsMonitor(
        store,
        logger=MagicMock(),
        clock=lambda: current["today"],
    )
    first = monitor.activate()

    current["today"] = date(2024, 5, 31)

    assert monitor.snapshot is first
