"""Tests for the ImportRecordsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from wealth_dashboard.application.use_cases.import_records import (
    ImportRecordsUseCase,
)
from wealth_dashboard.infrastructure.record_store import InMemoryRecordStore


def test_execute_saves_valid_records_and_counts_rejections(
    income_payload,
    bill_payload,
):
    store = InMemoryRecordStore(logger=MagicMock())
    logger = MagicMock()

    result = ImportRecordsUseCase(store, logger=logger).execute(
        {
            "income": [income_payload, {"id": "bad"}],
            "bills": [bill_payload],
            "documents": [{"id": "doc"}],
            "loans": {"not": "a list"},
        }
    )

    assert result.imported == {"income": 1, "bills": 1}
    assert result.rejected == {"income": 1, "bills": 0}
    assert result.ignored_keys == ["documents", "loans"]
    assert result.imported_count == 2
    assert store.load("income")[0]["amount"] == Decimal("5000")
    assert store.load("documents") == []


def test_execute_normalizes_legacy_labels(investment_payload):
    store = InMemoryRecordStore(logger=MagicMock())

    ImportRecordsUseCase(store, logger=MagicMock()).execute(
        {"investments": [dict(investment_payload, type="acoes")]}
    )

    assert store.load("investments")[0]["type"] == "equities"


def test_execute_replaces_existing_collection(income_payload):
    store = InMemoryRecordStore(logger=MagicMock())
    store.save("income", [dict(income_payload, id="old")])

    ImportRecordsUseCase(store, logger=MagicMock()).execute(
        {"income": [income_payload]}
    )

    assert [item["id"] for item in store.load("income")] == ["inc-1"]
