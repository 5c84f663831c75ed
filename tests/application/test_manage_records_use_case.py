"""Tests for the ManageRecordsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from pydantic import ValidationError
import pytest

from wealth_dashboard.application.use_cases.manage_records import (
    ManageRecordsUseCase,
    RecordNotFoundError,
)
from wealth_dashboard.infrastructure.record_store import InMemoryRecordStore


def _ids():
    counter = iter(range(1, 100))
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def store():
    return InMemoryRecordStore(logger=MagicMock())


def test_unknown_key_is_rejected(store):
    with pytest.raises(ValueError):
        ManageRecordsUseCase(store, "documents", logger=MagicMock())


def test_add_assigns_id_and_persists_camel_case(store):
    manager = ManageRecordsUseCase(
        store,
        "bills",
        logger=MagicMock(),
        id_factory=_ids(),
    )

    bill = manager.add(
        {
            "name": "Internet",
            "amount": "89.90",
            "due_day": 5,
            "nextDue": "2024-06-05",
            "id": "ignored",
        }
    )

    assert bill.id == "id-1"
    assert bill.amount == Decimal("89.90")
    stored = store.load("bills")
    assert stored == [
        {
            "id": "id-1",
            "name": "Internet",
            "company": "",
            "amount": Decimal("89.90"),
            "dueDay": 5,
            "category": "",
            "isRecurring": True,
            "isActive": True,
            "nextDue": "2024-06-05",
        }
    ]


def test_add_rejects_invalid_records_without_writing(store):
    listener = MagicMock()
    store.subscribe(listener)
    manager = ManageRecordsUseCase(store, "income", logger=MagicMock())

    with pytest.raises(ValidationError):
        manager.add({"name": "Salary", "amount": 100, "frequency": "daily"})

    listener.assert_not_called()
    assert store.load("income") == []


def test_update_merges_changes_and_keeps_position(store, income_payload):
    store.save(
        "income",
        [income_payload, dict(income_payload, id="inc-2", name="Bonus")],
    )
    manager = ManageRecordsUseCase(store, "income", logger=MagicMock())

    updated = manager.update("inc-1", {"amount": 5500, "is_active": False})

    assert updated.amount == Decimal("5500")
    assert updated.is_active is False
    assert updated.next_payment == date(2024, 5, 5)
    ids = [record.id for record in manager.list_records()]
    assert ids == ["inc-1", "inc-2"]


def test_update_cannot_change_the_id(store, income_payload):
    store.save("income", [income_payload])
    manager = ManageRecordsUseCase(store, "income", logger=MagicMock())

    updated = manager.update("inc-1", {"id": "other"})

    assert updated.id == "inc-1"


def test_transaction_kind_accepts_wire_and_field_names(store):
    manager = ManageRecordsUseCase(
        store,
        "transactions",
        logger=MagicMock(),
        id_factory=_ids(),
    )

    first = manager.add(
        {"type": "expense", "amount": 10, "category": "Food", "date": "2024-05-01"}
    )
    second = manager.update(first.id, {"kind": "income"})

    assert first.kind == "expense"
    assert second.kind == "income"
    assert store.load("transactions")[0]["type"] == "income"


def test_delete_removes_record_and_notifies(store, income_payload):
    store.save("income", [income_payload])
    listener = MagicMock()
    store.subscribe(listener)
    manager = ManageRecordsUseCase(store, "income", logger=MagicMock())

    manager.delete("inc-1")

    assert manager.list_records() == []
    listener.assert_called_once_with()


def test_missing_ids_raise_record_not_found(store):
    manager = ManageRecordsUseCase(store, "loans", logger=MagicMock())

    with pytest.raises(RecordNotFoundError):
        manager.delete("missing")
    with pytest.raises(RecordNotFoundError):
        manager.update("missing", {"amount": 1})


def test_list_records_skips_invalid_entries(store, bill_payload):
    logger = MagicMock()
    store.save("bills", [bill_payload, {"id": "broken"}])
    manager = ManageRecordsUseCase(store, "bills", logger=logger)

    records = manager.list_records()

    assert [record.id for record in records] == ["bill-1"]
    logger.warning.assert_called_once()


@pytest.mark.parametrize("data", [[1, 2], 5, "bill", None])
def test_add_rejects_non_object_input(store, data):
    listener = MagicMock()
    store.subscribe(listener)
    manager = ManageRecordsUseCase(store, "bills", logger=MagicMock())

    with pytest.raises(ValueError, match="must be an object"):
        manager.add(data)

    listener.assert_not_called()
    assert store.load("bills") == []


def test_update_rejects_non_object_changes(store, bill_payload):
    store.save("bills", [bill_payload])
    manager = ManageRecordsUseCase(store, "bills", logger=MagicMock())

    with pytest.raises(ValueError, match="must be an object"):
        manager.update("bill-1", ["amount", 10])

    assert store.load("bills")[0]["amount"] == 300
