"""Tests for the record store adapters."""

from datetime import date
from decimal import Decimal
import json
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

from wealth_dashboard.application.use_cases.manage_records import (
    ManageRecordsUseCase,
)
from wealth_dashboard.infrastructure.record_store import (
    InMemoryRecordStore,
    RecordStoreError,
    SqlAlchemyRecordStore,
)


def _sqlite_port(tmp_path) -> MagicMock:
    engine = create_engine(f"sqlite:///{tmp_path / 'records.db'}", future=True)
    db_port = MagicMock()
    db_port.get_records_engine.return_value = engine
    return db_port


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemoryRecordStore(logger=MagicMock())
    return SqlAlchemyRecordStore(_sqlite_port(tmp_path), logger=MagicMock())


def test_load_returns_default_for_missing_key(store):
    assert store.load("income") == []
    assert store.load("income", [{"id": "x"}]) == [{"id": "x"}]


def test_load_returns_a_copy_of_the_default(store):
    default = [{"id": "x"}]

    loaded = store.load("income", default)
    loaded.append({"id": "y"})

    assert default == [{"id": "x"}]


def test_save_then_load_keeps_amounts_exact(store):
    store.save(
        "bills",
        [{"id": "1", "amount": Decimal("19.99"), "nextDue": date(2024, 6, 1)}],
    )

    assert store.load("bills") == [
        {"id": "1", "amount": Decimal("19.99"), "nextDue": "2024-06-01"}
    ]


def test_long_amounts_survive_a_save_and_reload(store, bill_payload):
    amount = Decimal("12345678901234567.89")
    store.save("bills", [{**bill_payload, "amount": amount}])

    bills = ManageRecordsUseCase(store, "bills", logger=MagicMock())

    assert bills.list_records()[0].amount == amount


def test_save_notifies_every_subscriber(store):
    first = MagicMock()
    second = MagicMock()
    store.subscribe(first)
    store.subscribe(second)

    store.save("documents", [])
    store.unsubscribe(second)
    store.save("income", [])

    assert first.call_count == 2
    assert second.call_count == 1


def test_save_rejects_unencodable_records(store):
    listener = MagicMock()
    store.subscribe(listener)

    with pytest.raises(RecordStoreError):
        store.save("income", [{"id": object()}])

    listener.assert_not_called()


def test_corrupt_or_non_array_payloads_fall_back():
    logger = MagicMock()
    store = InMemoryRecordStore(logger=logger)
    store.put_raw("income", "{not json")
    store.put_raw("bills", json.dumps({"id": "1"}))

    assert store.load("income") == []
    assert store.load("bills", [{"id": "d"}]) == [{"id": "d"}]
    assert logger.warning.call_count == 2


def test_sqlalchemy_store_persists_across_instances(tmp_path):
    db_port = _sqlite_port(tmp_path)
    writer = SqlAlchemyRecordStore(db_port, logger=MagicMock())
    writer.save("income", [{"id": "1", "amount": 10}])

    reader = SqlAlchemyRecordStore(db_port, logger=MagicMock())

    assert reader.load("income") == [{"id": "1", "amount": 10}]
    assert reader.current_revision() == 1


def test_poll_external_changes_detects_other_writers(tmp_path):
    db_port = _sqlite_port(tmp_path)
    writer = SqlAlchemyRecordStore(db_port, logger=MagicMock())
    reader = SqlAlchemyRecordStore(db_port, logger=MagicMock())
    listener = MagicMock()
    reader.subscribe(listener)

    assert reader.poll_external_changes() is False
    writer.save("income", [])
    assert reader.poll_external_changes() is True
    assert reader.poll_external_changes() is False

    listener.assert_called_once_with()


def test_poll_ignores_own_writes(tmp_path):
    store = SqlAlchemyRecordStore(_sqlite_port(tmp_path), logger=MagicMock())
    listener = MagicMock()
    store.poll_external_changes()
    store.subscribe(listener)

    store.save("income", [])

    assert store.poll_external_changes() is False
    listener.assert_called_once_with()


def test_sqlalchemy_errors_fall_back_on_load_and_raise_on_save():
    logger = MagicMock()
    db_port = MagicMock()
    db_port.get_records_engine.return_value.begin.side_effect = (
        OperationalError("CREATE", {}, Exception("down"))
    )
    store = SqlAlchemyRecordStore(db_port, logger=logger)

    assert store.load("income", [{"id": "d"}]) == [{"id": "d"}]
    assert store.poll_external_changes() is False
    with pytest.raises(RecordStoreError):
        store.save("income", [])
    assert logger.warning.call_count == 2
    logger.error.assert_called_once()
