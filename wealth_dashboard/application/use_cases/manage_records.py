"""Use case to create, update and delete records in one collection.

Every write replaces the whole collection through ``RecordStorePort.save``,
which notifies subscribers such as the metrics monitor.
"""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import uuid4

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.domain.models import FinancialRecord
from wealth_dashboard.domain.services.validation import (
    RECORD_MODELS,
    validate_records,
)
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


class RecordNotFoundError(LookupError):
    """Raised when no record with the requested id exists."""


def _new_record_id() -> str:
    return uuid4().hex


class ManageRecordsUseCase:
    """Own the lifecycle of the records stored under a single key."""

    def __init__(
        self,
        record_store: RecordStorePort,
        key: str,
        logger=None,
        id_factory: Callable[[], str] = _new_record_id,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the persisted collections.
            key: Collection key, one of ``COLLECTION_KEYS``.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Callable returning a fresh unique record id.

        Raises:
            ValueError: If ``key`` is not a known collection key.
        """
        if key not in RECORD_MODELS:
            raise ValueError(f"Unknown collection key: {key}")
        self._record_store = record_store
        self._key = key
        self._model = RECORD_MODELS[key]
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory

    @property
    def key(self) -> str:
        return self._key

    def list_records(self) -> list[FinancialRecord]:
        """Return the valid records of the collection."""
        raw = self._record_store.load(self._key, [])
        return list(validate_records(self._key, raw, self._logger))

    def add(self, data: Mapping[str, Any]) -> FinancialRecord:
        """Validate and append a new record with a fresh id.

        Args:
            data: Record fields, by attribute name or JSON key.

        Returns:
            FinancialRecord: The stored record.

        Raises:
            ValueError: If ``data`` is not a mapping.
            pydantic.ValidationError: If the fields do not match the schema.
        """
        fields = self._to_field_names(data)
        fields["id"] = self._id_factory()
        record = self._model.model_validate(fields)
        raw = self._record_store.load(self._key, [])
        raw.append(record.to_payload())
        self._record_store.save(self._key, raw)
        self._logger.info(f"Added {self._key} record {record.id}")
        return record

    def update(
        self,
        record_id: str,
        changes: Mapping[str, Any],
    ) -> FinancialRecord:
        """Apply ``changes`` to the record with ``record_id`` in place.

        Raises:
            RecordNotFoundError: If no record has this id.
            ValueError: If ``changes`` is not a mapping.
            pydantic.ValidationError: If the merged record is invalid.
        """
        raw = self._record_store.load(self._key, [])
        index = self._find_index(raw, record_id)
        merged = {
            **self._to_field_names(raw[index]),
            **self._to_field_names(changes),
            "id": record_id,
        }
        record = self._model.model_validate(merged)
        raw[index] = record.to_payload()
        self._record_store.save(self._key, raw)
        self._logger.info(f"Updated {self._key} record {record_id}")
        return record

    def delete(self, record_id: str) -> None:
        """Remove the record with ``record_id``.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        raw = self._record_store.load(self._key, [])
        index = self._find_index(raw, record_id)
        remaining = raw[:index] + raw[index + 1:]
        self._record_store.save(self._key, remaining)
        self._logger.info(f"Deleted {self._key} record {record_id}")

    def _find_index(self, raw: list[Any], record_id: str) -> int:
        for index, item in enumerate(raw):
            if isinstance(item, Mapping) and str(item.get("id")) == record_id:
                return index
        raise RecordNotFoundError(
            f"No {self._key} record with id {record_id}"
        )

    def _to_field_names(self, data: Mapping[str, Any]) -> dict[str, Any]:
        if not isinstance(data, Mapping):
            raise ValueError(
                f"A {self._key} record must be an object, "
                f"got {type(data).__name__}"
            )
        name_by_alias = {
            field.alias or name: name
            for name, field in self._model.model_fields.items()
        }
        return {name_by_alias.get(key, key): value for key, value in data.items()}


__all__ = ["ManageRecordsUseCase", "RecordNotFoundError"]
