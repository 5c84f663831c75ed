"""Use case to import a JSON export of every collection."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.domain.services.validation import (
    RECORD_MODELS,
    validate_records,
)
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ImportRecordsResult:
    """Result of an import run.

    Attributes:
        imported: Number of valid records saved, per collection key.
        rejected: Number of records dropped by validation, per key.
        ignored_keys: Keys in the payload that are not collections.
    """

    imported: dict[str, int]
    rejected: dict[str, int]
    ignored_keys: list[str]

    @property
    def imported_count(self) -> int:
        return sum(self.imported.values())


class ImportRecordsUseCase:
    """Replace collections with the validated content of an export."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, payload: Mapping[str, Any]) -> ImportRecordsResult:
        """Validate and save every collection present in ``payload``.

        Args:
            payload: Mapping of collection key to a JSON array of records.

        Returns:
            ImportRecordsResult: Per-key imported and rejected counts.
        """
        imported: dict[str, int] = {}
        rejected: dict[str, int] = {}
        ignored: list[str] = []
        for key, raw_records in payload.items():
            if key not in RECORD_MODELS:
                self._logger.warning(f"Ignoring unknown collection '{key}'")
                ignored.append(key)
                continue
            if not isinstance(raw_records, list):
                self._logger.warning(
                    f"Ignoring collection '{key}': expected a JSON array"
                )
                ignored.append(key)
                continue
            records = validate_records(key, raw_records, self._logger)
            self._record_store.save(
                key,
                [record.to_payload() for record in records],
            )
            imported[key] = len(records)
            rejected[key] = len(raw_records) - len(records)

        self._logger.info(
            f"Imported {sum(imported.values())} records "
            f"into {len(imported)} collections"
        )
        return ImportRecordsResult(
            imported=imported,
            rejected=rejected,
            ignored_keys=ignored,
        )


__all__ = ["ImportRecordsUseCase", "ImportRecordsResult"]
