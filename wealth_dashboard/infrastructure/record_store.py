"""Record store adapters persisting collections as JSON arrays.

Both adapters share the same contract: ``load`` never raises for missing,
corrupt or unreadable data and falls back to the default; ``save`` replaces
the whole array and fires a store-wide change notification.
"""

from datetime import date
from decimal import Decimal
import json
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from wealth_dashboard.application.ports.database import DatabaseEnginePort
from wealth_dashboard.application.ports.record_store import (
    ChangeListener,
    RecordStorePort,
)
from wealth_dashboard.infrastructure.logging.logger import get_app_logger
from wealth_dashboard.infrastructure.notifications import ChangeNotifier
from wealth_dashboard.utils.decimal_utils import json_number


CREATE_RECORD_COLLECTIONS_SQL = """
CREATE TABLE IF NOT EXISTS record_collections (
    collection_key VARCHAR(64) PRIMARY KEY,
    payload TEXT NOT NULL,
    revision INTEGER NOT NULL
)
"""

SELECT_PAYLOAD_SQL = text(
    """
    SELECT payload
    FROM record_collections
    WHERE collection_key = :key
    """
)

SELECT_REVISION_SQL = text(
    "SELECT COALESCE(MAX(revision), 0) FROM record_collections"
)

DELETE_PAYLOAD_SQL = text(
    "DELETE FROM record_collections WHERE collection_key = :key"
)

INSERT_PAYLOAD_SQL = text(
    """
    INSERT INTO record_collections (collection_key, payload, revision)
    VALUES (:key, :payload, :revision)
    """
)


class RecordStoreError(RuntimeError):
    """Raised when the backing storage cannot be read or written."""


def _json_default(value: Any):
    if isinstance(value, Decimal):
        return json_number(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonRecordStore(RecordStorePort):
    """Shared JSON encoding, fallback and notification logic.

    Subclasses provide ``_read_payload`` and ``_write_payload``.
    """

    def __init__(self, logger=None, notifier: ChangeNotifier | None = None) -> None:
        self._logger = logger or get_app_logger()
        self._notifier = notifier or ChangeNotifier()

    def load(self, key: str, default: list[Any] | None = None) -> list[Any]:
        """Return the parsed array at ``key``, or a copy of ``default``.

        Args:
            key: Collection key.
            default: Value returned when the key is absent or unreadable.

        Returns:
            list[Any]: Parsed JSON array; floats are parsed as Decimal.
        """
        fallback = [] if default is None else list(default)
        try:
            payload = self._read_payload(key)
        except RecordStoreError as exc:
            self._logger.warning(f"Error loading '{key}' from storage: {exc}")
            return fallback
        if payload is None:
            return fallback
        try:
            parsed = json.loads(payload, parse_float=Decimal)
        except ValueError as exc:
            self._logger.warning(f"Corrupt JSON stored under '{key}': {exc}")
            return fallback
        if not isinstance(parsed, list):
            self._logger.warning(
                f"Expected a JSON array under '{key}', "
                f"got {type(parsed).__name__}"
            )
            return fallback
        return parsed

    def save(self, key: str, records: list[Any]) -> None:
        """Replace the array at ``key`` and notify subscribers.

        Raises:
            RecordStoreError: If the records cannot be encoded or written.
        """
        try:
            payload = json.dumps(list(records), default=_json_default)
        except TypeError as exc:
            self._logger.error(f"Error encoding '{key}': {exc}")
            raise RecordStoreError(f"Cannot encode '{key}': {exc}") from exc
        self._write_payload(key, payload)
        self._logger.debug(f"Saved {len(records)} records under '{key}'")
        self._notifier.notify()

    def subscribe(self, listener: ChangeListener) -> None:
        self._notifier.subscribe(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        self._notifier.unsubscribe(listener)

    def _read_payload(self, key: str) -> str | None:
        raise NotImplementedError

    def _write_payload(self, key: str, payload: str) -> None:
        raise NotImplementedError


class InMemoryRecordStore(JsonRecordStore):
    """Record store keeping JSON payloads in a process-local dict."""

    def __init__(self, logger=None, notifier: ChangeNotifier | None = None) -> None:
        super().__init__(logger=logger, notifier=notifier)
        self._payloads: dict[str, str] = {}

    def put_raw(self, key: str, payload: str) -> None:
        """Store an unparsed payload as another writer would, then notify."""
        self._payloads[key] = payload
        self._notifier.notify()

    def _read_payload(self, key: str) -> str | None:
        return self._payloads.get(key)

    def _write_payload(self, key: str, payload: str) -> None:
        self._payloads[key] = payload


class SqlAlchemyRecordStore(JsonRecordStore):
    """Record store backed by a SQL table of JSON payloads.

    Each save bumps a store-wide revision so writes made by other processes
    sharing the database can be detected with ``poll_external_changes``.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        notifier: ChangeNotifier | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the record store engine.
            logger: Optional logger compatible with logging.Logger-like API.
            notifier: Optional shared change notifier.
        """
        super().__init__(logger=logger, notifier=notifier)
        self._db_port = db_port
        self._schema_ready = False
        self._seen_revision: int | None = None

    def current_revision(self) -> int:
        """Return the latest revision written by any process.

        Raises:
            RecordStoreError: If the database cannot be queried.
        """
        try:
            engine = self._ensure_schema()
            with engine.connect() as conn:
                return int(conn.execute(SELECT_REVISION_SQL).scalar_one())
        except SQLAlchemyError as exc:
            raise RecordStoreError(str(exc)) from exc

    def poll_external_changes(self) -> bool:
        """Notify subscribers if another process wrote since the last check.

        The first call records a baseline and does not notify.

        Returns:
            bool: True when a notification was fired.
        """
        try:
            revision = self.current_revision()
        except RecordStoreError as exc:
            self._logger.warning(f"Cannot check store revision: {exc}")
            return False
        if self._seen_revision is None:
            self._seen_revision = revision
            return False
        if revision == self._seen_revision:
            return False
        self._logger.info(
            f"External change detected: revision {self._seen_revision} "
            f"-> {revision}"
        )
        self._seen_revision = revision
        self._notifier.notify()
        return True

    def _ensure_schema(self):
        engine = self._db_port.get_records_engine()
        if not self._schema_ready:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_RECORD_COLLECTIONS_SQL)
            self._schema_ready = True
        return engine

    def _read_payload(self, key: str) -> str | None:
        try:
            engine = self._ensure_schema()
            with engine.connect() as conn:
                row = conn.execute(SELECT_PAYLOAD_SQL, {"key": key}).first()
        except SQLAlchemyError as exc:
            raise RecordStoreError(str(exc)) from exc
        return row.payload if row else None

    def _write_payload(self, key: str, payload: str) -> None:
        try:
            engine = self._ensure_schema()
            with engine.begin() as conn:
                revision = conn.execute(SELECT_REVISION_SQL).scalar_one() + 1
                conn.execute(DELETE_PAYLOAD_SQL, {"key": key})
                conn.execute(
                    INSERT_PAYLOAD_SQL,
                    {"key": key, "payload": payload, "revision": revision},
                )
        except SQLAlchemyError as exc:
            self._logger.error(f"Error saving '{key}' to storage: {exc}")
            raise RecordStoreError(f"Cannot save '{key}': {exc}") from exc
        self._seen_revision = revision


__all__ = [
    "RecordStoreError",
    "JsonRecordStore",
    "InMemoryRecordStore",
    "SqlAlchemyRecordStore",
]
