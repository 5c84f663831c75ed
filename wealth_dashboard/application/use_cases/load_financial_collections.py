"""Use case to read and validate every finance collection."""

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.domain.constants import COLLECTION_KEYS
from wealth_dashboard.domain.models import FinancialCollections
from wealth_dashboard.domain.services.validation import build_collections
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


class LoadFinancialCollectionsUseCase:
    """Load all collections from the record store and validate them."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the persisted collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self) -> FinancialCollections:
        """Return a validated snapshot of every collection.

        Returns:
            FinancialCollections: Records that passed schema validation.
        """
        raw_by_key = {
            key: self._record_store.load(key, []) for key in COLLECTION_KEYS
        }
        collections = build_collections(raw_by_key, self._logger)
        raw_count = sum(len(records) for records in raw_by_key.values())
        kept_count = sum(
            len(getattr(collections, field))
            for field in FinancialCollections.__dataclass_fields__
        )
        self._logger.info(
            f"Loaded {kept_count} records "
            f"({raw_count - kept_count} rejected) "
            f"from {len(COLLECTION_KEYS)} collections"
        )
        return collections


__all__ = ["LoadFinancialCollectionsUseCase"]
