"""Use case to compute the asset allocation breakdown."""

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.application.use_cases.load_financial_collections import (
    LoadFinancialCollectionsUseCase,
)
from wealth_dashboard.domain.models import AssetAllocation
from wealth_dashboard.domain.services.finance import compute_asset_allocation
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


class GetAssetAllocationUseCase:
    """Compute asset totals grouped by class or subtype."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._logger = logger or get_app_logger()
        self._loader = LoadFinancialCollectionsUseCase(
            record_store,
            logger=self._logger,
        )

    def execute(self, level: int = 1) -> AssetAllocation:
        """Return the allocation at the requested depth.

        Args:
            level: 1 for asset classes, 2 for subtypes within each class.

        Returns:
            AssetAllocation: Non-zero totals by category.

        Raises:
            ValueError: If ``level`` is neither 1 nor 2.
        """
        if level not in (1, 2):
            raise ValueError(f"Unsupported allocation level: {level}")
        allocation = compute_asset_allocation(self._loader.execute(), level)
        self._logger.info(
            f"Asset allocation computed: level={level}, "
            f"categories={len(allocation.categories)}, "
            f"total={allocation.total}"
        )
        return allocation


__all__ = ["GetAssetAllocationUseCase", "AssetAllocation"]
