"""Use case to compute the dashboard metrics from the record store."""

from collections.abc import Callable
from datetime import date

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.application.use_cases.load_financial_collections import (
    LoadFinancialCollectionsUseCase,
)
from wealth_dashboard.domain.models import FinancialMetrics
from wealth_dashboard.domain.services.finance import compute_metrics
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


class GetFinancialMetricsUseCase:
    """Compute net worth and monthly cash flow metrics."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the persisted collections.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the reference date when none is given.
        """
        self._logger = logger or get_app_logger()
        self._loader = LoadFinancialCollectionsUseCase(
            record_store,
            logger=self._logger,
        )
        self._clock = clock

    def execute(self, today: date | None = None) -> FinancialMetrics:
        """Return the metrics snapshot.

        Args:
            today: Optional reference date for current-month accrual.

        Returns:
            FinancialMetrics: Computed totals and derived figures.
        """
        reference = today or self._clock()
        metrics = compute_metrics(self._loader.execute(), reference)
        self._logger.info(
            f"Metrics computed for {reference.isoformat()}: "
            f"net_worth={metrics.net_worth}, "
            f"net_monthly_income={metrics.net_monthly_income}"
        )
        return metrics


__all__ = ["GetFinancialMetricsUseCase", "FinancialMetrics"]
