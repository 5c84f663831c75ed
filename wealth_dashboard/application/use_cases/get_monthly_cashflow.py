"""Use case to break the monthly cash flow into inflows and outflows."""

from collections.abc import Callable
from datetime import date

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.application.use_cases.load_financial_collections import (
    LoadFinancialCollectionsUseCase,
)
from wealth_dashboard.domain.models import CashflowView
from wealth_dashboard.domain.services.finance import compute_monthly_cashflow
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


class GetMonthlyCashflowUseCase:
    """Compute labelled monthly inflows and outflows."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._logger = logger or get_app_logger()
        self._loader = LoadFinancialCollectionsUseCase(
            record_store,
            logger=self._logger,
        )
        self._clock = clock

    def execute(self, today: date | None = None) -> CashflowView:
        """Return the cashflow view for the month containing ``today``."""
        view = compute_monthly_cashflow(
            self._loader.execute(),
            today or self._clock(),
        )
        self._logger.info(
            f"Cashflow totals computed: in={view.summary.total_in}, "
            f"out={view.summary.total_out}"
        )
        return view


__all__ = ["GetMonthlyCashflowUseCase", "CashflowView"]
