"""Use case to summarize each record category."""

from collections.abc import Callable
from datetime import date

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.application.use_cases.load_financial_collections import (
    LoadFinancialCollectionsUseCase,
)
from wealth_dashboard.domain.models import CategorySummaries
from wealth_dashboard.domain.services.summaries import summarize_categories
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


class GetCategorySummariesUseCase:
    """Compute the per-category summaries shown on the records pages."""

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

    def execute(self, today: date | None = None) -> CategorySummaries:
        summaries = summarize_categories(
            self._loader.execute(),
            today or self._clock(),
        )
        if summaries.bills.overdue:
            self._logger.warning(
                f"{len(summaries.bills.overdue)} active bill(s) are overdue"
            )
        return summaries


__all__ = ["GetCategorySummariesUseCase", "CategorySummaries"]
