"""Keep a live metrics snapshot in sync with the record store.

The monitor subscribes to the store's change notifications. Any write, to
any key, triggers a reload of every collection and a full recompute; there
is no per-key diffing.
"""

from collections.abc import Callable
from datetime import date

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.application.use_cases.get_financial_metrics import (
    GetFinancialMetricsUseCase,
)
from wealth_dashboard.domain.models import FinancialMetrics
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


class FinancialMetricsMonitor:
    """Recompute metrics whenever the record store notifies a change."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        clock: Callable[[], date] = date.today,
        on_update: Callable[[FinancialMetrics], None] | None = None,
    ) -> None:
        """Initialize the monitor.

        Args:
            record_store: Store to read from and subscribe to.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the reference date at each recompute.
            on_update: Optional callback receiving every new snapshot.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._metrics_use_case = GetFinancialMetricsUseCase(
            record_store,
            logger=self._logger,
            clock=clock,
        )
        self._on_update = on_update
        self._clock = clock
        self._snapshot: FinancialMetrics | None = None
        self._computed_for: date | None = None
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def snapshot(self) -> FinancialMetrics:
        """Return the latest metrics snapshot.

        While active, a snapshot computed in an earlier calendar month is
        recomputed first, since current-month accruals depend on the date.

        Raises:
            RuntimeError: If the monitor has never been activated.
        """
        if self._snapshot is None:
            raise RuntimeError("Metrics monitor has not been activated")
        if self._active and self._month_rolled_over():
            self._logger.info("Calendar month changed, recomputing metrics")
            self._recompute()
        return self._snapshot

    def activate(self) -> FinancialMetrics:
        """Compute the initial snapshot and start listening for changes."""
        if not self._active:
            self._recompute()
            self._record_store.subscribe(self._handle_change)
            self._active = True
            self._logger.info("Metrics monitor activated")
        return self.snapshot

    def deactivate(self) -> None:
        """Stop listening for changes; the last snapshot stays readable."""
        if not self._active:
            return
        self._record_store.unsubscribe(self._handle_change)
        self._active = False
        self._logger.info("Metrics monitor deactivated")

    def __enter__(self) -> "FinancialMetricsMonitor":
        self.activate()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.deactivate()

    def _handle_change(self) -> None:
        self._recompute()

    def _month_rolled_over(self) -> bool:
        today = self._clock()
        computed_for = self._computed_for
        return (today.year, today.month) != (
            computed_for.year,
            computed_for.month,
        )

    def _recompute(self) -> None:
        reference = self._clock()
        self._snapshot = self._metrics_use_case.execute(today=reference)
        self._computed_for = reference
        if self._on_update is not None:
            self._on_update(self._snapshot)


__all__ = ["FinancialMetricsMonitor"]
