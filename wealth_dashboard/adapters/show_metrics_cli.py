"""CLI adapter printing the current dashboard metrics.

This module wires the GetFinancialMetricsUseCase to the configured record
store and prints one line per metric.
"""

from dataclasses import fields

from wealth_dashboard.application.use_cases.get_financial_metrics import (
    GetFinancialMetricsUseCase,
)
from wealth_dashboard.infrastructure.container import build_record_store
from wealth_dashboard.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Compute and print the metrics snapshot."""
    logger = get_app_logger()
    record_store = build_record_store()
    use_case = GetFinancialMetricsUseCase(record_store, logger=logger)

    metrics = use_case.execute()

    width = max(len(field.name) for field in fields(metrics))
    for field in fields(metrics):
        value = getattr(metrics, field.name)
        print(f"{field.name:<{width}}  {value:,.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
