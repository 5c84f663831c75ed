"""Application use cases package."""

from .get_asset_allocation import AssetAllocation, GetAssetAllocationUseCase
from .get_category_summaries import (
    CategorySummaries,
    GetCategorySummariesUseCase,
)
from .get_financial_metrics import FinancialMetrics, GetFinancialMetricsUseCase
from .get_monthly_cashflow import CashflowView, GetMonthlyCashflowUseCase
from .import_records import ImportRecordsResult, ImportRecordsUseCase
from .load_financial_collections import LoadFinancialCollectionsUseCase
from .manage_records import ManageRecordsUseCase, RecordNotFoundError
from .watch_financial_metrics import FinancialMetricsMonitor

__all__ = [
    "AssetAllocation",
    "CashflowView",
    "CategorySummaries",
    "FinancialMetrics",
    "FinancialMetricsMonitor",
    "GetAssetAllocationUseCase",
    "GetCategorySummariesUseCase",
    "GetFinancialMetricsUseCase",
    "GetMonthlyCashflowUseCase",
    "ImportRecordsResult",
    "ImportRecordsUseCase",
    "LoadFinancialCollectionsUseCase",
    "ManageRecordsUseCase",
    "RecordNotFoundError",
]
