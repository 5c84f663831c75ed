"""Domain package for business rules and core models."""

from .constants import COLLECTION_KEYS
from .models import FinancialCollections, FinancialMetrics
from .services import (
    build_collections,
    compute_asset_allocation,
    compute_metrics,
    compute_monthly_cashflow,
    monthly_equivalent,
)

__all__ = [
    "COLLECTION_KEYS",
    "FinancialCollections",
    "FinancialMetrics",
    "build_collections",
    "compute_asset_allocation",
    "compute_metrics",
    "compute_monthly_cashflow",
    "monthly_equivalent",
]
