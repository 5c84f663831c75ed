"""Domain models package."""

from .finance import (
    AssetAllocation,
    AssetCategoryAmount,
    BillSummary,
    CashflowItem,
    CashflowSummary,
    CashflowView,
    CategorySummaries,
    FinancialMetrics,
    IncomeSummary,
    InvestmentSummary,
    LoanSummary,
    RealEstateSummary,
    RetirementSummary,
)
from .records import (
    Bill,
    FinancialCollections,
    FinancialRecord,
    IncomeSource,
    Investment,
    LoanOrDebt,
    RealEstateHolding,
    RetirementPlan,
    Transaction,
)

__all__ = [
    "AssetAllocation",
    "AssetCategoryAmount",
    "Bill",
    "BillSummary",
    "CashflowItem",
    "CashflowSummary",
    "CashflowView",
    "CategorySummaries",
    "FinancialCollections",
    "FinancialMetrics",
    "FinancialRecord",
    "IncomeSource",
    "IncomeSummary",
    "Investment",
    "InvestmentSummary",
    "LoanOrDebt",
    "LoanSummary",
    "RealEstateHolding",
    "RealEstateSummary",
    "RetirementPlan",
    "RetirementSummary",
    "Transaction",
]
