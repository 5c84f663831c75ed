"""Domain services package."""

from .finance import (
    compute_asset_allocation,
    compute_metrics,
    compute_monthly_cashflow,
)
from .normalization import (
    bill_monthly_amount,
    income_source_monthly_amount,
    investment_current_value,
    investment_monthly_income,
    loan_monthly_payment,
    monthly_equivalent,
    real_estate_current_value,
    real_estate_net_monthly_income,
    retirement_monthly_contribution,
    transaction_monthly_accrual,
)
from .schedules import (
    days_until,
    loan_paid_off_percentage,
    loan_remaining_months,
    mark_bill_paid,
    next_bill_due_date,
)
from .summaries import summarize_categories
from .validation import RECORD_MODELS, build_collections, validate_records

__all__ = [
    "RECORD_MODELS",
    "bill_monthly_amount",
    "build_collections",
    "compute_asset_allocation",
    "compute_metrics",
    "compute_monthly_cashflow",
    "days_until",
    "income_source_monthly_amount",
    "investment_current_value",
    "investment_monthly_income",
    "loan_monthly_payment",
    "loan_paid_off_percentage",
    "loan_remaining_months",
    "mark_bill_paid",
    "monthly_equivalent",
    "next_bill_due_date",
    "real_estate_current_value",
    "real_estate_net_monthly_income",
    "retirement_monthly_contribution",
    "summarize_categories",
    "transaction_monthly_accrual",
    "validate_records",
]
