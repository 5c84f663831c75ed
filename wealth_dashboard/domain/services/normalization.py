"""Domain normalization helpers.

Each helper turns one record into its monthly-equivalent or current-value
contribution. Optional fields fall back in a fixed priority order.
"""

from datetime import date
from decimal import Decimal

from wealth_dashboard.domain.constants import MONTHS_PER_YEAR, WEEKS_PER_MONTH
from wealth_dashboard.domain.models.records import (
    Bill,
    IncomeSource,
    Investment,
    LoanOrDebt,
    RealEstateHolding,
    RetirementPlan,
    Transaction,
)

ZERO = Decimal("0")


def monthly_equivalent(amount: Decimal, frequency: str) -> Decimal:
    """Normalize an amount paid at a given cadence to a monthly figure.

    Args:
        amount: Amount paid once per period.
        frequency: One of monthly, weekly, yearly or one-time.

    Returns:
        Decimal: Monthly equivalent. One-time amounts contribute zero.
    """
    if frequency == "monthly":
        return amount
    if frequency == "weekly":
        return amount * WEEKS_PER_MONTH
    if frequency == "yearly":
        return amount / MONTHS_PER_YEAR
    return ZERO


def income_source_monthly_amount(source: IncomeSource) -> Decimal:
    """Return the monthly contribution of an income source.

    Args:
        source: Income source record.

    Returns:
        Decimal: Monthly equivalent for active sources, zero otherwise.
    """
    if not source.is_active:
        return ZERO
    return monthly_equivalent(source.amount, source.frequency)


def transaction_monthly_accrual(
    transaction: Transaction,
    today: date,
) -> Decimal:
    """Return how much an expense transaction accrues to this month.

    Recurring expenses count in full regardless of their date. Non-recurring
    expenses count in full only when dated in the calendar month of
    ``today``; there is no proration by day.

    Args:
        transaction: Ledger entry.
        today: Reference date defining the current month.

    Returns:
        Decimal: Accrued amount, zero for income transactions.
    """
    if transaction.kind != "expense":
        return ZERO
    if transaction.is_recurring:
        return transaction.amount
    if (
        transaction.date.year == today.year
        and transaction.date.month == today.month
    ):
        return transaction.amount
    return ZERO


def investment_current_value(investment: Investment) -> Decimal:
    """Return current price, else purchase price, else invested amount."""
    if investment.current_price is not None:
        return investment.current_price
    if investment.purchase_price is not None:
        return investment.purchase_price
    return investment.amount


def investment_monthly_income(investment: Investment) -> Decimal:
    if investment.monthly_income is None:
        return ZERO
    return investment.monthly_income


def real_estate_current_value(holding: RealEstateHolding) -> Decimal:
    """Return the current value, falling back to the purchase price."""
    if holding.current_value is not None:
        return holding.current_value
    return holding.purchase_price


def real_estate_net_monthly_income(holding: RealEstateHolding) -> Decimal:
    """Return monthly rent minus monthly expenses (may be negative)."""
    rent = holding.monthly_rent if holding.monthly_rent is not None else ZERO
    return rent - holding.expenses


def retirement_monthly_contribution(plan: RetirementPlan) -> Decimal:
    return plan.monthly_contribution


def loan_monthly_payment(loan: LoanOrDebt) -> Decimal:
    return loan.monthly_payment


def bill_monthly_amount(bill: Bill) -> Decimal:
    """Return the bill amount when active, zero otherwise."""
    return bill.amount if bill.is_active else ZERO


__all__ = [
    "monthly_equivalent",
    "income_source_monthly_amount",
    "transaction_monthly_accrual",
    "investment_current_value",
    "investment_monthly_income",
    "real_estate_current_value",
    "real_estate_net_monthly_income",
    "retirement_monthly_contribution",
    "loan_monthly_payment",
    "bill_monthly_amount",
]
