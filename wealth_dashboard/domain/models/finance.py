"""Domain models for financial aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .records import Bill


@dataclass(frozen=True)
class FinancialMetrics:
    """Dashboard metrics snapshot.

    Monthly figures are monthly equivalents; value figures are current
    valuations. Every field is zero when all collections are empty.

    Attributes:
        total_monthly_income: Active income sources, normalized to a month.
        total_monthly_expenses: Expense transactions accrued this month.
        total_investment_value: Current value of all investments.
        total_investment_income: Monthly income paid by investments.
        total_real_estate_value: Current value of all properties.
        total_real_estate_income: Rent minus expenses, per month.
        total_retirement_saved: Amount contributed to retirement plans.
        total_retirement_contribution: Monthly retirement contributions.
        total_debt: Outstanding loan balances.
        total_loan_payments: Monthly loan payments.
        total_bills: Monthly amount of active bills.
        net_monthly_income: Inflows minus outflows for the month.
        total_assets: Investments, real estate and retirement savings.
        net_worth: Total assets minus total debt.
    """

    total_monthly_income: Decimal
    total_monthly_expenses: Decimal
    total_investment_value: Decimal
    total_investment_income: Decimal
    total_real_estate_value: Decimal
    total_real_estate_income: Decimal
    total_retirement_saved: Decimal
    total_retirement_contribution: Decimal
    total_debt: Decimal
    total_loan_payments: Decimal
    total_bills: Decimal
    net_monthly_income: Decimal
    total_assets: Decimal
    net_worth: Decimal

    @property
    def total_monthly_inflows(self) -> Decimal:
        """Return income from every source (salary, investments, rent)."""
        return (
            self.total_monthly_income
            + self.total_investment_income
            + self.total_real_estate_income
        )

    @property
    def total_monthly_outflows(self) -> Decimal:
        """Return expenses, loan payments, bills and contributions."""
        return (
            self.total_monthly_expenses
            + self.total_loan_payments
            + self.total_bills
            + self.total_retirement_contribution
        )


@dataclass(frozen=True)
class AssetCategoryAmount:
    """Amount aggregated for a given asset category."""

    category: str
    amount: Decimal
    parent_category: str | None = None


@dataclass(frozen=True)
class AssetAllocation:
    """Breakdown of asset amounts by category."""

    level: int
    categories: list[AssetCategoryAmount]

    @property
    def total(self) -> Decimal:
        return sum(
            (item.amount for item in self.categories),
            Decimal("0"),
        )


@dataclass(frozen=True)
class CashflowSummary:
    """Summary of monthly cashflow totals."""

    total_in: Decimal
    total_out: Decimal

    @property
    def difference(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


@dataclass(frozen=True)
class CashflowItem:
    """Monthly cashflow aggregate for one labelled source or destination.

    ``label`` is a ``Group:Detail`` path, e.g. ``Income:Salary``.
    """

    label: str
    amount: Decimal


@dataclass(frozen=True)
class CashflowView:
    """Cashflow summary and details for UI rendering."""

    summary: CashflowSummary
    incoming: list[CashflowItem]
    outgoing: list[CashflowItem]


@dataclass(frozen=True)
class InvestmentSummary:
    total_invested: Decimal
    current_value: Decimal
    monthly_income: Decimal
    total_return: Decimal
    return_percentage: Decimal


@dataclass(frozen=True)
class RealEstateSummary:
    total_invested: Decimal
    current_value: Decimal
    monthly_rent: Decimal
    monthly_expenses: Decimal
    net_monthly_income: Decimal
    total_return: Decimal
    rented_count: int


@dataclass(frozen=True)
class RetirementSummary:
    monthly_contribution: Decimal
    total_contributed: Decimal
    expected_monthly_return: Decimal


@dataclass(frozen=True)
class LoanSummary:
    total_debt: Decimal
    monthly_payment: Decimal
    average_interest_rate: Decimal


@dataclass(frozen=True)
class BillSummary:
    """Bill totals plus the overdue and upcoming lists."""

    recurring_monthly_total: Decimal
    active_count: int
    overdue: list[Bill]
    upcoming: list[Bill]


@dataclass(frozen=True)
class IncomeSummary:
    monthly_total: Decimal
    active_count: int
    next_payment: date | None


@dataclass(frozen=True)
class CategorySummaries:
    """Per-category summaries shown on the records pages."""

    income: IncomeSummary
    investments: InvestmentSummary
    real_estate: RealEstateSummary
    retirement: RetirementSummary
    loans: LoanSummary
    bills: BillSummary


__all__ = [
    "FinancialMetrics",
    "AssetCategoryAmount",
    "AssetAllocation",
    "CashflowSummary",
    "CashflowItem",
    "CashflowView",
    "InvestmentSummary",
    "RealEstateSummary",
    "RetirementSummary",
    "LoanSummary",
    "BillSummary",
    "IncomeSummary",
    "CategorySummaries",
]
