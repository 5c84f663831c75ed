"""Per-category summaries for the records pages."""

from datetime import date
from decimal import Decimal

from wealth_dashboard.domain.constants import UPCOMING_BILLS_LIMIT
from wealth_dashboard.domain.models import (
    Bill,
    BillSummary,
    CategorySummaries,
    FinancialCollections,
    IncomeSource,
    IncomeSummary,
    Investment,
    InvestmentSummary,
    LoanOrDebt,
    LoanSummary,
    RealEstateHolding,
    RealEstateSummary,
    RetirementPlan,
    RetirementSummary,
)
from wealth_dashboard.domain.services.normalization import (
    income_source_monthly_amount,
    investment_current_value,
    investment_monthly_income,
    real_estate_current_value,
)
from wealth_dashboard.utils.decimal_utils import decimal_sum

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def summarize_income(sources: tuple[IncomeSource, ...]) -> IncomeSummary:
    active = [source for source in sources if source.is_active]
    payments = [
        source.next_payment for source in active if source.next_payment
    ]
    return IncomeSummary(
        monthly_total=decimal_sum(
            income_source_monthly_amount(source) for source in active
        ),
        active_count=len(active),
        next_payment=min(payments) if payments else None,
    )


def summarize_investments(
    investments: tuple[Investment, ...],
) -> InvestmentSummary:
    """Summarize invested amounts against current valuations.

    Args:
        investments: Investment records.

    Returns:
        InvestmentSummary: Totals, return and return percentage (zero when
        nothing is invested).
    """
    total_invested = decimal_sum(inv.amount for inv in investments)
    current_value = decimal_sum(
        investment_current_value(inv) for inv in investments
    )
    total_return = current_value - total_invested
    return_percentage = (
        total_return / total_invested * HUNDRED if total_invested > 0 else ZERO
    )
    return InvestmentSummary(
        total_invested=total_invested,
        current_value=current_value,
        monthly_income=decimal_sum(
            investment_monthly_income(inv) for inv in investments
        ),
        total_return=total_return,
        return_percentage=return_percentage,
    )


def summarize_real_estate(
    holdings: tuple[RealEstateHolding, ...],
) -> RealEstateSummary:
    total_invested = decimal_sum(prop.purchase_price for prop in holdings)
    current_value = decimal_sum(
        real_estate_current_value(prop) for prop in holdings
    )
    monthly_rent = decimal_sum(prop.monthly_rent for prop in holdings)
    monthly_expenses = decimal_sum(prop.expenses for prop in holdings)
    return RealEstateSummary(
        total_invested=total_invested,
        current_value=current_value,
        monthly_rent=monthly_rent,
        monthly_expenses=monthly_expenses,
        net_monthly_income=monthly_rent - monthly_expenses,
        total_return=current_value - total_invested,
        rented_count=sum(1 for prop in holdings if prop.is_rented),
    )


def summarize_retirement(
    plans: tuple[RetirementPlan, ...],
) -> RetirementSummary:
    return RetirementSummary(
        monthly_contribution=decimal_sum(
            plan.monthly_contribution for plan in plans
        ),
        total_contributed=decimal_sum(plan.total_contributed for plan in plans),
        expected_monthly_return=decimal_sum(
            plan.expected_return for plan in plans
        ),
    )


def summarize_loans(loans: tuple[LoanOrDebt, ...]) -> LoanSummary:
    average_interest_rate = (
        decimal_sum(loan.interest_rate for loan in loans) / len(loans)
        if loans
        else ZERO
    )
    return LoanSummary(
        total_debt=decimal_sum(loan.remaining_amount for loan in loans),
        monthly_payment=decimal_sum(loan.monthly_payment for loan in loans),
        average_interest_rate=average_interest_rate,
    )


def summarize_bills(bills: tuple[Bill, ...], today: date) -> BillSummary:
    """Summarize bills due around ``today``.

    Args:
        bills: Bill records.
        today: Reference date for overdue detection.

    Returns:
        BillSummary: Recurring total of active bills, active count, bills
        past their due date and the next bills to pay.
    """
    active = [bill for bill in bills if bill.is_active]
    return BillSummary(
        recurring_monthly_total=decimal_sum(
            bill.amount for bill in active if bill.is_recurring
        ),
        active_count=len(active),
        overdue=[bill for bill in active if bill.next_due < today],
        upcoming=sorted(active, key=lambda bill: bill.next_due)[
            :UPCOMING_BILLS_LIMIT
        ],
    )


def summarize_categories(
    collections: FinancialCollections,
    today: date,
) -> CategorySummaries:
    """Build every category summary for the given collections."""
    return CategorySummaries(
        income=summarize_income(collections.income),
        investments=summarize_investments(collections.investments),
        real_estate=summarize_real_estate(collections.real_estate),
        retirement=summarize_retirement(collections.retirement),
        loans=summarize_loans(collections.loans),
        bills=summarize_bills(collections.bills, today),
    )


__all__ = [
    "summarize_income",
    "summarize_investments",
    "summarize_real_estate",
    "summarize_retirement",
    "summarize_loans",
    "summarize_bills",
    "summarize_categories",
]
