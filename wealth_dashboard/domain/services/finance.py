"""Domain services for finance aggregates."""

from datetime import date
from decimal import Decimal

from wealth_dashboard.domain.constants import (
    ASSET_CLASS_INVESTMENTS,
    ASSET_CLASS_REAL_ESTATE,
    ASSET_CLASS_RETIREMENT,
)
from wealth_dashboard.domain.models import (
    AssetAllocation,
    AssetCategoryAmount,
    CashflowItem,
    CashflowSummary,
    CashflowView,
    FinancialCollections,
    FinancialMetrics,
)
from wealth_dashboard.domain.services.normalization import (
    bill_monthly_amount,
    income_source_monthly_amount,
    investment_current_value,
    investment_monthly_income,
    loan_monthly_payment,
    real_estate_current_value,
    real_estate_net_monthly_income,
    retirement_monthly_contribution,
    transaction_monthly_accrual,
)
from wealth_dashboard.utils.decimal_utils import decimal_sum


def compute_metrics(
    collections: FinancialCollections,
    today: date,
) -> FinancialMetrics:
    """Compute the dashboard metrics from validated collections.

    The computation is a full recompute with no side effects: the same
    collections and ``today`` always produce the same snapshot.

    Args:
        collections: Validated records for every category.
        today: Reference date for current-month expense accrual.

    Returns:
        FinancialMetrics: Base totals and derived figures.
    """
    total_monthly_income = decimal_sum(
        income_source_monthly_amount(source) for source in collections.income
    )
    total_monthly_expenses = decimal_sum(
        transaction_monthly_accrual(transaction, today)
        for transaction in collections.transactions
    )
    total_investment_value = decimal_sum(
        investment_current_value(inv) for inv in collections.investments
    )
    total_investment_income = decimal_sum(
        investment_monthly_income(inv) for inv in collections.investments
    )
    total_real_estate_value = decimal_sum(
        real_estate_current_value(prop) for prop in collections.real_estate
    )
    total_real_estate_income = decimal_sum(
        real_estate_net_monthly_income(prop)
        for prop in collections.real_estate
    )
    total_retirement_saved = decimal_sum(
        plan.total_contributed for plan in collections.retirement
    )
    total_retirement_contribution = decimal_sum(
        retirement_monthly_contribution(plan)
        for plan in collections.retirement
    )
    total_debt = decimal_sum(loan.remaining_amount for loan in collections.loans)
    total_loan_payments = decimal_sum(
        loan_monthly_payment(loan) for loan in collections.loans
    )
    total_bills = decimal_sum(
        bill_monthly_amount(bill) for bill in collections.bills
    )

    net_monthly_income = (
        total_monthly_income
        + total_investment_income
        + total_real_estate_income
        - total_monthly_expenses
        - total_loan_payments
        - total_bills
        - total_retirement_contribution
    )
    total_assets = (
        total_investment_value
        + total_real_estate_value
        + total_retirement_saved
    )
    net_worth = total_assets - total_debt

    return FinancialMetrics(
        total_monthly_income=total_monthly_income,
        total_monthly_expenses=total_monthly_expenses,
        total_investment_value=total_investment_value,
        total_investment_income=total_investment_income,
        total_real_estate_value=total_real_estate_value,
        total_real_estate_income=total_real_estate_income,
        total_retirement_saved=total_retirement_saved,
        total_retirement_contribution=total_retirement_contribution,
        total_debt=total_debt,
        total_loan_payments=total_loan_payments,
        total_bills=total_bills,
        net_monthly_income=net_monthly_income,
        total_assets=total_assets,
        net_worth=net_worth,
    )


def compute_asset_allocation(
    collections: FinancialCollections,
    level: int = 1,
) -> AssetAllocation:
    """Compute asset totals grouped by asset class or subtype.

    Args:
        collections: Validated records for every category.
        level: 1 groups by asset class; 2 groups by the record type inside
            each class and sets ``parent_category`` to the class.

    Returns:
        AssetAllocation: Non-zero totals sorted by parent then category.
    """
    totals: dict[tuple[str | None, str], Decimal] = {}

    def _add(asset_class: str, subtype: str, amount: Decimal) -> None:
        if level == 2:
            key = (asset_class, subtype)
        else:
            key = (None, asset_class)
        totals[key] = totals.get(key, Decimal("0")) + amount

    for inv in collections.investments:
        _add(ASSET_CLASS_INVESTMENTS, inv.type, investment_current_value(inv))
    for prop in collections.real_estate:
        _add(ASSET_CLASS_REAL_ESTATE, prop.type, real_estate_current_value(prop))
    for plan in collections.retirement:
        _add(ASSET_CLASS_RETIREMENT, plan.type, plan.total_contributed)

    categories = [
        AssetCategoryAmount(
            category=category,
            amount=amount,
            parent_category=parent_category,
        )
        for (parent_category, category), amount in sorted(
            totals.items(),
            key=lambda item: (item[0][0] or "", item[0][1]),
        )
        if amount != 0
    ]
    return AssetAllocation(level=level, categories=categories)


def compute_monthly_cashflow(
    collections: FinancialCollections,
    today: date,
) -> CashflowView:
    """Break the monthly cash flow down into labelled inflows and outflows.

    The summary difference equals ``FinancialMetrics.net_monthly_income``
    for the same collections and date. Items keep first-seen order.

    Args:
        collections: Validated records for every category.
        today: Reference date for current-month expense accrual.

    Returns:
        CashflowView: Summary totals and detailed inflow/outflow items.
    """
    incoming: dict[str, Decimal] = {}
    outgoing: dict[str, Decimal] = {}

    def _accumulate(bucket: dict[str, Decimal], label: str, amount) -> None:
        if amount == 0:
            return
        bucket[label] = bucket.get(label, Decimal("0")) + amount

    for source in collections.income:
        _accumulate(
            incoming,
            _label("Income", source.category),
            income_source_monthly_amount(source),
        )
    for inv in collections.investments:
        _accumulate(
            incoming,
            _label("Investments", inv.type),
            investment_monthly_income(inv),
        )
    for prop in collections.real_estate:
        net = real_estate_net_monthly_income(prop)
        if net > 0:
            _accumulate(incoming, _label("Real estate", prop.type), net)
        else:
            _accumulate(outgoing, _label("Real estate", prop.type), -net)
    for transaction in collections.transactions:
        _accumulate(
            outgoing,
            _label("Expenses", transaction.category),
            transaction_monthly_accrual(transaction, today),
        )
    for loan in collections.loans:
        _accumulate(
            outgoing,
            _label("Loans", loan.bank),
            loan_monthly_payment(loan),
        )
    for bill in collections.bills:
        _accumulate(
            outgoing,
            _label("Bills", bill.category),
            bill_monthly_amount(bill),
        )
    for plan in collections.retirement:
        _accumulate(
            outgoing,
            _label("Retirement", plan.name),
            retirement_monthly_contribution(plan),
        )

    incoming_items = [
        CashflowItem(label=label, amount=amount)
        for label, amount in incoming.items()
    ]
    outgoing_items = [
        CashflowItem(label=label, amount=amount)
        for label, amount in outgoing.items()
    ]
    summary = CashflowSummary(
        total_in=decimal_sum(item.amount for item in incoming_items),
        total_out=decimal_sum(item.amount for item in outgoing_items),
    )
    return CashflowView(
        summary=summary,
        incoming=incoming_items,
        outgoing=outgoing_items,
    )


def _label(group: str, detail: str | None) -> str:
    cleaned = (detail or "").strip()
    return f"{group}:{cleaned}" if cleaned else group


__all__ = [
    "compute_metrics",
    "compute_asset_allocation",
    "compute_monthly_cashflow",
]
