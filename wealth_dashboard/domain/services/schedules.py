"""Date helpers for bills and loans."""

import calendar
from datetime import date
from decimal import Decimal
import math

from wealth_dashboard.domain.models.records import Bill, LoanOrDebt


def days_until(target: date, today: date) -> int:
    """Return the number of days from ``today`` to ``target`` (negative if past)."""
    return (target - today).days


def loan_remaining_months(loan: LoanOrDebt, today: date) -> int:
    """Return the months left until the loan end date.

    Months are counted as 30-day blocks, rounded up and floored at zero.
    """
    remaining_days = days_until(loan.end_date, today)
    return max(0, math.ceil(remaining_days / 30))


def loan_paid_off_percentage(loan: LoanOrDebt) -> Decimal:
    """Return the share of the principal already repaid, in percent."""
    if loan.amount == 0:
        return Decimal("0")
    return (loan.amount - loan.remaining_amount) / loan.amount * Decimal("100")


def next_bill_due_date(due_day: int, today: date) -> date:
    """Return the next due date for a bill due on ``due_day`` each month.

    The due date falls in the current month when it is still ahead of
    ``today``, otherwise in the next month. Days past the end of a short
    month are clamped to its last day.
    """
    candidate = _clamped_date(today.year, today.month, due_day)
    if candidate > today:
        return candidate
    year, month = _next_month(today.year, today.month)
    return _clamped_date(year, month, due_day)


def mark_bill_paid(bill: Bill, today: date) -> Bill:
    """Return a copy of ``bill`` paid today and due next month."""
    year, month = _next_month(today.year, today.month)
    return bill.model_copy(
        update={
            "last_paid": today,
            "next_due": _clamped_date(year, month, bill.due_day),
        }
    )


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def _clamped_date(year: int, month: int, day: int) -> date:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


__all__ = [
    "days_until",
    "loan_remaining_months",
    "loan_paid_off_percentage",
    "next_bill_due_date",
    "mark_bill_paid",
]
