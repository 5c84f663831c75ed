"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
import json

import streamlit as st
import altair as alt
from pydantic import ValidationError

from wealth_dashboard.application.ports.record_store import RecordStorePort
from wealth_dashboard.application.use_cases.get_asset_allocation import (
    AssetAllocation,
    GetAssetAllocationUseCase,
)
from wealth_dashboard.application.use_cases.get_category_summaries import (
    CategorySummaries,
    GetCategorySummariesUseCase,
)
from wealth_dashboard.application.use_cases.get_monthly_cashflow import (
    GetMonthlyCashflowUseCase,
)
from wealth_dashboard.application.use_cases.manage_records import (
    ManageRecordsUseCase,
    RecordNotFoundError,
)
from wealth_dashboard.application.use_cases.watch_financial_metrics import (
    FinancialMetricsMonitor,
)
from wealth_dashboard.adapters.interface.streamlit.sankey_cashflow import (
    SankeyOptions,
    build_plotly_figure,
    build_sankey_model,
)
from wealth_dashboard.domain.constants import COLLECTION_KEYS
from wealth_dashboard.domain.models import (
    Bill,
    FinancialMetrics,
    FinancialRecord,
    LoanOrDebt,
    Transaction,
)
from wealth_dashboard.domain.services.schedules import (
    days_until,
    loan_paid_off_percentage,
    loan_remaining_months,
    mark_bill_paid,
    next_bill_due_date,
)
from wealth_dashboard.infrastructure.container import (
    build_metrics_monitor,
    build_record_store,
)
from wealth_dashboard.infrastructure.logging.logger import get_usage_logger
from wealth_dashboard.infrastructure.record_store import SqlAlchemyRecordStore

COLLECTION_LABELS = {
    "transactions": "Transactions",
    "income": "Income",
    "investments": "Investments",
    "realEstate": "Real estate",
    "retirement": "Retirement",
    "loans": "Loans",
    "bills": "Bills",
}


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy/pandas are usable for Altair charts."""
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, (
            "numpy is installed but incomplete (missing ndarray). "
            "Reinstall numpy to render charts."
        )
    if not hasattr(pandas, "Timestamp"):
        return False, (
            "pandas is installed but incomplete (missing Timestamp). "
            "Reinstall pandas to render charts."
        )
    return True, None


@st.cache_resource(show_spinner=False)
def _get_record_store() -> RecordStorePort:
    """Return the record store shared by every Streamlit session."""
    return build_record_store()


@st.cache_resource(show_spinner=False)
def _get_metrics_monitor() -> FinancialMetricsMonitor:
    """Return the activated metrics monitor bound to the shared store."""
    monitor = build_metrics_monitor(_get_record_store())
    monitor.activate()
    return monitor


def _current_metrics() -> FinancialMetrics:
    """Return the live snapshot, picking up writes from other processes."""
    store = _get_record_store()
    monitor = _get_metrics_monitor()
    if isinstance(store, SqlAlchemyRecordStore):
        store.poll_external_changes()
    return monitor.snapshot


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"$ {value:,.2f}"


def _format_monthly(value: Decimal) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f} / month"


def _render_metric_cards(metrics: FinancialMetrics) -> None:
    """Render headline and per-category metric cards."""
    net_worth_col, inflow_col, outflow_col, net_col = st.columns(4)
    net_worth_col.metric("Net Worth", _format_currency(metrics.net_worth))
    inflow_col.metric(
        "Monthly Income",
        _format_currency(metrics.total_monthly_inflows),
    )
    outflow_col.metric(
        "Monthly Spending",
        _format_currency(metrics.total_monthly_outflows),
    )
    net_col.metric(
        "Monthly Balance",
        _format_currency(metrics.net_monthly_income),
    )

    inv_col, re_col, ret_col, debt_col = st.columns(4)
    inv_col.metric(
        "Investments",
        _format_currency(metrics.total_investment_value),
        _format_monthly(metrics.total_investment_income),
    )
    re_col.metric(
        "Real Estate",
        _format_currency(metrics.total_real_estate_value),
        _format_monthly(metrics.total_real_estate_income),
    )
    ret_col.metric(
        "Retirement",
        _format_currency(metrics.total_retirement_saved),
        _format_monthly(metrics.total_retirement_contribution),
        delta_color="off",
    )
    debt_col.metric(
        "Debt",
        _format_currency(metrics.total_debt),
        _format_monthly(-metrics.total_loan_payments),
        delta_color="inverse",
    )


def _prepare_donut_chart_data(
    allocation: AssetAllocation,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        allocation: Aggregated asset totals by category.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Altair-ready chart rows.
    """
    sorted_items = sorted(
        allocation.categories,
        key=lambda item: item.amount,
        reverse=True,
    )
    rows = [(item.category, item.amount) for item in sorted_items]
    top_rows = rows[:max_categories]
    other_amount = sum(
        (amount for _, amount in rows[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_rows.append(("Other", other_amount))
    total_amount = allocation.total
    data: list[dict[str, str | float]] = []
    for category, amount in top_rows:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_allocation_chart(
    allocation: AssetAllocation,
    title: str,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of asset amounts by category."""
    st.subheader(title)
    if not allocation.categories:
        st.info("No assets recorded yet.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return

    data = _prepare_donut_chart_data(allocation)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=110,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                range=list(
                    palette
                    or [
                        "#1b9aaa",
                        "#2e7d32",
                        "#f4a261",
                        "#e76f51",
                        "#457b9d",
                        "#f6c453",
                        "#a0c4ff",
                    ]
                )
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=320, height=320)
    st.altair_chart(chart, width="stretch")


def _render_dashboard(store: RecordStorePort, today: date) -> None:
    metrics = _current_metrics()
    _render_metric_cards(metrics)

    level = st.radio(
        "Allocation detail",
        options=[1, 2],
        format_func=lambda value: "Asset class" if value == 1 else "Asset type",
        horizontal=True,
    )
    allocation = GetAssetAllocationUseCase(store).execute(level=level)
    chart_col, flow_col = st.columns(2)
    with chart_col:
        _render_allocation_chart(allocation, "Asset Allocation")
    with flow_col:
        st.subheader("Monthly Cash Flow")
        view = GetMonthlyCashflowUseCase(store).execute(today=today)
        if not view.incoming and not view.outgoing:
            st.info("No recurring cash flow recorded yet.")
            return
        model = build_sankey_model(
            view,
            SankeyOptions(allow_negative_diff=True),
        )
        st.plotly_chart(build_plotly_figure(model), width="stretch")


def _render_summary(key: str, summaries: CategorySummaries) -> None:
    """Render the summary cards for one collection."""
    if key == "income":
        summary = summaries.income
        cols = st.columns(3)
        cols[0].metric("Monthly total", _format_currency(summary.monthly_total))
        cols[1].metric("Active sources", summary.active_count)
        cols[2].metric(
            "Next payment",
            summary.next_payment.isoformat() if summary.next_payment else "n/a",
        )
    elif key == "investments":
        summary = summaries.investments
        cols = st.columns(4)
        cols[0].metric("Invested", _format_currency(summary.total_invested))
        cols[1].metric("Current value", _format_currency(summary.current_value))
        cols[2].metric(
            "Return",
            _format_currency(summary.total_return),
            f"{summary.return_percentage:.2f}%",
        )
        cols[3].metric("Monthly income", _format_currency(summary.monthly_income))
    elif key == "realEstate":
        summary = summaries.real_estate
        cols = st.columns(4)
        cols[0].metric("Invested", _format_currency(summary.total_invested))
        cols[1].metric("Current value", _format_currency(summary.current_value))
        cols[2].metric("Monthly rent", _format_currency(summary.monthly_rent))
        cols[3].metric(
            "Net monthly income",
            _format_currency(summary.net_monthly_income),
        )
    elif key == "retirement":
        summary = summaries.retirement
        cols = st.columns(3)
        cols[0].metric(
            "Monthly contribution",
            _format_currency(summary.monthly_contribution),
        )
        cols[1].metric(
            "Total contributed",
            _format_currency(summary.total_contributed),
        )
        cols[2].metric(
            "Expected return",
            _format_currency(summary.expected_monthly_return),
        )
    elif key == "loans":
        summary = summaries.loans
        cols = st.columns(3)
        cols[0].metric("Total debt", _format_currency(summary.total_debt))
        cols[1].metric(
            "Monthly payment",
            _format_currency(summary.monthly_payment),
        )
        cols[2].metric(
            "Average rate",
            f"{summary.average_interest_rate:.2f}% / month",
        )
    elif key == "bills":
        summary = summaries.bills
        cols = st.columns(2)
        cols[0].metric(
            "Recurring monthly",
            _format_currency(summary.recurring_monthly_total),
        )
        cols[1].metric("Active bills", summary.active_count)
        for bill in summary.overdue:
            st.warning(f"{bill.name} was due on {bill.next_due.isoformat()}")


def _with_bill_defaults(data, today: date):
    """Fill ``nextDue`` from ``dueDay`` when a new bill leaves it out."""
    if not isinstance(data, dict):
        return data
    if "nextDue" in data or "next_due" in data:
        return data
    due_day = data.get("dueDay", data.get("due_day"))
    if not isinstance(due_day, int) or not 1 <= due_day <= 31:
        return data
    return {**data, "nextDue": next_bill_due_date(due_day, today)}


def _filter_transactions(
    transactions: Sequence[Transaction],
    kind: str,
    query: str,
) -> list[Transaction]:
    """Filter transactions by type and a description/category search."""
    needle = query.strip().lower()
    return [
        item
        for item in transactions
        if (kind == "all" or item.kind == kind)
        and (
            not needle
            or needle in item.description.lower()
            or needle in item.category.lower()
        )
    ]


def _record_rows(
    records: Sequence[FinancialRecord],
    today: date,
) -> list[dict]:
    """Return table rows, with schedule columns for bills and loans."""
    rows = []
    for record in records:
        row = record.model_dump(mode="json")
        if isinstance(record, LoanOrDebt):
            row["monthsRemaining"] = loan_remaining_months(record, today)
            row["paidOff"] = f"{loan_paid_off_percentage(record):.1f}%"
            row["dueInDays"] = days_until(record.due_date, today)
        elif isinstance(record, Bill):
            row["dueInDays"] = days_until(record.next_due, today)
        rows.append(row)
    return rows


def _render_mark_paid(
    manager: ManageRecordsUseCase,
    bills: Sequence[Bill],
    today: date,
) -> None:
    """Render the control that marks a bill as paid today."""
    active = [bill for bill in bills if bill.is_active]
    if not active:
        return
    bill_id = st.selectbox(
        "Mark bill paid",
        [bill.id for bill in active],
        format_func=lambda value: next(
            bill.name for bill in active if bill.id == value
        ),
    )
    if st.button("Mark paid"):
        bill = next(bill for bill in active if bill.id == bill_id)
        paid = mark_bill_paid(bill, today)
        manager.update(
            bill.id,
            {"last_paid": paid.last_paid, "next_due": paid.next_due},
        )
        get_usage_logger().info(f"paid bills:{bill.id}")
        st.rerun()


def _render_records(store: RecordStorePort, today: date) -> None:
    """Render one collection with its summary and edit controls."""
    key = st.sidebar.selectbox(
        "Collection",
        list(COLLECTION_KEYS),
        format_func=lambda value: COLLECTION_LABELS.get(value, value),
    )
    st.subheader(COLLECTION_LABELS.get(key, key))
    summaries = GetCategorySummariesUseCase(store).execute(today=today)
    _render_summary(key, summaries)

    manager = ManageRecordsUseCase(store, key)
    records = manager.list_records()
    if key == "transactions":
        type_col, search_col = st.columns(2)
        kind = type_col.selectbox("Type", ["all", "income", "expense"])
        query = search_col.text_input("Search description or category")
        records = _filter_transactions(records, kind, query)
    st.caption(f"{len(records)} records")
    if records:
        st.dataframe(
            _record_rows(records, today),
            width="stretch",
            hide_index=True,
        )
        if key == "bills":
            _render_mark_paid(manager, records, today)
        record_id = st.selectbox(
            "Delete record",
            [record.id for record in records],
        )
        if st.button("Delete"):
            try:
                manager.delete(record_id)
            except RecordNotFoundError as exc:
                st.error(str(exc))
            else:
                get_usage_logger().info(f"deleted {key}:{record_id}")
                st.rerun()

    with st.form(f"add-{key}"):
        raw = st.text_area("New record (JSON object)", height=160)
        submitted = st.form_submit_button("Add")
    if submitted:
        try:
            data = json.loads(raw)
            if key == "bills":
                data = _with_bill_defaults(data, today)
            record = manager.add(data)
        except (ValueError, ValidationError) as exc:
            st.error(f"Invalid record: {exc}")
        else:
            get_usage_logger().info(f"added {key}:{record.id}")
            st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wealth Dashboard", layout="wide")
    st.title("Wealth Dashboard")

    page = st.sidebar.selectbox("Page", ["Dashboard", "Records"])
    get_usage_logger().info(f"page={page}")
    store = _get_record_store()
    today = date.today()

    if page == "Dashboard":
        _render_dashboard(store, today)
    else:
        _render_records(store, today)


if __name__ == "__main__":  # pragma: no cover
    main()
