"""Tests for the cashflow Sankey presentation module."""

from decimal import Decimal

from wealth_dashboard.adapters.interface.streamlit.sankey_cashflow import (
    DEFICIT_LABEL,
    MIDDLE_LABEL,
    SAVINGS_LABEL,
    SankeyOptions,
    build_plotly_figure,
    build_sankey_model,
    level_key,
    parse_label_path,
)
from wealth_dashboard.domain.models.finance import (
    CashflowItem, CashflowSummary, CashflowView
)


def _view(
    *,
    incoming: list[CashflowItem],
    outgoing: list[CashflowItem],
) -> CashflowView:
    return CashflowView(
        summary=CashflowSummary(
            total_in=sum((item.amount for item in incoming), Decimal("0")),
            total_out=sum((item.amount for item in outgoing), Decimal("0")),
        ),
        incoming=incoming,
        outgoing=outgoing,
    )


def test_parse_label_path_and_level_key():
    parts = parse_label_path("Expenses: Food ")
    assert parts == ["Expenses", "Food"]
    assert level_key(parts, 1) == "Expenses"
    assert level_key(parts, 2) == "Expenses:Food"
    assert level_key(parts, 99) == "Expenses:Food"
    assert level_key([], 2) == ""


def test_same_group_on_both_sides_keeps_distinct_keys():
    view = _view(
        incoming=[
            CashflowItem(label="Real estate:commercial", amount=Decimal("5")),
        ],
        outgoing=[
            CashflowItem(label="Real estate:land", amount=Decimal("5")),
        ],
    )

    model = build_sankey_model(view, SankeyOptions(left_level=1, right_level=1))

    assert model.node_labels.count("Real estate") == 2
    assert "L:Real estate" in model.node_keys
    assert "R:Real estate" in model.node_keys


def test_level_one_groups_outgoing_in_first_seen_order():
    view = _view(
        incoming=[],
        outgoing=[
            CashflowItem(label="Loans:Bank A", amount=Decimal("50")),
            CashflowItem(label="Bills:Utilities", amount=Decimal("20")),
            CashflowItem(label="Loans:Bank B", amount=Decimal("30")),
        ],
    )

    model = build_sankey_model(view, SankeyOptions(right_level=1))

    assert model.node_labels == [MIDDLE_LABEL, "Loans", "Bills"]
    loans_index = model.node_labels.index("Loans")
    assert any(
        link.target == loans_index and link.value == Decimal("80")
        for link in model.links
    )


def test_positive_difference_adds_savings_node_and_link():
    view = _view(
        incoming=[CashflowItem(label="Income:Salary", amount=Decimal("100"))],
        outgoing=[CashflowItem(label="Expenses:Food", amount=Decimal("80"))],
    )

    model = build_sankey_model(view)

    savings_index = model.node_labels.index(SAVINGS_LABEL)
    middle_index = model.node_labels.index(MIDDLE_LABEL)
    assert any(
        link.source == middle_index
        and link.target == savings_index
        and link.value == Decimal("20")
        for link in model.links
    )


def test_negative_difference_deficit_link_only_when_allowed():
    view = _view(
        incoming=[CashflowItem(label="Income:Salary", amount=Decimal("80"))],
        outgoing=[CashflowItem(label="Expenses:Food", amount=Decimal("100"))],
    )

    model_no_deficit = build_sankey_model(view)
    assert DEFICIT_LABEL not in model_no_deficit.node_labels
    assert SAVINGS_LABEL not in model_no_deficit.node_labels

    model_with_deficit = build_sankey_model(
        view,
        SankeyOptions(allow_negative_diff=True),
    )
    deficit_index = model_with_deficit.node_labels.index(DEFICIT_LABEL)
    middle_index = model_with_deficit.node_labels.index(MIDDLE_LABEL)
    assert any(
        link.source == deficit_index
        and link.target == middle_index
        and link.value == Decimal("20")
        for link in model_with_deficit.links
    )


def test_build_plotly_figure_places_sides():
    view = _view(
        incoming=[CashflowItem(label="Income:Salary", amount=Decimal("100"))],
        outgoing=[CashflowItem(label="Expenses:Food", amount=Decimal("60"))],
    )

    figure = build_plotly_figure(build_sankey_model(view))

    sankey = figure.data[0]
    assert list(sankey.node.label) == [
        "Income:Salary",
        MIDDLE_LABEL,
        "Expenses:Food",
        SAVINGS_LABEL,
    ]
    assert list(sankey.node.x) == [0.02, 0.5, 0.98, 0.98]
    assert list(sankey.link.value) == [100.0, 60.0, 40.0]
