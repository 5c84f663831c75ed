"""Monthly cash flow Sankey presentation logic for the Streamlit UI.

This module contains pure, testable transformations from a ``CashflowView``
produced by ``GetMonthlyCashflowUseCase`` to a Sankey model and Plotly
figure.

The Sankey layout is fixed to three columns:
    Inflows -> Monthly budget -> Outflows
with optional nodes for the difference:
    - ``Savings`` when the monthly difference is positive,
    - ``Deficit`` (optional) when the difference is negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal
from typing import TYPE_CHECKING

from wealth_dashboard.domain.models.finance import CashflowItem, CashflowView

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


LEFT_PREFIX = "L:"
MIDDLE_PREFIX = "M:"
RIGHT_PREFIX = "R:"

MIDDLE_LABEL = "Monthly budget"
SAVINGS_LABEL = "Savings"
DEFICIT_LABEL = "Deficit"

MIDDLE_KEY = f"{MIDDLE_PREFIX}BUDGET"
SAVINGS_KEY = f"{RIGHT_PREFIX}SAVINGS"
DEFICIT_KEY = f"{LEFT_PREFIX}DEFICIT"

Side = Literal["L", "M", "R"]


@dataclass(frozen=True)
class SankeyOptions:
    """Grouping options for the cash flow Sankey.

    Attributes:
        left_level: 1 groups inflows by source group (e.g. ``Income``),
            2 shows each detail (e.g. ``Income:Salary``).
        right_level: Same for outflows.
        allow_negative_diff: If true, show a ``Deficit`` node for negative
            differences and link it into the middle node.
    """

    left_level: int = 2
    right_level: int = 2
    allow_negative_diff: bool = False


@dataclass(frozen=True)
class SankeyLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class SankeyModel:
    """Model used by the UI to render a Sankey with stable indices."""

    node_labels: list[str]
    node_keys: list[str]
    links: list[SankeyLink]
    side_by_key: dict[str, Side]


def parse_label_path(label: str) -> list[str]:
    """Split a ``Group:Detail`` cash flow label into parts.

    Args:
        label: Cash flow item label.

    Returns:
        List of non-empty path parts.
    """
    parts = [part.strip() for part in label.split(":")]
    return [part for part in parts if part]


def level_key(parts: list[str], n: int) -> str:
    """Return the path key for a given depth.

    Args:
        parts: Path parts (already split).
        n: Desired depth (1-based).

    Returns:
        Joined key up to depth ``n`` (clamped).
    """
    if not parts:
        return ""
    depth = max(1, min(n, len(parts)))
    return ":".join(parts[:depth])


def _group_items(
    items: list[CashflowItem],
    level: int,
) -> list[tuple[str, Decimal]]:
    order: list[str] = []
    totals: dict[str, Decimal] = {}
    for item in items:
        group = level_key(parse_label_path(item.label), level)
        if not group or item.amount <= 0:
            continue
        if group not in totals:
            order.append(group)
            totals[group] = item.amount
        else:
            totals[group] += item.amount
    return [(group, totals[group]) for group in order]


def build_sankey_model(
    view: CashflowView,
    options: SankeyOptions | None = None,
) -> SankeyModel:
    """Build a stable Sankey model from a cash flow view.

    Args:
        view: Cash flow view produced by the use case.
        options: Grouping options; defaults to detail level on both sides.

    Returns:
        SankeyModel: Nodes and links ready for plotting.
    """
    resolved = options or SankeyOptions()
    incoming = _group_items(view.incoming, resolved.left_level)
    outgoing = _group_items(view.outgoing, resolved.right_level)

    node_labels: list[str] = []
    node_keys: list[str] = []
    side_by_key: dict[str, Side] = {}

    def _add_node(key: str, label: str, side: Side) -> int:
        if key in side_by_key:
            return node_keys.index(key)
        node_keys.append(key)
        node_labels.append(label)
        side_by_key[key] = side
        return len(node_keys) - 1

    left_indices = [
        _add_node(f"{LEFT_PREFIX}{group}", group, "L") for group, _ in incoming
    ]
    middle_index = _add_node(MIDDLE_KEY, MIDDLE_LABEL, "M")
    right_indices = [
        _add_node(f"{RIGHT_PREFIX}{group}", group, "R") for group, _ in outgoing
    ]

    links: list[SankeyLink] = [
        SankeyLink(source=index, target=middle_index, value=amount)
        for index, (_, amount) in zip(left_indices, incoming)
    ]
    links.extend(
        SankeyLink(source=middle_index, target=index, value=amount)
        for index, (_, amount) in zip(right_indices, outgoing)
    )

    diff = view.summary.difference
    if diff > 0:
        savings_index = _add_node(SAVINGS_KEY, SAVINGS_LABEL, "R")
        links.append(
            SankeyLink(source=middle_index, target=savings_index, value=diff)
        )
    if diff < 0 and resolved.allow_negative_diff:
        deficit_index = _add_node(DEFICIT_KEY, DEFICIT_LABEL, "L")
        links.append(
            SankeyLink(
                source=deficit_index,
                target=middle_index,
                value=abs(diff),
            )
        )

    return SankeyModel(
        node_labels=node_labels,
        node_keys=node_keys,
        links=links,
        side_by_key=side_by_key,
    )


def build_plotly_figure(model: SankeyModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a Sankey model.

    Args:
        model: Precomputed Sankey model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    left_count = sum(1 for side in model.side_by_key.values() if side == "L")
    right_count = sum(1 for side in model.side_by_key.values() if side == "R")

    node_x: list[float] = []
    node_y: list[float] = []
    left_seen = 0
    right_seen = 0
    for key in model.node_keys:
        side = model.side_by_key.get(key, "M")
        if side == "L":
            node_x.append(0.02)
            node_y.append((left_seen + 1) / (left_count + 1))
            left_seen += 1
        elif side == "R":
            node_x.append(0.98)
            node_y.append((right_seen + 1) / (right_count + 1))
            right_seen += 1
        else:
            node_x.append(0.5)
            node_y.append(0.5)

    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    x=node_x,
                    y=node_y,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=[link.source for link in model.links],
                    target=[link.target for link in model.links],
                    value=[float(link.value) for link in model.links],
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=520,
    )
    return fig


__all__ = [
    "SankeyOptions",
    "SankeyLink",
    "SankeyModel",
    "parse_label_path",
    "level_key",
    "build_sankey_model",
    "build_plotly_figure",
]
