"""Plotly charts: TVL trend, asset distribution and protocol breakdown."""

from collections.abc import Sequence
from itertools import cycle, islice

import plotly.graph_objects as go

from flaretvl.constants.assets import (
    DISTRIBUTION_COLORS,
    TREND_CURRENT_LABEL,
    TREND_HISTORY_MILLIONS,
)
from flaretvl.core.tvl.models import Snapshot

TREND_COLOR = "rgb(59, 130, 246)"
TREND_FILL = "rgba(59, 130, 246, 0.1)"


def _apply_layout(fig: go.Figure, title: str) -> go.Figure:
    fig.update_layout(
        title=title,
        template="plotly_dark",
        legend={"orientation": "h", "yanchor": "bottom", "y": 1.02},
        margin={"l": 40, "r": 20, "t": 60, "b": 40},
    )
    return fig


def create_trend_chart(
    snapshot: Snapshot,
    history: Sequence[tuple[str, float]] = TREND_HISTORY_MILLIONS,
    current_label: str = TREND_CURRENT_LABEL,
) -> go.Figure:
    """Create the TVL trend line.

    Args:
        snapshot: Current snapshot; its total becomes the last point.
        history: Fixed (label, value in $M) points preceding the current one.
        current_label: Label of the current point.

    Returns:
        Plotly figure with one line trace.
    """
    labels = [label for label, _ in history] + [current_label]
    values = [value for _, value in history] + [snapshot.total_locked_value_usd / 1e6]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=labels,
            y=values,
            mode="lines+markers",
            name="Flare TVL ($M)",
            line={"color": TREND_COLOR, "width": 2, "shape": "spline", "smoothing": 0.1},
            fill="tozeroy",
            fillcolor=TREND_FILL,
            hovertemplate="<b>%{x}</b><br>TVL: $%{y:.2f}M<extra></extra>",
        )
    )
    fig.update_yaxes(title_text="TVL ($M)")
    return _apply_layout(fig, "TVL Trend")


def create_distribution_chart(snapshot: Snapshot) -> go.Figure:
    """Create the asset distribution pie keyed by locked value.

    Returns:
        Plotly figure; empty when the snapshot has no assets.
    """
    fig = go.Figure()
    if snapshot.is_empty:
        return _apply_layout(fig, "Asset Distribution")

    symbols = list(snapshot.assets)
    values = [entry.locked_value_usd for entry in snapshot.assets.values()]
    colors = list(islice(cycle(DISTRIBUTION_COLORS), len(symbols)))

    fig.add_trace(
        go.Pie(
            labels=symbols,
            values=values,
            marker={"colors": colors},
            sort=False,
            hovertemplate="<b>%{label}</b><br>$%{value:,.0f}<br>%{percent}<extra></extra>",
        )
    )
    return _apply_layout(fig, "Asset Distribution")


def create_protocol_chart(snapshot: Snapshot) -> go.Figure:
    """Create the per-protocol TVL bar chart."""
    fig = go.Figure()
    if not snapshot.protocols:
        return _apply_layout(fig, "Protocol Breakdown")

    fig.add_trace(
        go.Bar(
            x=[p.name for p in snapshot.protocols],
            y=[p.locked_value_usd / 1e6 for p in snapshot.protocols],
            name="TVL ($M)",
            marker_color="rgb(16, 185, 129)",
            hovertemplate="<b>%{x}</b><br>TVL: $%{y:.2f}M<extra></extra>",
        )
    )
    fig.update_yaxes(title_text="TVL ($M)")
    return _apply_layout(fig, "Protocol Breakdown")
