"""Home page for the Flare TVL dashboard.

Shows a loading view until the refresh loop holds its first snapshot, then
the header, metrics cards, breakdown table and charts. A ``gr.Timer``
re-renders the page from the loop's state; rendering never triggers a fetch.
"""

from dataclasses import dataclass
from typing import Any

import gradio as gr
import pandas as pd
import plotly.graph_objects as go
import structlog

from flaretvl.config.settings import Settings
from flaretvl.core.refresh import DashboardState, RefreshLoop
from flaretvl.ui.components import (
    BREAKDOWN_COLUMNS,
    create_distribution_chart,
    create_protocol_chart,
    create_trend_chart,
    render_footer_html,
    render_header_html,
    render_loading_html,
    render_metrics_html,
    snapshot_to_dataframe,
)

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Everything the page displays for one state."""

    loading: bool
    header_html: str
    metrics_html: str
    table: pd.DataFrame
    trend_chart: go.Figure
    distribution_chart: go.Figure
    protocol_chart: go.Figure
    status_text: str


def format_status(state: DashboardState) -> str:
    """Describe when the data was last refreshed."""
    if state.refreshed_at is None:
        return "Waiting for first refresh..."
    return (
        f"Last refreshed {state.refreshed_at.strftime('%Y-%m-%d %H:%M:%S')} UTC"
        f" · refresh #{state.refresh_count}"
    )


def render_dashboard(state: DashboardState, settings: Settings) -> DashboardView:
    """Render the page for a state. Pure: reads its arguments only."""
    snapshot = state.snapshot
    return DashboardView(
        loading=state.loading,
        header_html=render_header_html(settings.app_name, settings.data_as_of),
        metrics_html=render_metrics_html(
            snapshot,
            featured_symbol=settings.featured_asset,
            change_label=settings.change_24h_label,
            reference_label=settings.reference_asset_label,
        ),
        table=snapshot_to_dataframe(snapshot),
        trend_chart=create_trend_chart(snapshot),
        distribution_chart=create_distribution_chart(snapshot),
        protocol_chart=create_protocol_chart(snapshot),
        status_text=format_status(state),
    )


def _to_updates(view: DashboardView) -> tuple[Any, ...]:
    """Map a view onto the page's output components, in wiring order."""
    return (
        gr.update(visible=view.loading),
        gr.update(visible=not view.loading),
        view.header_html,
        view.metrics_html,
        view.table,
        view.trend_chart,
        view.distribution_chart,
        view.protocol_chart,
        view.status_text,
    )


def render(app: gr.Blocks, refresh_loop: RefreshLoop, settings: Settings) -> None:
    """Render the home page content and wire its refresh timer.

    Args:
        app: Enclosing Blocks, used for the page-load event.
        refresh_loop: Owner of the state being displayed.
        settings: Application settings.
    """

    def _update() -> tuple[Any, ...]:
        return _to_updates(render_dashboard(refresh_loop.state, settings))

    with gr.Column(visible=True, elem_id="tvl-loading-view") as loading_view:
        gr.HTML(render_loading_html())

    with gr.Column(visible=False, elem_id="tvl-content") as content_view:
        header = gr.HTML(elem_id="tvl-header-block")
        metrics = gr.HTML(elem_id="tvl-metrics-block")

        gr.Markdown("## Asset Breakdown")
        table = gr.Dataframe(
            headers=BREAKDOWN_COLUMNS,
            datatype=["str", "str", "str", "str"],
            interactive=False,
            elem_id="tvl-breakdown",
        )

        with gr.Row():
            trend_chart = gr.Plot(label="TVL Trend")
            distribution_chart = gr.Plot(label="Asset Distribution")

        protocol_chart = gr.Plot(label="Protocol Breakdown")
        status = gr.Markdown(elem_id="tvl-status")
        gr.HTML(render_footer_html())

    outputs = [
        loading_view,
        content_view,
        header,
        metrics,
        table,
        trend_chart,
        distribution_chart,
        protocol_chart,
        status,
    ]

    timer = gr.Timer(value=settings.ui_poll_seconds)
    timer.tick(fn=_update, outputs=outputs, show_progress="hidden")
    app.load(fn=_update, outputs=outputs)

    log.debug("home_page_rendered", poll_seconds=settings.ui_poll_seconds)
