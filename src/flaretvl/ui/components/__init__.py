"""UI component modules."""

from flaretvl.ui.components.breakdown_table import (
    BREAKDOWN_COLUMNS,
    breakdown_rows,
    snapshot_to_dataframe,
)
from flaretvl.ui.components.charts import (
    create_distribution_chart,
    create_protocol_chart,
    create_trend_chart,
)
from flaretvl.ui.components.formatting import format_millions, format_price
from flaretvl.ui.components.header import (
    render_footer_html,
    render_header_html,
    render_loading_html,
)
from flaretvl.ui.components.metrics_cards import render_metrics_html

__all__ = [
    # breakdown_table
    "BREAKDOWN_COLUMNS",
    "breakdown_rows",
    "snapshot_to_dataframe",
    # charts
    "create_distribution_chart",
    "create_protocol_chart",
    "create_trend_chart",
    # formatting
    "format_millions",
    "format_price",
    # header
    "render_footer_html",
    "render_header_html",
    "render_loading_html",
    # metrics_cards
    "render_metrics_html",
]
