"""Page chrome: header, footer and loading view."""

from html import escape


def render_header_html(title: str, data_as_of: str) -> str:
    """Render the dashboard header.

    Args:
        title: Dashboard title.
        data_as_of: Date label of the placeholder figures.

    Returns:
        HTML string for the header.
    """
    return f"""
    <header id="tvl-header">
        <h1>{escape(title)}</h1>
        <p>Data as of {escape(data_as_of)} | Powered by DeFiLlama</p>
    </header>
    """


def render_loading_html(title: str = "Flare TVL") -> str:
    """Render the placeholder shown before the first snapshot."""
    return f'<div id="tvl-loading">Loading {escape(title)} Data...</div>'


def render_footer_html() -> str:
    """Render the footer."""
    return '<footer id="tvl-footer">Built with Gradio &amp; Plotly | Data from DeFiLlama</footer>'
