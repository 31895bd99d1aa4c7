"""Main Gradio dashboard application."""

from pathlib import Path

import gradio as gr
import structlog

from flaretvl.config import Settings, get_settings
from flaretvl.core.refresh import RefreshLoop
from flaretvl.ui.pages import home

log = structlog.get_logger(__name__)

CSS_PATH = Path(__file__).parent / "css" / "dashboard.css"


def create_dashboard(refresh_loop: RefreshLoop, settings: Settings | None = None) -> gr.Blocks:
    """Create the Flare TVL dashboard.

    Args:
        refresh_loop: Loop whose state the page displays.
        settings: Application settings (default: cached settings).

    Returns:
        Gradio Blocks application.
    """
    settings = settings or get_settings()

    custom_css = ""
    if CSS_PATH.exists():
        custom_css = CSS_PATH.read_text()
        log.debug("dashboard_css_loaded", path=str(CSS_PATH))

    with gr.Blocks(title=settings.app_name) as app:
        pass

    # Gradio 6 takes theme and CSS as properties, not constructor arguments
    app.theme = gr.themes.Soft(primary_hue="blue", neutral_hue="slate")
    app.css = custom_css

    with app:
        home.render(app, refresh_loop, settings)

    log.info("dashboard_created", poll_seconds=settings.ui_poll_seconds)

    return app
