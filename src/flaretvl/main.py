"""Flare TVL Dashboard - Main application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import gradio as gr
import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from flaretvl.api.routes import health
from flaretvl.config import Settings, get_settings
from flaretvl.config.logging import configure_logging
from flaretvl.core.refresh import RefreshLoop
from flaretvl.core.tvl.asset_table import load_asset_table
from flaretvl.services.coingecko import CoinGeckoClient
from flaretvl.services.pricing import ReferencePriceFetcher
from flaretvl.services.snapshot_service import SnapshotService
from flaretvl.ui.app import create_dashboard

log = structlog.get_logger()

DASHBOARD_PATH = "/dashboard"


def build_refresh_loop(settings: Settings) -> tuple[RefreshLoop, CoinGeckoClient]:
    """Wire the price client, fetcher, snapshot service and refresh loop.

    Raises:
        ConfigurationError: If the configured asset table file is invalid.
    """
    client = CoinGeckoClient(
        base_url=settings.coingecko_base_url,
        timeout=settings.request_timeout,
        api_key=settings.coingecko_api_key.get_secret_value(),
    )
    fetcher = ReferencePriceFetcher(
        client,
        asset_id=settings.reference_asset_id,
        fallback_price_usd=settings.fallback_price_usd,
    )
    service = SnapshotService(fetcher, load_asset_table(settings.asset_table_file))
    refresh_loop = RefreshLoop(
        service.load_snapshot,
        interval_seconds=settings.refresh_interval_seconds,
    )
    return refresh_loop, client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle.

    On startup: start the refresh loop.
    On shutdown: cancel the loop, then close the price client.
    """
    refresh_loop: RefreshLoop = app.state.refresh_loop
    refresh_loop.start()
    log.info("startup_complete")

    yield

    await refresh_loop.stop()
    price_client: CoinGeckoClient | None = app.state.price_client
    if price_client is not None:
        await price_client.close()
    log.info("shutdown_complete")


def create_app(
    settings: Settings | None = None,
    refresh_loop: RefreshLoop | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings (default: cached settings).
        refresh_loop: Pre-built loop; when omitted one is wired from settings.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    price_client: CoinGeckoClient | None = None
    if refresh_loop is None:
        refresh_loop, price_client = build_refresh_loop(settings)

    application = FastAPI(
        title=settings.app_name,
        description="Total value locked across the Flare ecosystem",
        version=settings.app_version,
        lifespan=lifespan,
    )
    application.state.refresh_loop = refresh_loop
    application.state.price_client = price_client

    application.include_router(health.router, prefix="/api")

    @application.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url=DASHBOARD_PATH)

    # Must be mounted AFTER registering API routes
    dashboard = create_dashboard(refresh_loop, settings)
    application = gr.mount_gradio_app(
        app=application,
        blocks=dashboard,
        path=DASHBOARD_PATH,
    )
    log.info("dashboard_mounted", path=DASHBOARD_PATH)

    return application


app = create_app()


def main() -> None:
    """Run the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "flaretvl.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
