"""Health check endpoint with refresh loop status."""

from typing import Any

from fastapi import APIRouter, Request

from flaretvl.config import get_settings
from flaretvl.core.refresh import RefreshLoop
from flaretvl.core.tvl.models import PriceSource

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request) -> dict[str, Any]:
    """
    Health check endpoint with refresh loop status.

    Returns:
        dict with overall status, version and the held snapshot's metadata.
        Status is "ok" once a snapshot with a live price is held, "degraded"
        while loading, on fallback price, or after the loop has stopped.
    """
    settings = get_settings()
    refresh_loop: RefreshLoop = request.app.state.refresh_loop
    state = refresh_loop.state
    snapshot = state.snapshot

    healthy = (
        refresh_loop.running
        and not state.loading
        and snapshot.reference_price_source == PriceSource.LIVE
    )

    return {
        "status": "ok" if healthy else "degraded",
        "version": settings.app_version,
        "refresh": {
            "running": refresh_loop.running,
            "phase": state.phase.value,
            "refresh_count": state.refresh_count,
            "last_refreshed_at": state.refreshed_at.isoformat() if state.refreshed_at else None,
            "interval_seconds": refresh_loop.interval_seconds,
        },
        "price": {
            "asset_id": settings.reference_asset_id,
            "price_usd": snapshot.reference_price_usd,
            "source": snapshot.reference_price_source.value,
        },
    }
