"""Fetch-and-build step run by the refresh loop."""

import structlog

from flaretvl.core.tvl.asset_table import AssetTable, default_asset_table
from flaretvl.core.tvl.builder import build_snapshot
from flaretvl.core.tvl.models import Snapshot
from flaretvl.services.pricing.price_fetcher import ReferencePriceFetcher

log = structlog.get_logger(__name__)


class SnapshotService:
    """Combine the live reference price with the configured asset table."""

    def __init__(
        self,
        price_fetcher: ReferencePriceFetcher,
        asset_table: AssetTable | None = None,
    ) -> None:
        self._price_fetcher = price_fetcher
        self._asset_table = asset_table or default_asset_table()

    @property
    def asset_table(self) -> AssetTable:
        """Asset table applied on every cycle."""
        return self._asset_table

    async def load_snapshot(self) -> Snapshot:
        """Fetch the reference price and build a fresh snapshot."""
        quote = await self._price_fetcher.fetch()
        snapshot = build_snapshot(
            reference_price_usd=quote.price_usd,
            assets=self._asset_table.assets,
            protocols=self._asset_table.protocols,
            source=quote.source,
        )
        log.info(
            "snapshot_built",
            total_locked_value_usd=snapshot.total_locked_value_usd,
            assets=len(snapshot.assets),
            reference_price=snapshot.reference_price_usd,
            price_source=snapshot.reference_price_source.value,
        )
        return snapshot
