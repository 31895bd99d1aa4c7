"""Snapshot builder: combine the reference price with the asset table."""

from collections.abc import Iterable

from flaretvl.core.tvl.models import (
    AssetEntry,
    AssetSpec,
    PriceSource,
    ProtocolEntry,
    Snapshot,
)


def build_asset_entry(spec: AssetSpec, reference_price_usd: float) -> AssetEntry:
    """Resolve one table row into a breakdown entry.

    Args:
        spec: Configured asset row.
        reference_price_usd: Price applied to rows without a fixed price.

    Returns:
        AssetEntry for the current cycle.
    """
    unit_price = reference_price_usd if spec.uses_reference_price else spec.price_usd
    return AssetEntry(
        symbol=spec.symbol,
        locked_value_usd=spec.locked_value_usd,
        unit_price_usd=float(unit_price),  # type: ignore[arg-type]
        location_description=spec.location,
    )


def build_snapshot(
    reference_price_usd: float,
    assets: Iterable[AssetSpec],
    protocols: Iterable[ProtocolEntry] = (),
    source: PriceSource = PriceSource.LIVE,
) -> Snapshot:
    """Build a snapshot from the reference price and the asset table.

    Deterministic given its inputs: only the reference price varies
    between cycles.

    Args:
        reference_price_usd: Live (or fallback) price of the reference asset.
        assets: Asset table rows, in display order.
        protocols: Per-protocol breakdown.
        source: Whether the reference price is live or the fallback.

    Returns:
        A new Snapshot.
    """
    entries = {spec.symbol: build_asset_entry(spec, reference_price_usd) for spec in assets}
    return Snapshot(
        assets=entries,
        reference_price_usd=reference_price_usd,
        reference_price_source=source,
        protocols=tuple(protocols),
    )
