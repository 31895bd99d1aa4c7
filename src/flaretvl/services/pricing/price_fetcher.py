"""Reference price fetcher with constant fallback.

The dashboard needs exactly one live figure: the USD price of the reference
asset. Any failure to obtain it is logged and masked by a fixed fallback
price, so callers always receive a usable quote.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

import structlog

from flaretvl.core.exceptions import ExternalServiceError
from flaretvl.core.tvl.models import PriceSource

log = structlog.get_logger(__name__)

DEFAULT_FALLBACK_PRICE_USD = 2.18


class UsdPriceClient(Protocol):
    """Anything that can fetch a USD spot price by coin id."""

    async def fetch_usd_price(self, coin_id: str) -> float:
        """Return the USD price or raise on failure."""
        ...


@dataclass(frozen=True)
class PriceQuote:
    """Outcome of one reference price fetch."""

    asset_id: str
    price_usd: float
    source: PriceSource
    fetched_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    error: str | None = None

    @property
    def is_fallback(self) -> bool:
        """True when the live fetch failed and the fallback was used."""
        return self.source == PriceSource.FALLBACK


class ReferencePriceFetcher:
    """Fetch the reference asset price, degrading to a constant on failure.

    Attributes:
        asset_id: CoinGecko id of the reference asset.
        fallback_price_usd: Price returned when the fetch fails.
    """

    def __init__(
        self,
        client: UsdPriceClient,
        asset_id: str = "ripple",
        fallback_price_usd: float = DEFAULT_FALLBACK_PRICE_USD,
    ) -> None:
        self._client = client
        self.asset_id = asset_id
        self.fallback_price_usd = fallback_price_usd

    async def fetch(self) -> PriceQuote:
        """Fetch the reference price.

        Returns:
            A live quote, or a fallback quote carrying the error text.
            Never raises.
        """
        try:
            price = await self._client.fetch_usd_price(self.asset_id)
        except ExternalServiceError as e:
            return self._fallback(str(e))
        except Exception as e:
            log.error("reference_price_unexpected_error", asset_id=self.asset_id, error=str(e))
            return self._fallback(f"{type(e).__name__}: {e}")

        log.info("reference_price_fetched", asset_id=self.asset_id, price=price)
        return PriceQuote(asset_id=self.asset_id, price_usd=price, source=PriceSource.LIVE)

    def _fallback(self, error: str) -> PriceQuote:
        log.warning(
            "reference_price_fallback",
            asset_id=self.asset_id,
            fallback_price=self.fallback_price_usd,
            error=error,
        )
        return PriceQuote(
            asset_id=self.asset_id,
            price_usd=self.fallback_price_usd,
            source=PriceSource.FALLBACK,
            error=error,
        )
