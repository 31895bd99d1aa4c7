"""Pydantic models for CoinGecko API responses.

API Documentation: https://docs.coingecko.com/reference/simple-price
"""

from pydantic import BaseModel, ConfigDict, Field, RootModel


class CoinPrice(BaseModel):
    """Prices of one coin keyed by quote currency.

    Attributes:
        usd: Finite price in US dollars, absent when not requested or unknown.
            Booleans, NaN and infinities fail validation.
    """

    model_config = ConfigDict(extra="allow")

    usd: float | None = Field(default=None, strict=True, allow_inf_nan=False)


class SimplePriceResponse(RootModel[dict[str, CoinPrice]]):
    """Response from ``/simple/price``: coin id to prices.

    Example payload::

        {"ripple": {"usd": 2.18}}
    """

    def price_of(self, coin_id: str) -> float | None:
        """Return the USD price of ``coin_id`` or None when missing."""
        entry = self.root.get(coin_id)
        if entry is None:
            return None
        return entry.usd
