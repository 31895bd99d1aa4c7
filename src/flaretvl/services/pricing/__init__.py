"""Reference price fetching with fallback."""

from flaretvl.services.pricing.price_fetcher import PriceQuote, ReferencePriceFetcher

__all__ = ["PriceQuote", "ReferencePriceFetcher"]
