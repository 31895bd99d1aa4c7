"""CoinGecko price API client."""

from flaretvl.services.coingecko.client import CoinGeckoClient

__all__ = ["CoinGeckoClient"]
