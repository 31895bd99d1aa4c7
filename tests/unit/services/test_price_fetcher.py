"""Tests for the reference price fetcher and its fallback."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import respx

from flaretvl.core.exceptions import ExternalServiceError
from flaretvl.core.tvl.models import PriceSource
from flaretvl.services.coingecko import CoinGeckoClient
from flaretvl.services.pricing import ReferencePriceFetcher
from flaretvl.services.pricing.price_fetcher import DEFAULT_FALLBACK_PRICE_USD


class TestReferencePriceFetcher:
    """Tests for ReferencePriceFetcher.fetch()."""

    @pytest.mark.asyncio
    async def test_live_price(self, mock_price_client: MagicMock) -> None:
        """
        Given: A client returning 2.5
        When: fetch() is called
        Then: Returns a live quote for the reference asset
        """
        fetcher = ReferencePriceFetcher(mock_price_client, asset_id="ripple")

        quote = await fetcher.fetch()

        assert quote.price_usd == 2.5
        assert quote.source == PriceSource.LIVE
        assert not quote.is_fallback
        assert quote.error is None
        mock_price_client.fetch_usd_price.assert_awaited_once_with("ripple")

    @pytest.mark.asyncio
    async def test_service_error_falls_back(self) -> None:
        """An ExternalServiceError yields the fallback price, not an exception."""
        client = MagicMock()
        client.fetch_usd_price = AsyncMock(
            side_effect=ExternalServiceError(service="coingecko", message="HTTP 500")
        )
        fetcher = ReferencePriceFetcher(client)

        quote = await fetcher.fetch()

        assert quote.price_usd == DEFAULT_FALLBACK_PRICE_USD == 2.18
        assert quote.is_fallback
        assert "HTTP 500" in (quote.error or "")

    @pytest.mark.asyncio
    async def test_unexpected_error_falls_back(self) -> None:
        """Any other exception is masked the same way."""
        client = MagicMock()
        client.fetch_usd_price = AsyncMock(side_effect=KeyError("usd"))
        fetcher = ReferencePriceFetcher(client, fallback_price_usd=1.23)

        quote = await fetcher.fetch()

        assert quote.price_usd == 1.23
        assert quote.source == PriceSource.FALLBACK
        assert "KeyError" in (quote.error or "")

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure_through_real_client(self) -> None:
        """A connection error from CoinGecko degrades to the fallback constant."""
        respx.get("https://api.coingecko.com/api/v3/simple/price").mock(
            side_effect=httpx.ConnectError("unreachable")
        )
        client = CoinGeckoClient()
        try:
            quote = await ReferencePriceFetcher(client).fetch()
        finally:
            await client.close()

        assert quote.price_usd == 2.18
        assert quote.is_fallback

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_field_through_real_client(self) -> None:
        """A payload without the asset degrades to the fallback constant."""
        respx.get("https://api.coingecko.com/api/v3/simple/price").mock(
            return_value=httpx.Response(200, json={"bitcoin": {"usd": 90000}})
        )
        client = CoinGeckoClient()
        try:
            quote = await ReferencePriceFetcher(client, asset_id="ripple").fetch()
        finally:
            await client.close()

        assert quote.price_usd == 2.18
        assert quote.asset_id == "ripple"

    @pytest.mark.asyncio
    @respx.mock
    async def test_nan_price_through_real_client(self) -> None:
        """
        Given: CoinGecko answers with a NaN price
        When: fetch() is called
        Then: The quote is the fallback constant, not a live NaN
        """
        respx.get("https://api.coingecko.com/api/v3/simple/price").mock(
            return_value=httpx.Response(
                200,
                text='{"ripple": {"usd": NaN}}',
                headers={"content-type": "application/json"},
            )
        )
        client = CoinGeckoClient()
        try:
            quote = await ReferencePriceFetcher(client, asset_id="ripple").fetch()
        finally:
            await client.close()

        assert quote.price_usd == 2.18
        assert quote.source == PriceSource.FALLBACK
