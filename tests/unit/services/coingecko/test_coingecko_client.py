"""Unit tests for the CoinGecko API client.

Tests cover:
- Fetching a USD price with the expected query
- Missing coin / missing field / non-positive or non-finite price handling
- Malformed payloads and HTTP errors
"""

import httpx
import pytest
import pytest_asyncio
import respx

from flaretvl.core.exceptions import ExternalServiceError
from flaretvl.services.coingecko import CoinGeckoClient

PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"


@pytest_asyncio.fixture
async def coingecko_client():
    """CoinGeckoClient closed after the test."""
    client = CoinGeckoClient()
    yield client
    await client.close()


class TestFetchUsdPrice:
    """Tests for fetch_usd_price()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_price(self, coingecko_client: CoinGeckoClient) -> None:
        """
        Given: CoinGecko returns {"ripple": {"usd": 2.31}}
        When: fetch_usd_price("ripple") is called
        Then: Returns 2.31 and sends ids/vs_currencies query params
        """
        route = respx.get(PRICE_URL).mock(
            return_value=httpx.Response(200, json={"ripple": {"usd": 2.31}})
        )

        price = await coingecko_client.fetch_usd_price("ripple")

        assert price == 2.31
        request = route.calls.last.request
        assert request.url.params["ids"] == "ripple"
        assert request.url.params["vs_currencies"] == "usd"

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_coin_raises(self, coingecko_client: CoinGeckoClient) -> None:
        """An empty mapping means the coin id is unknown."""
        respx.get(PRICE_URL).mock(return_value=httpx.Response(200, json={}))

        with pytest.raises(ExternalServiceError, match="No USD price"):
            await coingecko_client.fetch_usd_price("ripple")

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_usd_field_raises(self, coingecko_client: CoinGeckoClient) -> None:
        """A coin entry without "usd" is unusable."""
        respx.get(PRICE_URL).mock(
            return_value=httpx.Response(200, json={"ripple": {"eur": 2.0}})
        )

        with pytest.raises(ExternalServiceError, match="No USD price"):
            await coingecko_client.fetch_usd_price("ripple")

    @pytest.mark.asyncio
    @respx.mock
    async def test_zero_price_raises(self, coingecko_client: CoinGeckoClient) -> None:
        """A zero price is treated as missing."""
        respx.get(PRICE_URL).mock(
            return_value=httpx.Response(200, json={"ripple": {"usd": 0}})
        )

        with pytest.raises(ExternalServiceError, match="Non-positive"):
            await coingecko_client.fetch_usd_price("ripple")

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_numeric_price_raises(self, coingecko_client: CoinGeckoClient) -> None:
        """A non-numeric price fails validation."""
        respx.get(PRICE_URL).mock(
            return_value=httpx.Response(200, json={"ripple": {"usd": "n/a"}})
        )

        with pytest.raises(ExternalServiceError, match="Malformed"):
            await coingecko_client.fetch_usd_price("ripple")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            '{"ripple": {"usd": NaN}}',
            '{"ripple": {"usd": Infinity}}',
            '{"ripple": {"usd": -Infinity}}',
            '{"ripple": {"usd": true}}',
        ],
    )
    @respx.mock
    async def test_non_finite_or_boolean_price_raises(
        self, coingecko_client: CoinGeckoClient, body: str
    ) -> None:
        """
        Given: CoinGecko returns NaN, an infinity or a boolean as the price
        When: fetch_usd_price("ripple") is called
        Then: The payload is rejected instead of yielding a live price
        """
        respx.get(PRICE_URL).mock(
            return_value=httpx.Response(
                200, text=body, headers={"content-type": "application/json"}
            )
        )

        with pytest.raises(ExternalServiceError, match="Malformed"):
            await coingecko_client.fetch_usd_price("ripple")

    @pytest.mark.asyncio
    @respx.mock
    async def test_integer_price_accepted(self, coingecko_client: CoinGeckoClient) -> None:
        """A whole-number price is still a valid price."""
        respx.get(PRICE_URL).mock(
            return_value=httpx.Response(200, json={"ripple": {"usd": 3}})
        )

        assert await coingecko_client.fetch_usd_price("ripple") == 3.0

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body_raises(self, coingecko_client: CoinGeckoClient) -> None:
        """An HTML error page is a malformed payload."""
        respx.get(PRICE_URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ExternalServiceError, match="Malformed"):
            await coingecko_client.fetch_usd_price("ripple")

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_raises(self, coingecko_client: CoinGeckoClient) -> None:
        """HTTP 429 surfaces as ExternalServiceError with status code."""
        respx.get(PRICE_URL).mock(return_value=httpx.Response(429))

        with pytest.raises(ExternalServiceError) as exc_info:
            await coingecko_client.fetch_usd_price("ripple")

        assert exc_info.value.status_code == 429
        assert exc_info.value.service == "coingecko"


class TestCoinGeckoClientInit:
    """Tests for client construction."""

    def test_api_key_header(self) -> None:
        """A demo API key is sent in its header."""
        client = CoinGeckoClient(api_key="demo-key")
        assert client.headers[CoinGeckoClient.API_KEY_HEADER] == "demo-key"

    def test_no_api_key_header_by_default(self) -> None:
        """Without a key no auth header is sent."""
        client = CoinGeckoClient()
        assert CoinGeckoClient.API_KEY_HEADER not in client.headers
        assert client.base_url == CoinGeckoClient.BASE_URL
