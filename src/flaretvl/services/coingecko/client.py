"""CoinGecko API client for spot prices.

API Documentation: https://docs.coingecko.com/reference/simple-price
Rate Limits: ~30 requests/minute on the public tier (no auth required)
"""

import structlog
from pydantic import ValidationError

from flaretvl.core.exceptions import ExternalServiceError
from flaretvl.services.base import BaseAPIClient
from flaretvl.services.coingecko.models import SimplePriceResponse

log = structlog.get_logger(__name__)


class CoinGeckoClient(BaseAPIClient):
    """CoinGecko API client.

    Endpoints used:
        - GET /simple/price - Spot price of one or more coins

    Example:
        client = CoinGeckoClient()
        try:
            price = await client.fetch_usd_price("ripple")
        finally:
            await client.close()
    """

    BASE_URL = "https://api.coingecko.com/api/v3"
    SERVICE_NAME = "coingecko"
    DEFAULT_TIMEOUT = 10.0
    API_KEY_HEADER = "x-cg-demo-api-key"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        api_key: str = "",
    ) -> None:
        """Initialize CoinGecko client.

        Args:
            base_url: API base URL.
            timeout: Request timeout in seconds.
            api_key: Optional demo API key, sent as a header when set.
        """
        headers = {"accept": "application/json"}
        if api_key:
            headers[self.API_KEY_HEADER] = api_key
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            service_name=self.SERVICE_NAME,
        )
        log.info("coingecko_client_initialized", base_url=base_url)

    async def fetch_usd_price(self, coin_id: str) -> float:
        """Fetch the USD spot price of a coin.

        Args:
            coin_id: CoinGecko coin id (e.g., "ripple").

        Returns:
            Positive USD price.

        Raises:
            ExternalServiceError: If the request fails or the payload has no
                usable price for ``coin_id``.
        """
        log.debug("fetching_usd_price", coin_id=coin_id)

        response = await self.get(
            "/simple/price",
            params={"ids": coin_id, "vs_currencies": "usd"},
        )

        try:
            payload = SimplePriceResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ExternalServiceError(
                service=self.SERVICE_NAME,
                message=f"Malformed price payload: {e}",
            ) from e

        price = payload.price_of(coin_id)
        if price is None:
            raise ExternalServiceError(
                service=self.SERVICE_NAME,
                message=f"No USD price for '{coin_id}'",
            )
        if price <= 0:
            raise ExternalServiceError(
                service=self.SERVICE_NAME,
                message=f"Non-positive USD price for '{coin_id}': {price}",
            )

        log.debug("usd_price_fetched", coin_id=coin_id, price=price)
        return price
