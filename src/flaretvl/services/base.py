"""Base API client.

Wraps a lazily created ``httpx.AsyncClient`` and maps every transport or
status failure to ExternalServiceError. Requests are attempted once: the
refresh loop waits for its next tick instead of retrying.
"""

from typing import Any

import httpx
import structlog

from flaretvl.core.exceptions import ExternalServiceError

log = structlog.get_logger(__name__)


class BaseAPIClient:
    """Base API client with lazy initialization and error mapping.

    Attributes:
        base_url: Base URL for all requests.
        timeout: Request timeout in seconds.
        headers: Default headers for all requests.

    Example:
        client = BaseAPIClient(base_url="https://api.example.com")
        response = await client.get("/endpoint")
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        service_name: str | None = None,
    ) -> None:
        """Initialize BaseAPIClient.

        Args:
            base_url: Base URL for all requests.
            timeout: Request timeout in seconds (default: 30).
            headers: Default headers for all requests.
            service_name: Name reported in errors (default: base_url).
        """
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.service_name = service_name or base_url
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
            )
            log.debug("httpx_client_created", base_url=self.base_url)
        return self._client

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            log.debug("httpx_client_closed", base_url=self.base_url)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, ...).
            path: Request path (appended to base_url).
            **kwargs: Additional arguments passed to httpx.request.

        Returns:
            httpx.Response on success.

        Raises:
            ExternalServiceError: On transport errors or non-2xx responses.
        """
        client = await self._get_client()
        log.debug("request_attempt", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            log.warning(
                "request_status_error",
                method=method,
                path=path,
                status_code=status_code,
            )
            raise ExternalServiceError(
                service=self.service_name,
                message=f"HTTP {status_code} for {method} {path}",
                status_code=status_code,
            ) from e
        except httpx.HTTPError as e:
            log.warning(
                "request_connection_error",
                method=method,
                path=path,
                error=str(e) or type(e).__name__,
            )
            raise ExternalServiceError(
                service=self.service_name,
                message=f"{type(e).__name__}: {e}",
            ) from e

        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request.

        Args:
            path: Request path.
            **kwargs: Additional arguments passed to httpx.

        Returns:
            httpx.Response on success.
        """
        return await self._request("GET", path, **kwargs)
