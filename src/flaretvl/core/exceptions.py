"""Flare TVL exception hierarchy.

This module defines the base exception class and specialized exceptions
for the few error categories the dashboard distinguishes.
"""


class FlareTVLError(Exception):
    """Base exception for all dashboard errors.

    All custom exceptions should inherit from this class to enable
    consistent error handling and logging.
    """

    pass


class ConfigurationError(FlareTVLError):
    """Raised when configuration is invalid or missing.

    Use this for issues with environment variables or the asset table file.

    Example:
        raise ConfigurationError("Asset table file not found: assets.json")
    """

    pass


class ExternalServiceError(FlareTVLError):
    """Raised when an external service call fails.

    Use this for HTTP, transport and payload errors from CoinGecko.

    Attributes:
        service: Name of the external service that failed.
        status_code: HTTP status code if available, None otherwise.

    Example:
        raise ExternalServiceError(service="coingecko", message="Rate limited", status_code=429)
    """

    def __init__(
        self,
        service: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service}: {message}")
