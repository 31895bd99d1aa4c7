"""Application settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Flare TVL dashboard configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="Flare TVL Dashboard", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Price API
    coingecko_base_url: str = Field(
        default="https://api.coingecko.com/api/v3",
        description="CoinGecko API base URL",
    )
    coingecko_api_key: SecretStr = Field(
        default=SecretStr(""), description="Optional CoinGecko demo API key"
    )
    request_timeout: float = Field(
        default=10.0, gt=0, description="HTTP request timeout in seconds"
    )

    # Reference asset
    reference_asset_id: str = Field(
        default="ripple", description="CoinGecko id of the live-priced asset"
    )
    reference_asset_label: str = Field(
        default="XRP", description="Display label of the live-priced asset"
    )
    fallback_price_usd: float = Field(
        default=2.18, gt=0, description="Price used when the live fetch fails"
    )

    # Refresh
    refresh_interval_seconds: float = Field(
        default=60.0, ge=1, description="Seconds between snapshot refreshes"
    )
    ui_poll_seconds: float = Field(
        default=5.0, gt=0, description="Seconds between dashboard re-renders"
    )

    # Placeholder figures
    data_as_of: str = Field(default="Dec 3, 2025", description="Header date label")
    change_24h_label: str = Field(default="+0.70%", description="24h change card value")
    featured_asset: str = Field(default="FXRP", description="Asset shown in its own card")
    asset_table_file: Path | None = Field(
        default=None, description="Optional JSON file replacing the built-in asset table"
    )

    @field_validator("coingecko_base_url")
    @classmethod
    def validate_coingecko_base_url(cls, v: str) -> str:
        """Validate CoinGecko URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("CoinGecko base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("reference_asset_id")
    @classmethod
    def validate_reference_asset_id(cls, v: str) -> str:
        """Reference asset id must be a non-empty CoinGecko id."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Reference asset id must not be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
