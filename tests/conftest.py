"""Shared pytest fixtures for Flare TVL tests.

This module provides fixtures for:
- Environment configuration with a fresh settings cache
- Asset tables and snapshots
- Fake price clients
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from flaretvl.core.tvl.models import AssetSpec, PriceSource, ProtocolEntry, Snapshot

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    load_dotenv()

    os.environ.setdefault("FLARETVL_ENV", "test")
    os.environ.setdefault("COINGECKO_BASE_URL", "https://api.coingecko.com/api/v3")

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Give every test a freshly read Settings instance."""
    from flaretvl.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Domain Fixtures
# =============================================================================


@pytest.fixture
def two_asset_table() -> tuple[AssetSpec, ...]:
    """Minimal table: A follows the reference price, B has a fixed price."""
    return (
        AssetSpec(symbol="A", locked_value_usd=100, location="Pool A"),
        AssetSpec(symbol="B", locked_value_usd=50, location="Pool B", price_usd=0.5),
    )


@pytest.fixture
def sample_snapshot() -> Snapshot:
    """Snapshot shaped like the built-in Flare table."""
    from flaretvl.core.tvl.builder import build_snapshot
    from flaretvl.constants.assets import DEFAULT_ASSET_TABLE, DEFAULT_PROTOCOLS

    return build_snapshot(
        reference_price_usd=2.5,
        assets=DEFAULT_ASSET_TABLE,
        protocols=DEFAULT_PROTOCOLS,
        source=PriceSource.LIVE,
    )


@pytest.fixture
def protocols() -> tuple[ProtocolEntry, ...]:
    """Two-protocol breakdown."""
    return (
        ProtocolEntry(name="Kinetic", locked_value_usd=80_000_000),
        ProtocolEntry(name="FTSO", locked_value_usd=25_000_000),
    )


# =============================================================================
# Mock External APIs
# =============================================================================


@pytest.fixture
def mock_price_client() -> MagicMock:
    """Mock CoinGecko client returning a fixed XRP price."""
    mock = MagicMock()
    mock.fetch_usd_price = AsyncMock(return_value=2.5)
    return mock
